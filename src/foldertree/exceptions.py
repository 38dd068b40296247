class TreeWriteError(OSError):
    """
    Exception raised when a rendered tree cannot be written to its destination.

    The original ``OSError`` is chained as ``__cause__`` so callers can still
    inspect the underlying errno.

    Attributes:
        path (str): Destination that could not be written.

    Example:
        >>> error = TreeWriteError("/read-only/tree.txt")
        >>> str(error)
        'Unable to write tree to /read-only/tree.txt'
        >>> isinstance(error, OSError)
        True
    """

    def __init__(self, path: str, reason: str = "") -> None:
        """
        Initialize the exception with the destination path.

        Args:
            path (str): Destination that could not be written.
            reason (str, optional): Short description of the failure, appended to the message.
        """
        self.path = path
        message = f"Unable to write tree to {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
