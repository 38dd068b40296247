"""Command-line argument parsing for foldertree.

This module defines the command-line interface for foldertree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from foldertree import __version__
from foldertree.entry_filter.entry_filter import EntryFilter
from foldertree.sorting.entry_comparator import EntryComparator
from foldertree.sorting.sorting_method import SortingMethod


def create_filter_action(entry_filter: EntryFilter) -> Type[argparse.Action]:
    """Create a custom action class that feeds filter options into an EntryFilter.

    Rules are added to the filter as their options are parsed, so a rule set
    only becomes active when its option actually appears on the command line.

    Args:
        entry_filter: The filter to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class EntryFilterAction(argparse.Action):
        """Action adding one name or extension rule per occurrence of its option."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            value = str(values)
            if self.dest == "include_ext":
                entry_filter.add_included_extension(value)
            elif self.dest == "exclude_ext":
                entry_filter.add_excluded_extension(value)
            elif self.dest == "include_file":
                entry_filter.add_included_file(value)
            else:  # exclude_file
                entry_filter.add_excluded_file(value)

            # Keep the raw values on the namespace as well
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(value)

    return EntryFilterAction


def create_sort_action(comparator: EntryComparator) -> Type[argparse.Action]:
    """Create a custom action class that appends sorting methods to an EntryComparator.

    The order of ``-s`` options on the command line is the order of the
    comparator's sorting methods. Repeating a method logs a warning and is
    otherwise ignored.

    Args:
        comparator: The comparator to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class SortAction(argparse.Action):
        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            method = SortingMethod(str(values))
            comparator.add_last(method)
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(method)

    return SortAction


def create_verbosity_parser() -> argparse.ArgumentParser:
    """Create a parser that only knows the verbosity option.

    It is used as a parent of the full parser and, on its own with
    ``parse_known_args``, to read the verbosity before the full parse runs.

    Example:
        >>> args, _ = create_verbosity_parser().parse_known_args(["--verb", "-v", "-s", "size", "dir"])
        >>> args.verbose
        2
    """
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log configuration details to stderr (-vv for debug output).",
    )
    return parser


def create_parser(entry_filter: EntryFilter, comparator: EntryComparator) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        entry_filter: The filter to update during parsing.
        comparator: The comparator to update during parsing.

    Returns:
        An ArgumentParser instance configured with foldertree's options.
    """
    description = """
    foldertree: Render a directory hierarchy as a text tree.

    Prints a tree in the style of the Unix `tree` command, with optional
    filtering by file name, extension and size, and a configurable order
    of entries within each directory.

    Sorting:
    Sorting methods given with -s are all evaluated and the LAST one decides
    the order. To sort directories first, give -s directories_first last.
    """

    epilog = """
    Examples:
      # Basic tree of a project
      foldertree /path/to/project

      # Hide .log files except audit.log
      foldertree -x log -I audit.log /path/to/project

      # Hide compiled files and caches, keep one specific .pyc
      foldertree -x pyc -X __pycache__ -I keep.pyc /path/to/project

      # Hide files larger than 1 MB
      foldertree -m 1MB /path/to/project

      # Largest files first
      foldertree -s size -r /path/to/project

      # Save the tree to a file
      foldertree -o tree.txt /path/to/project

      # Display version information and exit
      foldertree -V
    """

    parser = argparse.ArgumentParser(
        prog="foldertree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        parents=[create_verbosity_parser()],
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"foldertree {__version__}", help="Show the version and exit"
    )

    FilterAction = create_filter_action(entry_filter)
    SortAction = create_sort_action(comparator)

    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to render.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, the tree is written to stdout.",
    )
    parser.add_argument(
        "-i",
        "--include-ext",
        dest="include_ext",
        metavar="EXT",
        action=FilterAction,
        help=(
            "Show files with this extension even if -x hides it, unless named with -X "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-x",
        "--exclude-ext",
        dest="exclude_ext",
        metavar="EXT",
        action=FilterAction,
        help="Hide files with this extension unless named with -I (can be specified multiple times).",
    )
    parser.add_argument(
        "-I",
        "--include-file",
        dest="include_file",
        metavar="NAME",
        action=FilterAction,
        help="Show a file with this exact name even if -x hides it (can be specified multiple times).",
    )
    parser.add_argument(
        "-X",
        "--exclude-file",
        dest="exclude_file",
        metavar="NAME",
        action=FilterAction,
        help=(
            "Hide directories with this exact name, and files with this name that -i would show "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-m",
        "--max-size",
        metavar="SIZE",
        help="Hide files larger than SIZE, e.g. 500KB, 1MiB or 2048.",
    )
    parser.add_argument(
        "-s",
        "--sort",
        dest="sort",
        metavar="METHOD",
        choices=[method.value for method in SortingMethod],
        action=SortAction,
        help=(
            "Sorting method to add, one of: "
            + ", ".join(method.value for method in SortingMethod)
            + ". Can be specified multiple times; the last one decides the order."
        ),
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Reverse the sort order.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")
