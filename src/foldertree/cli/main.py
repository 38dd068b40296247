"""Command-line interface for foldertree.

This module provides the command-line entry point, which turns options into
an entry filter and a comparator, renders the tree and writes it to stdout
or a file.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including failure to write the output file)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Render the current directory
    $ foldertree .

    # Hide temporary files and write the result to a file
    $ foldertree -x tmp -o tree.txt /path/to/dir
"""

import logging
import sys
from typing import List, Optional

from foldertree.cli.argparser import create_parser, create_verbosity_parser, validate_args
from foldertree.entry_filter.base_filter import BaseEntryFilter
from foldertree.entry_filter.composite_filter import CompositeEntryFilter
from foldertree.entry_filter.entry_filter import EntryFilter
from foldertree.entry_filter.size_filter import SizeEntryFilter
from foldertree.file_system_tree.tree_renderer import TreeRenderer
from foldertree.sorting.entry_comparator import EntryComparator

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by the number of -v flags.

    Args:
        verbosity: 0 for warnings only, 1 for info, 2 or more for debug.
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def build_filter(entry_filter: EntryFilter, max_size: Optional[str]) -> Optional[BaseEntryFilter]:
    """Combine the name/extension filter with an optional size limit.

    Args:
        entry_filter: Filter populated from the command line.
        max_size: Value of --max-size, if given.

    Returns:
        The filter to render with, or None if no filtering was requested.

    Raises:
        ValueError: If max_size cannot be parsed.
    """
    filters: List[BaseEntryFilter] = []
    if entry_filter.has_rules():
        filters.append(entry_filter)
    if max_size is not None:
        size_filter = SizeEntryFilter(max_size)
        if size_filter.has_rules():
            filters.append(size_filter)

    if not filters:
        return None
    if len(filters) == 1:
        return filters[0]
    return CompositeEntryFilter(filters)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the foldertree command-line interface.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    if argv is None:
        argv = sys.argv[1:]

    # Logging is configured before the full parse, which fills the comparator
    # and may already warn about duplicate sorting methods.
    verbosity_args, _ = create_verbosity_parser().parse_known_args(argv)
    configure_logging(verbosity_args.verbose)

    try:
        entry_filter = EntryFilter()
        comparator = EntryComparator()

        parser = create_parser(entry_filter, comparator)
        args = parser.parse_args(argv)
        validate_args(args)

        comparator.set_reverse(args.reverse)
        active_filter = build_filter(entry_filter, args.max_size)

        renderer = TreeRenderer()
        tree = renderer.render(
            args.directory,
            entry_filter=active_filter,
            comparator=comparator if comparator.sorting_methods else None,
        )

        if args.output:
            renderer.flush_tree(args.output)
        else:
            try:
                sys.stdout.write(tree)
                sys.stdout.flush()
            except BrokenPipeError:
                pass

    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
