from .util import get_logger
from . import show_mode
from . import from_path
from . import to_os
from . import unpack_mode

logger = get_logger()


def setup_parser(parser):
    parser.add_argument(
        "--verbose", "-v", help="more verbose output", action="store_true"
    )
    parser.set_defaults(subcommand=lambda _: parser.print_help())


def set_verbose_logging(logger):
    import logging

    handler = logging.StreamHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(prog="git-filemode")
    setup_parser(parser)

    subparsers = parser.add_subparsers()

    def add_subcommand(name, help, setup, func):
        subparser = subparsers.add_parser(name, help=help)
        setup(subparser)
        subparser.set_defaults(subcommand=func)

    add_subcommand(
        "show",
        help="Parse octal modes and show their packed form and classification",
        setup=show_mode.setup_parser,
        func=show_mode.show_mode,
    )
    add_subcommand(
        "from-path",
        help="Compute the tree entry mode of files in the working tree",
        setup=from_path.setup_parser,
        func=from_path.from_path,
    )
    add_subcommand(
        "to-os",
        help="Show the file permission bits a mode is checked out with",
        setup=to_os.setup_parser,
        func=to_os.to_os,
    )
    add_subcommand(
        "unpack",
        help="Decode modes packed as 4 little endian bytes",
        setup=unpack_mode.setup_parser,
        func=unpack_mode.unpack_mode,
    )

    args = parser.parse_args(argv)
    if args.verbose:
        set_verbose_logging(logger)

    args.subcommand(args)


if __name__ == "__main__":
    main()
