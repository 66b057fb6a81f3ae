import argparse
import pathlib

from . import config
from .filemode import FileMode, NoEquivalentError
from .util import die_error, get_logger

logger = get_logger("from_path")


def setup_parser(parser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--filemode",
        dest="filemode",
        help="trust the executable bit (default: core.filemode)",
        action="store_true",
        default=None,
    )
    group.add_argument(
        "--no-filemode",
        dest="filemode",
        help="ignore the executable bit",
        action="store_false",
    )
    parser.add_argument("path", nargs="+", help="files to inspect")


def from_path(args):
    trust_executable_bit = args.filemode
    if trust_executable_bit is None:
        trust_executable_bit = config.filemode_enabled()
    logger.debug(f"trust executable bit: {trust_executable_bit}")
    for p in args.path:
        try:
            stat = pathlib.Path(p).lstat()
        except OSError as e:
            die_error(f"error: {p}: {e.strerror}")
        try:
            mode = FileMode.from_stat_mode(
                stat.st_mode, trust_executable_bit=trust_executable_bit
            )
        except NoEquivalentError as e:
            die_error(f"error: {p}: {e}")
        print(f"{mode} {mode.object_type}\t{p}")


def main():
    parser = argparse.ArgumentParser()
    setup_parser(parser)
    args = parser.parse_args()
    from_path(args)


if __name__ == "__main__":
    main()
