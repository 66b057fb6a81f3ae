import argparse

from .filemode import FileMode, FileModeError
from .util import die_error


def setup_parser(parser):
    parser.add_argument("mode", nargs="+", help="octal file mode, e.g. 100755")


def to_os(args):
    for text in args.mode:
        try:
            os_mode = FileMode.parse(text).to_os_file_mode()
        except FileModeError as e:
            die_error(f"error: {e}")
        print(f"{os_mode.to_stat_mode():07o} {os_mode}")


def main():
    parser = argparse.ArgumentParser()
    setup_parser(parser)
    args = parser.parse_args()
    to_os(args)


if __name__ == "__main__":
    main()
