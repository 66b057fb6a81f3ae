import argparse

from .filemode import FileMode
from .show_mode import describe
from .util import die_error


def setup_parser(parser):
    parser.add_argument("packed", nargs="+", help="4 bytes as hex, little endian")


def unpack_mode(args):
    for text in args.packed:
        try:
            mode = FileMode.unpack(bytes.fromhex(text))
        except ValueError as e:
            die_error(f"error: {text}: {e}")
        print(describe(mode))


def main():
    parser = argparse.ArgumentParser()
    setup_parser(parser)
    args = parser.parse_args()
    unpack_mode(args)


if __name__ == "__main__":
    main()
