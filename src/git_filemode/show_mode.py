import argparse

from .filemode import FileMode, ParseError
from .util import die_error


def setup_parser(parser):
    parser.add_argument("--debug", help="show classification details", action="store_true")
    parser.add_argument("mode", nargs="+", help="octal file mode, e.g. 100644")


def describe(mode: FileMode):
    name = "malformed" if mode.is_malformed else mode.name
    return f"{mode} {name} {mode.pack().hex()}"


def show_mode(args):
    for text in args.mode:
        try:
            mode = FileMode.parse(text)
        except ParseError as e:
            die_error(f"error: {e}")
        print(describe(mode))
        if args.debug:
            print(f"  malformed: {mode.is_malformed}")
            print(f"  regular: {mode.is_regular}\tfile: {mode.is_file}")
            print(f"  object: {mode.object_type}")


def main():
    parser = argparse.ArgumentParser()
    setup_parser(parser)
    args = parser.parse_args()
    show_mode(args)


if __name__ == "__main__":
    main()
