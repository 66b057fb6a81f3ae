import sys


def get_logger(name=None):
    import logging

    toplevel = "git_filemode"
    if name is None:
        logger_name = toplevel
    else:
        logger_name = toplevel + "." + name
    return logging.getLogger(logger_name)


def die_error(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)
    sys.exit(1)
