from .filemode import (
    FileMode,
    FileModeError,
    ParseError,
    NoEquivalentError,
    MalformedModeError,
    parse_mode,
    EMPTY,
    DIR,
    REGULAR,
    DEPRECATED,
    EXECUTABLE,
    SYMLINK,
    SUBMODULE,
)
from .osmode import FileKind, OSFileMode
