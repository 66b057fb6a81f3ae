"""Git tree entry modes.

A ``FileMode`` is a plain 32-bit unsigned integer. Only a handful of values
are canonical; anything else can still be parsed, packed and formatted so
that foreign or buggy encodings survive a round trip, but such values report
``is_malformed``.
"""

from .util import get_logger
from .osmode import FileKind, OSFileMode, ZERO

logger = get_logger("filemode")

MAX_MODE = 0xFFFFFFFF
MODE_WIDTH = 4  # bytes, little endian
OCTAL_DIGITS = frozenset("01234567")


class FileModeError(ValueError):
    pass


class ParseError(FileModeError):
    def __init__(self, text):
        super().__init__(f"invalid file mode {text!r}: expected octal digits")
        self.text = text
        self.mode = EMPTY


class NoEquivalentError(FileModeError):
    def __init__(self, os_mode):
        super().__init__(
            f"no equivalent file mode for {os_mode.kind} file ({os_mode})"
        )
        self.os_mode = os_mode
        self.mode = EMPTY


class MalformedModeError(FileModeError):
    def __init__(self, mode):
        super().__init__(f"malformed file mode: {mode}")
        self.mode = mode
        self.os_mode = ZERO


class FileMode(int):
    __slots__ = ()

    def __new__(cls, value=0):
        if not isinstance(value, int):
            raise TypeError(f"file mode must be an int, not {type(value).__name__}")
        if not 0 <= value <= MAX_MODE:
            raise ValueError(f"file mode out of range: {value:#o}")
        return super().__new__(cls, value)

    def __str__(self):
        return f"{int(self):07o}"

    def __repr__(self):
        return f"FileMode(0o{int(self):o})"

    @classmethod
    def parse(cls, text):
        """Parse the octal text used in tree entries and diff output.

        Leading zeros are allowed; signs, radix prefixes and any character
        other than ``0``-``7`` are not. The value is kept as is, even if it is
        not one of the canonical modes.
        """
        if isinstance(text, bytes):
            try:
                text = text.decode("ascii")
            except UnicodeDecodeError:
                raise ParseError(text) from None
        if not text or not set(text) <= OCTAL_DIGITS:
            raise ParseError(text)
        value = int(text, base=8)
        if value > MAX_MODE:
            raise ParseError(text)
        return cls(value)

    def pack(self) -> bytes:
        return int(self).to_bytes(length=MODE_WIDTH, byteorder="little")

    @classmethod
    def unpack(cls, data: bytes):
        if len(data) != MODE_WIDTH:
            raise ValueError(f"packed file mode must be {MODE_WIDTH} bytes, got {len(data)}")
        return cls(int.from_bytes(data, byteorder="little"))

    @property
    def name(self):
        return _names.get(self)

    @property
    def is_malformed(self) -> bool:
        return self not in _names

    @property
    def is_regular(self) -> bool:
        return self == REGULAR or self == DEPRECATED

    @property
    def is_file(self) -> bool:
        return self.is_regular or self == EXECUTABLE or self == SYMLINK

    @property
    def object_type(self):
        if self.is_file:
            return "blob"
        elif self == DIR:
            return "tree"
        elif self == SUBMODULE:
            return "commit"
        return None

    def to_os_file_mode(self) -> OSFileMode:
        """Translate to host file bits.

        Only the six present modes have a translation. Submodules come back
        as directories and deprecated files as regular ones.
        """
        try:
            return _os_file_modes[self]
        except KeyError:
            raise MalformedModeError(self) from None

    def to_stat_mode(self) -> int:
        return self.to_os_file_mode().to_stat_mode()

    @staticmethod
    def from_os_file_mode(os_mode: OSFileMode, *, trust_executable_bit=True):
        if os_mode.kind in _no_equivalent_kinds or os_mode.temporary:
            logger.debug(f"no equivalent file mode for {os_mode!r}")
            raise NoEquivalentError(os_mode)
        if os_mode.is_dir:
            return DIR
        if os_mode.is_symlink:
            return SYMLINK
        # only the owner execute bit counts once the entry is a plain file
        if trust_executable_bit and os_mode.owner_executable:
            return EXECUTABLE
        return REGULAR

    @staticmethod
    def from_stat_mode(st_mode: int, **kwargs):
        return FileMode.from_os_file_mode(OSFileMode.from_stat_mode(st_mode), **kwargs)


EMPTY = FileMode(0)
DIR = FileMode(0o40000)
REGULAR = FileMode(0o100644)
DEPRECATED = FileMode(0o100664)
EXECUTABLE = FileMode(0o100755)
SYMLINK = FileMode(0o120000)
SUBMODULE = FileMode(0o160000)

# Empty is absent, not malformed (go-git's filemode package treats it as malformed)
_names = {
    EMPTY: "empty",
    DIR: "dir",
    REGULAR: "regular",
    DEPRECATED: "deprecated",
    EXECUTABLE: "executable",
    SYMLINK: "symlink",
    SUBMODULE: "submodule",
}

_os_file_modes = {
    DIR: OSFileMode(FileKind.DIR, 0o777),
    REGULAR: OSFileMode(FileKind.REGULAR, 0o644),
    DEPRECATED: OSFileMode(FileKind.REGULAR, 0o644),
    EXECUTABLE: OSFileMode(FileKind.REGULAR, 0o755),
    SYMLINK: OSFileMode(FileKind.SYMLINK, 0o777),
    SUBMODULE: OSFileMode(FileKind.DIR, 0o777),
}

_no_equivalent_kinds = frozenset(
    [
        FileKind.NAMED_PIPE,
        FileKind.SOCKET,
        FileKind.DEVICE,
        FileKind.CHAR_DEVICE,
        FileKind.IRREGULAR,
    ]
)


def parse_mode(text):
    return FileMode.parse(text)
