"""Host file type and permission bits as a small tagged value.

An ``OSFileMode`` pairs the file kind with its independent attribute flags
and the permission triplet, so callers never poke at platform bit positions
directly. ``from_stat_mode``/``to_stat_mode`` convert to and from the
``st_mode`` integers returned by ``os.lstat``.
"""

import stat
from collections import namedtuple


class FileKind:
    REGULAR = "regular"
    DIR = "dir"
    SYMLINK = "symlink"
    NAMED_PIPE = "named-pipe"
    SOCKET = "socket"
    DEVICE = "device"
    CHAR_DEVICE = "char-device"
    IRREGULAR = "irregular"  # unknown file type


_kind_to_format = {
    FileKind.REGULAR: stat.S_IFREG,
    FileKind.DIR: stat.S_IFDIR,
    FileKind.SYMLINK: stat.S_IFLNK,
    FileKind.NAMED_PIPE: stat.S_IFIFO,
    FileKind.SOCKET: stat.S_IFSOCK,
    FileKind.DEVICE: stat.S_IFBLK,
    FileKind.CHAR_DEVICE: stat.S_IFCHR,
    FileKind.IRREGULAR: 0,
}

_format_to_kind = {
    fmt: kind for kind, fmt in _kind_to_format.items() if kind != FileKind.IRREGULAR
}

PERM_MASK = 0o777
OWNER_EXECUTE = 0o100

_OSFileModeBase = namedtuple(
    "_OSFileModeBase",
    ["kind", "perm", "append", "exclusive", "temporary", "setuid", "setgid", "sticky"],
    defaults=(False, False, False, False, False, False),
)


class OSFileMode(_OSFileModeBase):
    __slots__ = ()

    def __new__(cls, kind, perm, *args, **kwargs):
        if kind not in _kind_to_format:
            raise ValueError(f"unknown file kind: {kind!r}")
        return super().__new__(cls, kind, perm, *args, **kwargs)

    def __str__(self):
        return stat.filemode(self.to_stat_mode())

    @property
    def is_dir(self) -> bool:
        return self.kind == FileKind.DIR

    @property
    def is_symlink(self) -> bool:
        return self.kind == FileKind.SYMLINK

    @property
    def is_regular(self) -> bool:
        return self.kind == FileKind.REGULAR

    @property
    def owner_executable(self) -> bool:
        return bool(self.perm & OWNER_EXECUTE)

    def to_stat_mode(self) -> int:
        """Encode as an ``st_mode`` integer.

        POSIX has no append, exclusive or temporary bits, so those flags are
        dropped.
        """
        st_mode = _kind_to_format[self.kind] | (self.perm & PERM_MASK)
        if self.setuid:
            st_mode |= stat.S_ISUID
        if self.setgid:
            st_mode |= stat.S_ISGID
        if self.sticky:
            st_mode |= stat.S_ISVTX
        return st_mode

    @staticmethod
    def from_stat_mode(st_mode: int):
        kind = _format_to_kind.get(stat.S_IFMT(st_mode), FileKind.IRREGULAR)
        return OSFileMode(
            kind=kind,
            perm=stat.S_IMODE(st_mode) & PERM_MASK,
            setuid=bool(st_mode & stat.S_ISUID),
            setgid=bool(st_mode & stat.S_ISGID),
            sticky=bool(st_mode & stat.S_ISVTX),
        )


# zero value, returned alongside errors
ZERO = OSFileMode(FileKind.REGULAR, 0)
