"""Error types raised while converting NBS songs.

Every error is terminal for a conversion run; callers catch
:class:`NBSError` at the outermost layer and report the message.
"""

from __future__ import annotations


class NBSError(ValueError):
    """Base class for every failure the converter reports."""


class ArgumentError(NBSError):
    """The input path is missing, does not exist, or is not a file."""


class UnsupportedFormat(NBSError):
    """The leading protocol marker is not the zero word of modern NBS files."""


class UnsupportedVersion(NBSError):
    def __init__(self, version: int) -> None:
        super().__init__(f"unsupported NBS version {version} (only 5 is supported)")
        self.version = version


class UnexpectedEnd(NBSError):
    def __init__(self, what: str, offset: int, needed: int, remaining: int) -> None:
        super().__init__(
            f"unexpected end of data reading {what} at offset 0x{offset:X} "
            f"(need {needed} bytes, {remaining} remaining)"
        )
        self.offset = offset
        self.needed = needed
        self.remaining = remaining


class InvalidText(NBSError):
    def __init__(self, offset: int, reason: str) -> None:
        super().__init__(f"invalid UTF-8 string at offset 0x{offset:X}: {reason}")
        self.offset = offset


class OutputError(NBSError):
    """The output document could not be written."""
