"""Decode a whole NBS song into a :class:`SongDocument`.

Only files written by Note Block Studio with format version 5 are
accepted.  Such files open with a zero u16 (legacy files start with a
non-zero song length there) followed by the version byte.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Callable, Dict, List

from .cursor import ByteCursor
from .errors import UnsupportedFormat, UnsupportedVersion
from .header import SongHeader
from .layers import CustomInstrument, Layer, read_custom_instruments, read_layers
from .note_table import Note, read_note_table


PROTOCOL_MARKER = 0
SUPPORTED_VERSION = 5


@dataclass(frozen=True)
class SongDocument:
    version: int
    vanilla_instrument_count: int
    song_length: int
    layer_count: int
    song_name: str
    song_author: str
    song_original_author: str
    song_description: str
    song_tempo: int
    auto_saving: int
    auto_saving_duration: int
    time_signature: int
    minutes_spent: int
    left_clicks: int
    right_clicks: int
    note_blocks_added: int
    note_blocks_removed: int
    schematic_file_name: str
    loop_on: int
    max_loop_count: int
    loop_start_tick: int
    notes: List[Note]
    layers: List[Layer]
    custom_instruments: List[CustomInstrument]

    @classmethod
    def assemble(
        cls,
        header: SongHeader,
        notes: List[Note],
        layers: List[Layer],
        custom_instruments: List[CustomInstrument],
    ) -> "SongDocument":
        scalars = {f.name: getattr(header, f.name) for f in fields(header)}
        return cls(
            version=SUPPORTED_VERSION,
            notes=list(notes),
            layers=list(layers),
            custom_instruments=list(custom_instruments),
            **scalars,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "SongDocument":
        return read_song(data)

    def to_dict(self) -> dict:
        """Plain-data view; key order follows the field order above."""
        out: dict = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                out[f.name] = [item.to_dict() for item in value]
            else:
                out[f.name] = value
        return out


def _decode_v5(cursor: ByteCursor) -> SongDocument:
    header = SongHeader.from_cursor(cursor)
    notes = read_note_table(cursor, header.song_tempo)
    layers = read_layers(cursor, header.layer_count)
    custom_instruments = read_custom_instruments(cursor)
    return SongDocument.assemble(header, notes, layers, custom_instruments)


_DECODERS: Dict[int, Callable[[ByteCursor], SongDocument]] = {
    SUPPORTED_VERSION: _decode_v5,
}


def read_song(data: bytes) -> SongDocument:
    """Decode a complete NBS file image."""
    return decode_song(ByteCursor(data))


def decode_song(cursor: ByteCursor) -> SongDocument:
    """Dispatch on the format preamble and decode the rest of ``cursor``.

    Raises
    ------
    UnsupportedFormat
        The file does not start with the zero protocol marker.
    UnsupportedVersion
        The version byte has no decoder; nothing past it is read.
    UnexpectedEnd, InvalidText
        Propagated from the cursor for truncated or malformed fields.
    """
    marker = cursor.read_u16()
    if marker != PROTOCOL_MARKER:
        raise UnsupportedFormat(
            f"bad protocol marker 0x{marker:04X}: not an NBS file, or a legacy "
            "pre-versioned NBS file"
        )
    version = cursor.read_u8()
    decoder = _DECODERS.get(version)
    if decoder is None:
        raise UnsupportedVersion(version)
    return decoder(cursor)


def read_song_file(path: Path) -> SongDocument:
    with open(path, "rb") as fh:
        cursor = ByteCursor.from_stream(fh)
    return decode_song(cursor)
