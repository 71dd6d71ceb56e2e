from __future__ import annotations

from dataclasses import dataclass

from .cursor import ByteCursor


@dataclass(frozen=True)
class SongHeader:
    """Scalar fields that follow the version byte of a v5 song."""

    vanilla_instrument_count: int
    song_length: int  # ticks; informational only
    layer_count: int
    song_name: str
    song_author: str
    song_original_author: str
    song_description: str
    song_tempo: int  # ticks per second * 100
    auto_saving: int
    auto_saving_duration: int  # minutes
    time_signature: int
    minutes_spent: int
    left_clicks: int
    right_clicks: int
    note_blocks_added: int
    note_blocks_removed: int
    schematic_file_name: str
    loop_on: int
    max_loop_count: int  # 0 = loop forever
    loop_start_tick: int

    @classmethod
    def from_cursor(cls, cursor: ByteCursor) -> "SongHeader":
        # Keyword arguments are evaluated left to right, which is the
        # on-disk field order.
        return cls(
            vanilla_instrument_count=cursor.read_u8(),
            song_length=cursor.read_u16(),
            layer_count=cursor.read_u16(),
            song_name=cursor.read_string(),
            song_author=cursor.read_string(),
            song_original_author=cursor.read_string(),
            song_description=cursor.read_string(),
            song_tempo=cursor.read_u16(),
            auto_saving=cursor.read_u8(),
            auto_saving_duration=cursor.read_u8(),
            time_signature=cursor.read_u8(),
            minutes_spent=cursor.read_u32(),
            left_clicks=cursor.read_u32(),
            right_clicks=cursor.read_u32(),
            note_blocks_added=cursor.read_u32(),
            note_blocks_removed=cursor.read_u32(),
            schematic_file_name=cursor.read_string(),
            loop_on=cursor.read_u8(),
            max_loop_count=cursor.read_u8(),
            loop_start_tick=cursor.read_u16(),
        )
