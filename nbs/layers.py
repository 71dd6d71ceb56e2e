from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List

from .cursor import ByteCursor


@dataclass(frozen=True)
class Layer:
    layer_name: str
    layer_lock: int
    layer_volume: int  # percent
    layer_stereo: int  # 100 = centre

    @classmethod
    def from_cursor(cls, cursor: ByteCursor) -> "Layer":
        return cls(
            layer_name=cursor.read_string(),
            layer_lock=cursor.read_u8(),
            layer_volume=cursor.read_u8(),
            layer_stereo=cursor.read_u8(),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CustomInstrument:
    """User sound; its id is ``vanilla_instrument_count + index``."""

    instrument_name: str
    sound_file: str
    sound_pitch: int
    press_key: int

    @classmethod
    def from_cursor(cls, cursor: ByteCursor) -> "CustomInstrument":
        return cls(
            instrument_name=cursor.read_string(),
            sound_file=cursor.read_string(),
            sound_pitch=cursor.read_u8(),
            press_key=cursor.read_u8(),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def read_layers(cursor: ByteCursor, layer_count: int) -> List[Layer]:
    """Read exactly ``layer_count`` layer records."""
    return [Layer.from_cursor(cursor) for _ in range(layer_count)]


def read_custom_instruments(cursor: ByteCursor) -> List[CustomInstrument]:
    count = cursor.read_u8()
    return [CustomInstrument.from_cursor(cursor) for _ in range(count)]
