"""Decode the note table of an NBS v5 song.

The table stores a sparse tick x layer grid as two nested jump lists:

  repeat:
    u16 tick_jump          0 ends the whole table
    repeat:
      u16 layer_jump       0 ends the current tick
      u8  instrument
      u8  key
      u8  velocity
      u8  panning
      i16 pitch            fine pitch in cents

Both running positions start at 0xFFFF and advance with 16-bit
wraparound, so a first jump of 1 lands on index 0.  The layer position is
reset at every tick.

Each tick's first note carries the gap since the previous tick that held
a note, rescaled from the song tempo to a fixed 20 ticks per second.
Further notes in the same tick are simultaneous and carry a delay of 0.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import List

from .cursor import ByteCursor

U16_MASK = 0xFFFF
U16_SEED = 0xFFFF
DELAY_TICKS_PER_SECOND = 20


@dataclass(frozen=True)
class Note:
    delay_ticks: int
    layer: int  # absolute 0-based layer; not checked against layer_count
    note_block_instrument: int
    note_block_key: int
    note_block_velocity: int
    note_block_panning: int
    note_block_pitch: int

    def to_dict(self) -> dict:
        return asdict(self)


def wrapping_add_u16(value: int, step: int) -> int:
    return (value + step) % (U16_MASK + 1)


def wrapping_sub_u16(value: int, step: int) -> int:
    return (value - step) % (U16_MASK + 1)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def normalize_delay(tempo: int, delta_ticks: int) -> int:
    """Rescale a tick gap at ``tempo`` (hundredths of t/s) to 20 t/s units.

    The result is rounded half away from zero and saturates to the u16
    range.
    """
    if tempo == 0:
        return 0 if delta_ticks == 0 else U16_MASK
    scaled = delta_ticks * (DELAY_TICKS_PER_SECOND / (tempo / 100.0))
    return max(0, min(U16_MASK, _round_half_away(scaled)))


def read_note_table(cursor: ByteCursor, tempo: int) -> List[Note]:
    """Read jump-encoded notes until the outer zero terminator."""
    notes: List[Note] = []
    tick = U16_SEED
    previous_tick = 0

    while True:
        tick_jump = cursor.read_u16()
        if tick_jump == 0:
            break
        tick = wrapping_add_u16(tick, tick_jump)

        layer = U16_SEED
        first_in_tick = True
        while True:
            layer_jump = cursor.read_u16()
            if layer_jump == 0:
                break
            layer = wrapping_add_u16(layer, layer_jump)

            if first_in_tick:
                delay = normalize_delay(tempo, wrapping_sub_u16(tick, previous_tick))
            else:
                delay = 0
            notes.append(
                Note(
                    delay_ticks=delay,
                    layer=layer,
                    note_block_instrument=cursor.read_u8(),
                    note_block_key=cursor.read_u8(),
                    note_block_velocity=cursor.read_u8(),
                    note_block_panning=cursor.read_u8(),
                    note_block_pitch=cursor.read_i16(),
                )
            )
            first_in_tick = False

        previous_tick = tick

    return notes
