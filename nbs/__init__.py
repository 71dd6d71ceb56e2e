"""Decode Note Block Studio (.nbs, format v5) songs into plain data."""

from .cursor import ByteCursor  # noqa: F401
from .errors import (  # noqa: F401
    ArgumentError,
    InvalidText,
    NBSError,
    OutputError,
    UnexpectedEnd,
    UnsupportedFormat,
    UnsupportedVersion,
)
from .header import SongHeader  # noqa: F401
from .json_writer import (  # noqa: F401
    OUTPUT_NAME,
    output_path_for,
    render_json,
    write_document,
)
from .layers import (  # noqa: F401
    CustomInstrument,
    Layer,
    read_custom_instruments,
    read_layers,
)
from .note_table import (  # noqa: F401
    DELAY_TICKS_PER_SECOND,
    Note,
    normalize_delay,
    read_note_table,
    wrapping_add_u16,
)
from .song import (  # noqa: F401
    PROTOCOL_MARKER,
    SUPPORTED_VERSION,
    SongDocument,
    decode_song,
    read_song,
    read_song_file,
)
