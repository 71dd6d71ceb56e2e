from __future__ import annotations

import json
import os
from pathlib import Path
import tempfile

from .errors import OutputError
from .song import SongDocument


OUTPUT_NAME = "output.json"


def render_json(document: SongDocument) -> str:
    """Compact JSON text; identical documents always render identically."""
    return json.dumps(document.to_dict(), separators=(",", ":"), ensure_ascii=False)


def output_path_for(input_path: Path) -> Path:
    return input_path.parent / OUTPUT_NAME


def write_document(document: SongDocument, input_path: Path) -> Path:
    """Write ``output.json`` next to ``input_path`` and return its path.

    The text goes to a temporary file in the same directory first and is
    renamed over ``output.json`` only once fully written, so a failed run
    never leaves a truncated document behind.
    """
    text = render_json(document)
    out_path = output_path_for(input_path)
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=".output-", suffix=".json.tmp", dir=out_path.parent
        )
    except OSError as exc:
        raise OutputError(f"failed to write {out_path}: {exc.strerror or exc}") from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp_name, out_path)
    except OSError as exc:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputError(f"failed to write {out_path}: {exc.strerror or exc}") from exc
    return out_path
