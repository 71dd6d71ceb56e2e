#!/usr/bin/env python3
"""Convert a Note Block Studio v5 song into output.json beside it."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from nbs.errors import ArgumentError, NBSError  # noqa: E402
from nbs.json_writer import write_document  # noqa: E402
from nbs.song import SongDocument, read_song_file  # noqa: E402


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert an .nbs song (format version 5) to output.json",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Song file, relative to the current directory",
    )
    return parser


def _resolve_input(relative: Path) -> Path:
    target = Path.cwd() / relative
    if not target.exists():
        raise ArgumentError(f"nonexistent file '{relative}'")
    if not target.is_file():
        raise ArgumentError(f"'{relative}' is not a file")
    return target


def convert(relative: Path) -> tuple[SongDocument, Path]:
    target = _resolve_input(relative)
    try:
        document = read_song_file(target)
    except OSError as exc:
        raise ArgumentError(f"cannot read '{relative}': {exc.strerror or exc}") from exc
    return document, write_document(document, target)


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    try:
        document, out_path = convert(args.path)
    except NBSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {len(document.notes)} notes -> {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
