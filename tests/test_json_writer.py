"""Tests for JSON rendering and output placement."""

import json
from pathlib import Path

import pytest

from nbs.errors import OutputError
from nbs.json_writer import output_path_for, render_json, write_document
from nbs.song import read_song
from nbs_bytes import SongSpec, demo_song


EXPECTED_KEYS = [
    "version",
    "vanilla_instrument_count",
    "song_length",
    "layer_count",
    "song_name",
    "song_author",
    "song_original_author",
    "song_description",
    "song_tempo",
    "auto_saving",
    "auto_saving_duration",
    "time_signature",
    "minutes_spent",
    "left_clicks",
    "right_clicks",
    "note_blocks_added",
    "note_blocks_removed",
    "schematic_file_name",
    "loop_on",
    "max_loop_count",
    "loop_start_tick",
    "notes",
    "layers",
    "custom_instruments",
]


def test_render_json_key_order_and_values() -> None:
    payload = json.loads(render_json(read_song(demo_song().to_bytes())))
    assert list(payload) == EXPECTED_KEYS
    assert payload["version"] == 5
    assert payload["notes"][2] == {
        "delay_ticks": 20,
        "layer": 1,
        "note_block_instrument": 16,
        "note_block_key": 50,
        "note_block_velocity": 100,
        "note_block_panning": 150,
        "note_block_pitch": 0,
    }
    assert payload["layers"][1] == {
        "layer_name": "Bass",
        "layer_lock": 1,
        "layer_volume": 75,
        "layer_stereo": 100,
    }
    assert payload["custom_instruments"] == [
        {
            "instrument_name": "Bell 2",
            "sound_file": "bell2.ogg",
            "sound_pitch": 45,
            "press_key": 0,
        }
    ]


def test_render_json_is_compact_and_keeps_unicode() -> None:
    text = render_json(read_song(demo_song().to_bytes()))
    assert text.startswith('{"version":5,"vanilla_instrument_count":16,')
    assert "ünïcode" in text
    assert "\n" not in text


def test_render_json_is_deterministic() -> None:
    data = demo_song().to_bytes()
    assert render_json(read_song(data)) == render_json(read_song(bytes(data)))


def test_empty_song_renders_empty_arrays() -> None:
    payload = json.loads(render_json(read_song(SongSpec().to_bytes())))
    assert payload["notes"] == []
    assert payload["layers"] == []
    assert payload["custom_instruments"] == []
    assert payload["song_name"] == ""


def test_output_path_is_beside_input(tmp_path: Path) -> None:
    assert output_path_for(tmp_path / "songs" / "a.nbs") == tmp_path / "songs" / "output.json"


def test_write_document(tmp_path: Path) -> None:
    song = read_song(demo_song().to_bytes())
    out = write_document(song, tmp_path / "demo.nbs")
    assert out == tmp_path / "output.json"
    assert out.read_text(encoding="utf-8") == render_json(song)


def test_write_document_failure_is_output_error(tmp_path: Path) -> None:
    song = read_song(SongSpec().to_bytes())
    with pytest.raises(OutputError):
        write_document(song, tmp_path / "missing-dir" / "demo.nbs")


def test_failed_write_leaves_no_partial_output(tmp_path: Path, monkeypatch) -> None:
    out = tmp_path / "output.json"
    out.write_text("previous", encoding="utf-8")
    song = read_song(demo_song().to_bytes())

    def _disk_full(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("nbs.json_writer.os.replace", _disk_full)
    with pytest.raises(OutputError, match="No space left on device"):
        write_document(song, tmp_path / "demo.nbs")

    assert out.read_text(encoding="utf-8") == "previous"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["output.json"]
