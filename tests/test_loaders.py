import os

import pytest

from grapho_hills.io.loaders import load_raw, load_text, puzzle_input_path


def test_puzzle_input_path():
    assert puzzle_input_path("data") == os.path.join("data", "day12.txt")
    assert puzzle_input_path("data", day=3) == os.path.join("data", "day03.txt")
    assert puzzle_input_path("data", suffix="example") == os.path.join("data", "day12_example.txt")


def test_load_raw(tmp_path, canonical_text):
    (tmp_path / "day12_example.txt").write_text(canonical_text, encoding="utf-8")
    assert load_raw(str(tmp_path), suffix="example") == canonical_text


def test_load_text_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_text(str(tmp_path / "nope.txt"))
