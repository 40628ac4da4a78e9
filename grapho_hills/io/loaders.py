"""
Functions for loading puzzle input text.
"""

import os

__all__ = ['puzzle_input_path', 'load_text', 'load_raw']


def puzzle_input_path(data_dir, day=12, suffix=None):
    """
    Build the path of a puzzle input file.

    Parameters
    ----------
    data_dir : str
        Directory holding the puzzle inputs
    day : int, optional
        Puzzle day number
    suffix : str, optional
        Variant of the input (e.g. 'example')

    Returns
    -------
    str
        ``<data_dir>/day12.txt`` or ``<data_dir>/day12_<suffix>.txt``
    """
    name = f"day{day:02d}"
    if suffix:
        name = f"{name}_{suffix}"
    return os.path.join(data_dir, f"{name}.txt")


def load_text(filepath):
    """
    Read a text file.

    Parameters
    ----------
    filepath : str
        Path to the file

    Returns
    -------
    str
        File contents
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return f.read()


def load_raw(data_dir, day=12, suffix=None):
    """
    Load the raw text of a puzzle input.

    Parameters
    ----------
    data_dir : str
        Directory holding the puzzle inputs
    day : int, optional
        Puzzle day number
    suffix : str, optional
        Variant of the input

    Returns
    -------
    str
        Raw input text
    """
    return load_text(puzzle_input_path(data_dir, day, suffix))
