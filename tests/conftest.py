"""Shared fixtures for chordsheet tests."""

from pathlib import Path

import pytest

TESTDATA_DIR = Path(__file__).parent.parent / "testdata"


@pytest.fixture
def testdata_dir() -> Path:
    """Directory holding the sample songs."""
    return TESTDATA_DIR


@pytest.fixture
def chordpro_text() -> str:
    """A small ChordPro song with tags, a comment and a chorus."""
    return (
        "{title: Test}\n"
        "{artist: Me}\n"
        "# source comment\n"
        "{start_of_chorus}\n"
        "[C]Hello [G]world\n"
        "{end_of_chorus}\n"
    )


@pytest.fixture
def sheet_text() -> str:
    """A chords-over-lyrics sheet with sections, a comment and a chord-only line."""
    return (
        "[Verse 1]\n"
        "C       G\n"
        "Hello there friend\n"
        "Am  G\n"
        "\n"
        "(x2)\n"
        "[Chorus]\n"
        "F   C/E   Dm\n"
        "Sing along now\n"
    )
