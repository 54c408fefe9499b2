"""Command line interface for rendering chord sheets.

Usage:
    chordsheet <input_file> [-o OUTPUT] [--format html|chordpro|text]

Examples:
    chordsheet testdata/amazing_grace.cho --transpose 2
    chordsheet testdata/hello_there.txt --chord-sheet --format chordpro
    cat song.cho | chordsheet - --chords
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chordsheet.converter import chord_components
from chordsheet.diagrams import ChordDiagrams
from chordsheet.exceptions import ChordSheetError
from chordsheet.models import Chord
from chordsheet.pipeline import FORMATTERS, RenderResult, SheetOptions, process


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chordsheet",
        description="Parse, transpose and render a chord sheet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s testdata/amazing_grace.cho --transpose 2
  %(prog)s testdata/hello_there.txt --chord-sheet --format chordpro
  %(prog)s song.cho --chords --diagrams guitar.json
        """,
    )
    parser.add_argument(
        "input",
        help="Input chord sheet, or - to read stdin",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--chord-sheet",
        action="store_true",
        help="Read chords-over-lyrics text instead of ChordPro",
    )
    parser.add_argument(
        "-t", "--transpose",
        type=int,
        default=0,
        help="Semitones to transpose by (default: 0)",
    )
    parser.add_argument(
        "--hide-tabs",
        action="store_true",
        help="Drop {start_of_tab} sections",
    )
    parser.add_argument(
        "-f", "--format",
        choices=sorted(FORMATTERS),
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--collapse-blank-lines",
        type=int,
        nargs="?",
        const=1,
        default=None,
        metavar="N",
        help="Keep at most N consecutive blank lines of a chord sheet (default N: 1)",
    )
    parser.add_argument(
        "--chords",
        action="store_true",
        help="Print the song's chords with their notes instead of the rendered song",
    )
    parser.add_argument(
        "--diagrams",
        type=Path,
        default=None,
        help="JSON chord diagrams to show fret positions with --chords",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log warnings (-v) or debug messages (-vv)",
    )
    return parser


def read_source(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def describe_chord(chord: Chord, diagrams: ChordDiagrams | None) -> str:
    """Return one ``--chords`` output line, e.g. ``Am: A C E [x 0 2 2 1 0]``."""
    line = f"{chord}: {' '.join(chord_components(chord))}".rstrip()
    if diagrams is not None:
        voicings = diagrams.lookup(chord)
        if voicings:
            line = f"{line} [{' '.join(voicings[0].positions)}]"
    return line


def render(result: RenderResult, args: argparse.Namespace) -> str:
    if not args.chords:
        return result.output
    diagrams = ChordDiagrams.from_file(args.diagrams) if args.diagrams else None
    return "".join(f"{describe_chord(chord, diagrams)}\n" for chord in result.chords)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    level = {0: logging.ERROR, 1: logging.WARNING}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.input != "-" and not Path(args.input).exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    options = SheetOptions(
        chord_pro=not args.chord_sheet,
        transpose=args.transpose,
        show_tabs=not args.hide_tabs,
        preserve_whitespace=args.collapse_blank_lines is None,
        max_blank_lines=1 if args.collapse_blank_lines is None else args.collapse_blank_lines,
        output=args.format,
    )

    try:
        result = process(read_source(args.input), options)
        text = render(result, args)
    except ChordSheetError as e:
        print(f"Error in {e.stage}: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for failure in result.failures:
        print(
            f"Warning: could not parse chord {failure.text!r} on line {failure.line_index + 1}",
            file=sys.stderr,
        )

    if args.output:
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote output to {args.output}")
    else:
        sys.stdout.write(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
