import sys

from chordsheet import chordpro, tab_parser, transpose

text = """[Verse]
Gm     C
Hello  world
"""
song = tab_parser.parse(text)

# Section and segments
sys.stdout.write(song.lines[0].value + "\n")  # "Verse"
for segment in song.lines[1].segments:
    sys.stdout.write(f"{segment.chord} -> {segment.lyrics!r}\n")

# Up a whole tone, written as ChordPro
sys.stdout.write(chordpro.format_song(transpose(song, 2)))
