"""Chord symbol spelling.

Turns a chord symbol such as ``"Dm7"`` into pitch names with octave numbers,
e.g. ``["D4", "F4", "A4", "C5"]``. Tones are counted upward from the root; the
octave number increases each time a tone passes B. Output is always
sharp-spelled, so ``"Bb"`` at octave 4 spells ``["A#4", "D5", "F5"]``.

Module-level constants:
- `QUALITY_INTERVALS`: Maps chord quality suffixes to semitone offsets from the root
"""

import re
import typing

import chordwalk.notes


QUALITY_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"": [0, 4, 7],
	"M": [0, 4, 7],
	"m": [0, 3, 7],
	"dim": [0, 3, 6],
	"aug": [0, 4, 8],
	"-5": [0, 4, 6],
	"-9": [0, 4, 7, 13],
	"sus2": [0, 2, 7],
	"sus4": [0, 5, 7],
	"6": [0, 4, 7, 9],
	"m6": [0, 3, 7, 9],
	"add9": [0, 4, 7, 14],
	"madd9": [0, 3, 7, 14],
	"7": [0, 4, 7, 10],
	"M7": [0, 4, 7, 11],
	"m7": [0, 3, 7, 10],
	"mM7": [0, 3, 7, 11],
	"dim7": [0, 3, 6, 9],
	"aug7": [0, 4, 8, 10],
	"m7(-5)": [0, 3, 6, 10],
	"7sus4": [0, 5, 7, 10],
	"7(-5)": [0, 4, 6, 10],
	"7(-9)": [0, 4, 7, 10, 13],
	"9": [0, 4, 7, 10, 14],
	"11": [0, 4, 7, 10, 14, 17],
	"13": [0, 4, 7, 10, 14, 17, 21],
	"M9": [0, 4, 7, 11, 14],
	"M11": [0, 4, 7, 11, 14, 17],
	"M13": [0, 4, 7, 11, 14, 17, 21],
	"m9": [0, 3, 7, 10, 14],
	"m11": [0, 3, 7, 10, 14, 17],
	"m13": [0, 3, 7, 10, 14, 17, 21],
	"mM9": [0, 3, 7, 11, 14],
}

_SYMBOL_PATTERN = re.compile(r"^([A-G][#b]?)(.*)$")


@typing.runtime_checkable
class ChordSpeller (typing.Protocol):

	"""
	Protocol for expanding a chord symbol into pitch names at an octave.
	"""

	def spell (self, chord_symbol: str, octave: int) -> typing.List[str]:

		"""
		Return the chord tones of ``chord_symbol`` as pitch-name+octave strings.
		"""

		...


def parse_symbol (chord_symbol: str) -> typing.Tuple[str, str]:

	"""Split a chord symbol into ``(root, quality)``.

	Raises:
		ValueError: If the symbol does not start with a note letter.

	Example:
		```python
		parse_symbol("F#m7")   # → ("F#", "m7")
		parse_symbol("Bb")     # → ("Bb", "")
		```
	"""

	match = _SYMBOL_PATTERN.match(chord_symbol)

	if match is None:
		raise ValueError(f"Cannot parse chord symbol: {chord_symbol!r}")

	return match.group(1), match.group(2)


def spell_chord (chord_symbol: str, octave: int = 4) -> typing.List[str]:

	"""Return the sharp-spelled pitch names of a chord symbol.

	Parameters:
		chord_symbol: Root plus quality, e.g. ``"C"``, ``"Dm7"``, ``"G7(-9)"``.
		octave: Octave number of the root.

	Raises:
		ValueError: If the root or quality is not recognised.

	Example:
		```python
		spell_chord("C", 4)    # → ["C4", "E4", "G4"]
		spell_chord("B", 4)    # → ["B4", "D#5", "F#5"]
		```
	"""

	root, quality = parse_symbol(chord_symbol)
	root_pc = chordwalk.notes.note_name_to_pc(root)

	if quality not in QUALITY_INTERVALS:
		raise ValueError(f"Unknown chord quality: {quality!r} in {chord_symbol!r}")

	pitches: typing.List[str] = []

	for interval in QUALITY_INTERVALS[quality]:
		position = root_pc + interval
		pitches.append(f"{chordwalk.notes.SHARP_NAMES[position % 12]}{octave + position // 12}")

	return pitches


class BuiltinChordSpeller:

	"""Chord spelling backed by ``QUALITY_INTERVALS``."""

	def spell (self, chord_symbol: str, octave: int) -> typing.List[str]:

		"""Return the chord tones of ``chord_symbol`` at ``octave``."""

		return spell_chord(chord_symbol, octave)
