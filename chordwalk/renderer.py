import logging
import re
import typing

import chordwalk.exceptions
import chordwalk.notes
import chordwalk.spelling
import chordwalk.walker


logger = logging.getLogger(__name__)


# Each note maps to the note six semitones away, in the same spelling.
TRITONE_FLAT: typing.Dict[str, str] = {
	name: chordwalk.notes.FLAT_NAMES[(pc + 6) % 12]
	for pc, name in enumerate(chordwalk.notes.FLAT_NAMES)
}

TRITONE_SHARP: typing.Dict[str, str] = {
	name: chordwalk.notes.SHARP_NAMES[(pc + 6) % 12]
	for pc, name in enumerate(chordwalk.notes.SHARP_NAMES)
}

# Literal respelling: the octave digits are kept even for E# and B#.
FLAT_EQUIVALENTS: typing.Dict[str, str] = {
	"C#": "Db",
	"D#": "Eb",
	"E#": "F",
	"F#": "Gb",
	"G#": "Ab",
	"A#": "Bb",
	"B#": "C",
}

_SHARP_PITCH = re.compile(r"^([A-G]#)(\d+)$")


def tritone_of (note: str) -> str:

	"""Return the note a tritone away, flat-spelled when possible.

	Raises:
		DependencyError: If neither tritone table knows the note.
	"""

	if note in TRITONE_FLAT:
		logger.debug(f"Tritone of {note} is {TRITONE_FLAT[note]}")
		return TRITONE_FLAT[note]

	if note in TRITONE_SHARP:
		logger.debug(f"Tritone of {note} is {TRITONE_SHARP[note]}")
		return TRITONE_SHARP[note]

	raise chordwalk.exceptions.DependencyError(f"No tritone substitute for note {note!r}")


def to_flat (pitch: str) -> str:

	"""Respell a sharp pitch name such as ``"A#4"`` as its flat equivalent (``"Bb4"``)."""

	match = _SHARP_PITCH.match(pitch)

	if match is None:
		return pitch

	return FLAT_EQUIVALENTS[match.group(1)] + match.group(2)


class ChordRenderer:

	"""Turn walked steps into chord symbols and pitch names."""

	def __init__ (
		self,
		speller: chordwalk.spelling.ChordSpeller,
		octave: int = 4,
		flat: bool = False
	) -> None:

		"""
		Initialize the renderer.

		Parameters:
			speller: Expands a chord symbol into pitch names.
			octave: Octave passed to the speller for every chord.
			flat: Respell sharp pitch names with flats.
		"""

		self.speller = speller
		self.octave = octave
		self.flat = flat


	def symbol (self, step: chordwalk.walker.Step, qualities: typing.Sequence[str], scale: typing.Sequence[str]) -> str:

		"""
		Return the chord symbol for one step, e.g. ``"Dm7"``.
		"""

		note = scale[step.vertex - 1]

		if step.tritone:
			note = tritone_of(note)

		return note + qualities[step.vertex - 1]


	def symbols (
		self,
		steps: typing.Sequence[chordwalk.walker.Step],
		qualities: typing.Sequence[str],
		scale: typing.Sequence[str]
	) -> typing.List[str]:

		"""
		Return the chord symbols for every step.
		"""

		return [self.symbol(step, qualities, scale) for step in steps]


	def spell (self, chord_symbol: str) -> typing.List[str]:

		"""
		Expand one chord symbol into pitch names, respelled with flats when enabled.

		Raises:
			DependencyError: If the speller fails.
		"""

		try:
			pitches = list(self.speller.spell(chord_symbol, self.octave))

		except Exception as exc:
			raise chordwalk.exceptions.DependencyError(f"Cannot spell chord {chord_symbol!r}: {exc}") from exc

		if self.flat:
			pitches = [to_flat(pitch) for pitch in pitches]

		return pitches


	def render (
		self,
		steps: typing.Sequence[chordwalk.walker.Step],
		qualities: typing.Sequence[str],
		scale: typing.Sequence[str]
	) -> typing.List[typing.List[str]]:

		"""
		Return one list of pitch names per step.
		"""

		return [self.spell(chord_symbol) for chord_symbol in self.symbols(steps, qualities, scale)]
