"""Note names, pitch classes and scales.

Module-level constants:
- `NOTE_NAME_TO_PC`: Maps note names (e.g. `"C"`, `"F#"`, `"Bb"`, `"E#"`) to pitch classes (0-11)
- `SHARP_NAMES` / `FLAT_NAMES`: Pitch class to note name, sharp- or flat-spelled
- `SCALE_INTERVALS`: Maps scale names to semitone offsets from the root

The built-in `BuiltinScaleProvider` satisfies the `ScaleProvider` protocol used
by the progression engine. Any object with a matching ``notes()`` method can be
passed instead.

Example:
	```python
	provider = BuiltinScaleProvider()
	provider.notes("D", "major")   # ['D', 'E', 'F#', 'G', 'A', 'B', 'C#']
	provider.notes("F", "major")   # ['F', 'G', 'A', 'Bb', 'C', 'D', 'E']
	```
"""

import typing


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"B#": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"Fb": 4,
	"F": 5,
	"E#": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
	"Cb": 11,
}

SHARP_NAMES: typing.List[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

FLAT_NAMES: typing.List[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


SCALE_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"major": [0, 2, 4, 5, 7, 9, 11],
	"ionian": [0, 2, 4, 5, 7, 9, 11],
	"dorian": [0, 2, 3, 5, 7, 9, 10],
	"phrygian": [0, 1, 3, 5, 7, 8, 10],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"minor": [0, 2, 3, 5, 7, 8, 10],
	"aeolian": [0, 2, 3, 5, 7, 8, 10],
	"locrian": [0, 1, 3, 5, 6, 8, 10],
	"harmonic_minor": [0, 2, 3, 5, 7, 8, 11],
	"melodic_minor": [0, 2, 3, 5, 7, 9, 11],
	"major_pentatonic": [0, 2, 4, 7, 9],
	"minor_pentatonic": [0, 3, 5, 7, 10],
	"blues": [0, 3, 5, 6, 7, 10],
	"whole_tone": [0, 2, 4, 6, 8, 10],
	"chromatic": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
}


@typing.runtime_checkable
class ScaleProvider (typing.Protocol):

	"""
	Protocol for scale lookups used by the progression engine.
	"""

	def notes (self, root: str, scale_name: str) -> typing.List[str]:

		"""
		Return the ordered note names of a scale (7 for conventional scales, 12 for chromatic).
		"""

		...


def note_name_to_pc (name: str) -> int:

	"""Validate a note name and return its pitch class (0–11).

	Parameters:
		name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Raises:
		ValueError: If the note name is not recognised.
	"""

	if name not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown note name: {name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[name]


def prefers_flats (root: str) -> bool:

	"""Return True when a scale built on ``root`` should be spelled with flats."""

	return root == "F" or (len(root) > 1 and root.endswith("b"))


def register_scale (name: str, intervals: typing.List[int]) -> None:

	"""Register a custom scale so it can be used as ``scale_name``.

	Parameters:
		name: Scale name (overwrites an existing entry of the same name).
		intervals: Ascending semitone offsets from the root, starting with 0.

	Raises:
		ValueError: If the intervals are empty, do not start at 0, are not
			strictly ascending, or leave the octave.

	Example:
		```python
		register_scale("hirajoshi", [0, 2, 3, 7, 8])
		```
	"""

	if not intervals or intervals[0] != 0:
		raise ValueError("Scale intervals must start with 0")

	if any(b <= a for a, b in zip(intervals, intervals[1:])):
		raise ValueError("Scale intervals must be strictly ascending")

	if intervals[-1] > 11:
		raise ValueError("Scale intervals must stay within one octave (0-11)")

	SCALE_INTERVALS[name] = list(intervals)


def scale_notes (root: str, scale_name: str = "major") -> typing.List[str]:

	"""Return the note names of a scale, starting at ``root``.

	Sharp spelling is used unless the root itself is flat-spelled or is F.
	"""

	if scale_name not in SCALE_INTERVALS:
		raise ValueError(f"Unknown scale '{scale_name}'. Available: {sorted(SCALE_INTERVALS)}")

	root_pc = note_name_to_pc(root)
	names = FLAT_NAMES if prefers_flats(root) else SHARP_NAMES

	notes = [names[(root_pc + interval) % 12] for interval in SCALE_INTERVALS[scale_name]]

	# Keep the caller's spelling of the root (e.g. "Cb", "E#").
	notes[0] = root

	return notes


class BuiltinScaleProvider:

	"""Scale lookup backed by ``SCALE_INTERVALS``."""

	def notes (self, root: str, scale_name: str) -> typing.List[str]:

		"""Return the note names of ``scale_name`` starting at ``root``."""

		return scale_notes(root, scale_name)
