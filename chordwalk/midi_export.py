"""Write rendered progressions to standard MIDI files.

Convention: **C4 = 60** (Middle C), matching the MIDI Manufacturers
Association standard and most DAWs.

Example:
	```python
	chords = chordwalk.Progression(max=4).generate()
	chordwalk.midi_export.save_midi(chords, "progression.mid", bpm=90)
	```
"""

import logging
import re
import typing

import mido

import chordwalk.notes


logger = logging.getLogger(__name__)

TICKS_PER_BEAT = 480

_PITCH_PATTERN = re.compile(r"^([A-G][#b]?)(-?\d+)$")


def pitch_to_midi (pitch: str) -> int:

	"""Convert a pitch name such as ``"C4"``, ``"F#3"`` or ``"Bb4"`` to a MIDI note number.

	Raises:
		ValueError: If the name cannot be parsed or falls outside 0-127.

	Example:
		```python
		pitch_to_midi("C4")    # → 60
		pitch_to_midi("A#4")   # → 70
		pitch_to_midi("Bb4")   # → 70
		```
	"""

	match = _PITCH_PATTERN.match(pitch)

	if match is None:
		raise ValueError(f"Cannot parse pitch name: {pitch!r}")

	pc = chordwalk.notes.note_name_to_pc(match.group(1))
	note = (int(match.group(2)) + 1) * 12 + pc

	if not 0 <= note <= 127:
		raise ValueError(f"Pitch {pitch!r} is outside the MIDI range")

	return note


def progression_to_midi_file (
	chords: typing.Sequence[typing.Sequence[str]],
	bpm: float = 120,
	beats_per_chord: float = 4,
	velocity: int = 90,
	channel: int = 0
) -> mido.MidiFile:

	"""Build a single-track MIDI file that plays each chord as a block.

	Parameters:
		chords: One list of pitch names per chord, as returned by ``generate()``.
		bpm: Tempo written as a ``set_tempo`` meta message.
		beats_per_chord: Duration of each chord in beats.
		velocity: Note-on velocity (1-127).
		channel: MIDI channel (0-15).

	Returns:
		A type 1 ``mido.MidiFile`` at 480 ticks per beat.
	"""

	if beats_per_chord <= 0:
		raise ValueError("beats_per_chord must be positive")

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = TICKS_PER_BEAT

	track = mido.MidiTrack()
	mid.tracks.append(track)

	track.append(mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(bpm), time=0))

	duration = int(beats_per_chord * TICKS_PER_BEAT)
	rest = 0

	for chord in chords:
		notes = [pitch_to_midi(pitch) for pitch in chord]

		if not notes:
			rest += duration
			continue

		for i, note in enumerate(notes):
			track.append(mido.Message('note_on', channel=channel, note=note, velocity=velocity, time=rest if i == 0 else 0))

		rest = 0

		for i, note in enumerate(notes):
			track.append(mido.Message('note_off', channel=channel, note=note, velocity=0, time=duration if i == 0 else 0))

	return mid


def save_midi (chords: typing.Sequence[typing.Sequence[str]], filename: str, **kwargs: typing.Any) -> None:

	"""
	Write a rendered progression to ``filename``. Keyword arguments go to ``progression_to_midi_file``.
	"""

	mid = progression_to_midi_file(chords, **kwargs)

	logger.info(f"Saving MIDI progression ({len(chords)} chords) to {filename}...")

	mid.save(filename)

	logger.info(f"Saved {filename}")
