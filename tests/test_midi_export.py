import pathlib

import mido
import pytest

import chordwalk.midi_export


@pytest.mark.parametrize("pitch, expected", [
	("C4", 60),
	("A4", 69),
	("A#4", 70),
	("Bb4", 70),
	("B3", 59),
	("C-1", 0),
	("G9", 127),
])
def test_pitch_to_midi (pitch: str, expected: int) -> None:

	"""Pitch names convert with C4 = 60."""

	assert chordwalk.midi_export.pitch_to_midi(pitch) == expected


@pytest.mark.parametrize("pitch", ["H4", "C", "C#x", "G#9"])
def test_pitch_to_midi_rejects (pitch: str) -> None:

	"""Unparseable or out-of-range names raise ValueError."""

	with pytest.raises(ValueError):
		chordwalk.midi_export.pitch_to_midi(pitch)


def test_midi_file_structure () -> None:

	"""Each chord becomes simultaneous note-ons followed by note-offs after its duration."""

	chords = [["C4", "E4", "G4"], ["D4", "F4", "A4"]]
	mid = chordwalk.midi_export.progression_to_midi_file(chords, bpm=100, beats_per_chord=2, velocity=80, channel=3)

	assert mid.type == 1
	assert mid.ticks_per_beat == 480
	assert len(mid.tracks) == 1

	track = mid.tracks[0]

	assert track[0].type == 'set_tempo'
	assert track[0].tempo == mido.bpm2tempo(100)

	note_ons = [msg for msg in track if msg.type == 'note_on']
	note_offs = [msg for msg in track if msg.type == 'note_off']

	assert [msg.note for msg in note_ons] == [60, 64, 67, 62, 65, 69]
	assert all(msg.velocity == 80 and msg.channel == 3 for msg in note_ons)
	assert all(msg.time == 0 for msg in note_ons)
	assert [msg.time for msg in note_offs] == [960, 0, 0, 960, 0, 0]


def test_empty_chord_becomes_rest () -> None:

	"""An empty chord delays the next chord by its duration."""

	mid = chordwalk.midi_export.progression_to_midi_file([[], ["C4"]], beats_per_chord=1)
	note_on = next(msg for msg in mid.tracks[0] if msg.type == 'note_on')

	assert note_on.time == 480


def test_beats_per_chord_must_be_positive () -> None:

	"""A zero chord duration is rejected."""

	with pytest.raises(ValueError):
		chordwalk.midi_export.progression_to_midi_file([["C4"]], beats_per_chord=0)


def test_save_midi_round_trip (tmp_path: pathlib.Path) -> None:

	"""A saved file can be read back by mido with the same notes."""

	path = tmp_path / "progression.mid"
	chordwalk.midi_export.save_midi([["C4", "E4", "G4"]], str(path), bpm=90)

	loaded = mido.MidiFile(str(path))
	notes = [msg.note for msg in loaded.tracks[0] if msg.type == 'note_on']

	assert notes == [60, 64, 67]
