"""Command-line progression generator.

Usage::

    python -m chordwalk
    python -m chordwalk --max 4 --root Bb --flat --seed 3
    python -m chordwalk --config progression.yaml --substitute --midi out.mid

Prints one chord per line as ``symbol: pitch pitch pitch``.
"""

import argparse
import dataclasses
import logging
import random
import sys
import typing

import chordwalk.config
import chordwalk.event_emitter
import chordwalk.exceptions
import chordwalk.midi_export
import chordwalk.progression


logger = logging.getLogger(__name__)


def build_parser () -> argparse.ArgumentParser:

	"""Return the argument parser for the CLI."""

	parser = argparse.ArgumentParser(prog="chordwalk", description="Generate network transition chord progressions.")

	parser.add_argument("--config", help="YAML config file")
	parser.add_argument("--max", type=int, help="number of chords")
	parser.add_argument("--root", dest="scale_root", help="scale root note, e.g. C, F#, Bb")
	parser.add_argument("--scale", dest="scale_name", help="scale name, e.g. major, minor, dorian")
	parser.add_argument("--octave", type=int, help="chord octave")
	parser.add_argument("--tonic", dest="tonic_policy", choices=["fixed", "neighbor", "random"], help="first chord policy")
	parser.add_argument("--resolve", dest="resolve_policy", choices=["fixed", "neighbor", "random"], help="last chord policy")
	parser.add_argument("--substitute", action="store_true", default=None, help="enable jazz and tritone substitution")
	parser.add_argument("--flat", action="store_true", default=None, help="spell pitches with flats")
	parser.add_argument("--seed", type=int, help="random seed for a repeatable progression")
	parser.add_argument("--midi", help="also write the progression to this MIDI file")
	parser.add_argument("--bpm", type=float, default=120, help="tempo of the MIDI file")
	parser.add_argument("--verbose", action="store_true", help="log each generation stage")

	return parser


def _attach_verbose_listeners (emitter: chordwalk.event_emitter.EventEmitter) -> None:

	"""Log every generation stage at INFO level."""

	emitter.on("graph", lambda graph: logger.info(f"Graph: {graph!r}"))
	emitter.on("progression", lambda steps: logger.info("Progression: " + " ".join(f"{s.vertex}{'t' if s.tritone else ''}" for s in steps)))
	emitter.on("phrase", lambda symbols: logger.info(f"Phrase: {' '.join(symbols)}"))
	emitter.on("notes", lambda chords: logger.info(f"Notes: {chords}"))


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Entry point for ``python -m chordwalk``. Returns the process exit code.
	"""

	logging.basicConfig(level=logging.INFO)

	args = build_parser().parse_args(argv)

	emitter = chordwalk.event_emitter.EventEmitter()

	if args.verbose:
		_attach_verbose_listeners(emitter)

	try:
		config = chordwalk.config.load_config(args.config) if args.config else chordwalk.config.Config()

		overrides = {
			field.name: getattr(args, field.name)
			for field in dataclasses.fields(chordwalk.config.Config)
			if getattr(args, field.name, None) is not None
		}

		prog = chordwalk.progression.Progression(
			config,
			rng = random.Random(args.seed) if args.seed is not None else None,
			emitter = emitter,
			**overrides
		)

		result = prog.generate_detailed()

	except chordwalk.exceptions.ChordwalkError as exc:
		logger.error(str(exc))
		return 1

	midi_file = None

	if args.midi:
		try:
			midi_file = chordwalk.midi_export.progression_to_midi_file(result.chords, bpm=args.bpm)

		except ValueError as exc:
			logger.error(f"Cannot export MIDI: {exc}")
			return 1

	for chord_symbol, pitches in zip(result.symbols, result.chords):
		print(f"{chord_symbol}: {' '.join(pitches)}")

	if midi_file is not None:
		try:
			midi_file.save(args.midi)

		except OSError as exc:
			logger.error(f"Cannot write {args.midi}: {exc}")
			return 1

		logger.info(f"Saved {args.midi}")

	return 0


if __name__ == "__main__":
	sys.exit(main())
