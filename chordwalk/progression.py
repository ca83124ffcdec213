import dataclasses
import logging
import random
import typing

import chordwalk.config
import chordwalk.event_emitter
import chordwalk.exceptions
import chordwalk.notes
import chordwalk.renderer
import chordwalk.spelling
import chordwalk.substitutions
import chordwalk.transition_graph
import chordwalk.walker


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class GeneratedProgression:

	"""
	Everything produced by one generation: walk, qualities, symbols and pitches.
	"""

	steps: typing.List[chordwalk.walker.Step]
	qualities: typing.List[str]
	symbols: typing.List[str]
	chords: typing.List[typing.List[str]]


class Progression:

	"""Generate chord progressions by walking a transition network.

	Example:
		```python
		import random
		import chordwalk

		prog = chordwalk.Progression(max=4, scale_root="D", rng=random.Random(1))
		prog.generate()   # e.g. [['D4', 'F#4', 'A4'], ['E4', 'G4', 'B4'], ...]
		```
	"""

	def __init__ (
		self,
		config: typing.Optional[chordwalk.config.Config] = None,
		rng: typing.Optional[random.Random] = None,
		scale_provider: typing.Optional[chordwalk.notes.ScaleProvider] = None,
		chord_speller: typing.Optional[chordwalk.spelling.ChordSpeller] = None,
		emitter: typing.Optional[chordwalk.event_emitter.EventEmitter] = None,
		**overrides: typing.Any
	) -> None:

		"""
		Initialize the engine.

		Parameters:
			config: Base configuration (defaults to ``Config()``).
			rng: Optional seeded ``random.Random`` for repeatable progressions.
			scale_provider: Scale lookup (defaults to ``BuiltinScaleProvider``).
			chord_speller: Chord symbol expansion (defaults to ``BuiltinChordSpeller``).
			emitter: Receives ``"graph"``, ``"progression"``, ``"phrase"`` and
				``"notes"`` events during ``generate()``.
			**overrides: Config fields applied on top of ``config``,
				e.g. ``Progression(max=4, flat=True)``.
		"""

		config = config or chordwalk.config.Config()

		if overrides:
			try:
				config = dataclasses.replace(config, **overrides)

			except TypeError as exc:
				raise chordwalk.exceptions.ConfigurationError(str(exc)) from exc

		self.config = config
		self.rng = rng or random.Random()
		self.scale_provider = scale_provider or chordwalk.notes.BuiltinScaleProvider()
		self.chord_speller = chord_speller or chordwalk.spelling.BuiltinChordSpeller()
		self.emitter = emitter or chordwalk.event_emitter.EventEmitter()

		self._graph: typing.Optional[chordwalk.transition_graph.TransitionGraph] = None


	@property
	def graph (self) -> chordwalk.transition_graph.TransitionGraph:

		"""The transition graph, built from ``config.net`` on first access."""

		if self._graph is None:
			self._graph = chordwalk.transition_graph.build_graph(self.config.net)
			logger.debug(f"Built graph: {self._graph!r}")

		return self._graph


	def substitution (self, quality: str) -> str:

		"""Return the jazz-extended replacement for ``quality`` using this engine's random source."""

		return chordwalk.substitutions.substitution(quality, self.rng)


	def _scale (self) -> typing.List[str]:

		"""Fetch the reference scale, wrapping provider failures."""

		try:
			scale = list(self.scale_provider.notes(self.config.scale_root, self.config.scale_name))

		except Exception as exc:
			raise chordwalk.exceptions.DependencyError(
				f"Cannot get scale {self.config.scale_root} {self.config.scale_name}: {exc}"
			) from exc

		if len(scale) < len(self.config.net):
			raise chordwalk.exceptions.ConfigurationError(
				f"net has {len(self.config.net)} vertices but scale {self.config.scale_root} "
				f"{self.config.scale_name} has only {len(scale)} notes"
			)

		return scale


	def generate_detailed (self) -> GeneratedProgression:

		"""Generate a progression and return every intermediate stage.

		Raises:
			ConfigurationError: If the configuration is invalid. Raised before
				any randomness is consumed.
			DependencyError: If the scale provider or chord speller fails.
		"""

		self.config.validate()
		scale = self._scale()

		graph = self.graph
		self.emitter.emit("graph", graph)

		walker = chordwalk.walker.ProgressionWalker(
			graph,
			tonic_policy = self.config.tonic_policy,
			resolve_policy = self.config.resolve_policy,
			rng = self.rng
		)

		steps = walker.walk(self.config.max)
		qualities = list(self.config.chord_qualities)

		if self.config.substitute:
			engine = chordwalk.substitutions.SubstitutionEngine(condition=self.config.sub_condition, rng=self.rng)
			qualities, steps = engine.apply(qualities, steps)

		self.emitter.emit("progression", steps)

		renderer = chordwalk.renderer.ChordRenderer(self.chord_speller, octave=self.config.octave, flat=self.config.flat)

		symbols = renderer.symbols(steps, qualities, scale)
		self.emitter.emit("phrase", symbols)

		chords = [renderer.spell(chord_symbol) for chord_symbol in symbols]
		self.emitter.emit("notes", chords)

		logger.debug(f"Generated {' '.join(symbols)}")

		return GeneratedProgression(steps=steps, qualities=qualities, symbols=symbols, chords=chords)


	def generate (self) -> typing.List[typing.List[str]]:

		"""Generate a progression as one list of pitch names per chord.

		Example:
			```python
			chordwalk.Progression(max=2).generate()   # → [['C4', 'E4', 'G4'], ['C4', 'E4', 'G4']]
			```
		"""

		return self.generate_detailed().chords
