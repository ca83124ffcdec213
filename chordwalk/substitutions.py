"""Jazz-style chord substitution.

Two kinds of substitution are applied per net vertex, never per progression
position:

1. **Extension.** The vertex quality is replaced through a rule table: triads
   gain a seventh, sevenths gain a 9th/11th/13th, and altered chords gain a
   dominant seventh. Qualities outside the table are left alone.
2. **Tritone.** When a vertex keeps its quality, a second independent draw may
   flag every position that visits it for tritone substitution (the root is
   replaced by the note six semitones away; the quality is kept).

Example:
	```python
	rng = random.Random(3)
	substitution("7", rng)     # one of "9", "11", "13"
	substitution("dim", rng)   # "dim7"
	substitution("sus4", rng)  # "sus4" (no rule)
	```
"""

import dataclasses
import enum
import logging
import random
import typing

import chordwalk.walker


logger = logging.getLogger(__name__)

SUB_PROBABILITY: float = 0.25

ConditionType = typing.Callable[[], bool]


class QualityClass (enum.Enum):

	"""Classes of chord quality that share a substitution rule."""

	TRIAD = "triad"
	DIMINISHED_OR_AUGMENTED = "diminished_or_augmented"
	ALTERED = "altered"
	MAJOR_SEVENTH = "major_seventh"
	DOMINANT_SEVENTH = "dominant_seventh"
	MINOR_SEVENTH = "minor_seventh"
	OTHER = "other"


QUALITY_CLASSES: typing.Dict[str, QualityClass] = {
	"": QualityClass.TRIAD,
	"m": QualityClass.TRIAD,
	"dim": QualityClass.DIMINISHED_OR_AUGMENTED,
	"aug": QualityClass.DIMINISHED_OR_AUGMENTED,
	"-5": QualityClass.ALTERED,
	"-9": QualityClass.ALTERED,
	"M7": QualityClass.MAJOR_SEVENTH,
	"7": QualityClass.DOMINANT_SEVENTH,
	"m7": QualityClass.MINOR_SEVENTH,
}


def classify (quality: str) -> QualityClass:

	"""Return the substitution class of a chord quality (``OTHER`` when unlisted)."""

	return QUALITY_CLASSES.get(quality, QualityClass.OTHER)


def substitution (quality: str, rng: typing.Optional[random.Random] = None) -> str:

	"""Return the jazz-extended replacement for a chord quality.

	Randomness is only consumed by rules with more than one outcome.

	Parameters:
		quality: Chord quality suffix, e.g. ``""``, ``"m"``, ``"M7"``.
		rng: Random source for tie-breaks. A fresh ``random.Random()`` when omitted.

	Returns:
		The substituted quality, or ``quality`` itself when no rule applies.
	"""

	rng = rng or random.Random()
	quality_class = classify(quality)

	if quality_class is QualityClass.TRIAD:
		return quality + rng.choice(["M7", "7"])

	if quality_class is QualityClass.DIMINISHED_OR_AUGMENTED:
		return quality + "7"

	if quality_class is QualityClass.ALTERED:
		return f"7({quality})"

	if quality_class is QualityClass.MAJOR_SEVENTH:
		return rng.choice(["M9", "M11", "M13"])

	if quality_class is QualityClass.DOMINANT_SEVENTH:
		return rng.choice(["9", "11", "13"])

	if quality_class is QualityClass.MINOR_SEVENTH:
		return rng.choice(["m9", "m11", "m13"])

	# QualityClass.OTHER
	return quality


class SubstitutionEngine:

	"""Apply quality and tritone substitution to a walked progression."""

	def __init__ (self, condition: typing.Optional[ConditionType] = None, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Initialize the engine.

		Parameters:
			condition: Zero-argument predicate drawn for every decision. Defaults
				to "true with probability ``SUB_PROBABILITY``" using ``rng``.
			rng: Random source for the default condition and rule tie-breaks.
		"""

		self.rng = rng or random.Random()
		self.condition: ConditionType = condition or self._default_condition


	def _default_condition (self) -> bool:

		return self.rng.random() < SUB_PROBABILITY


	def apply (
		self,
		qualities: typing.Sequence[str],
		steps: typing.Sequence[chordwalk.walker.Step]
	) -> typing.Tuple[typing.List[str], typing.List[chordwalk.walker.Step]]:

		"""
		Return substituted per-vertex qualities and the steps with tritone flags set.

		``qualities[i]`` belongs to vertex ``i + 1``. Neither input is modified.
		"""

		new_qualities = list(qualities)
		new_steps = list(steps)

		for index, quality in enumerate(qualities):
			vertex = index + 1
			substituted = quality

			if self.condition():
				substituted = substitution(quality, self.rng)
				new_qualities[index] = substituted

			if substituted != quality:
				logger.debug(f"Vertex {vertex}: {quality!r} -> {substituted!r}")
				continue

			if self.condition():
				logger.debug(f"Vertex {vertex}: tritone substitution")
				new_steps = [
					dataclasses.replace(step, tritone=True) if step.vertex == vertex else step
					for step in new_steps
				]

		return new_qualities, new_steps
