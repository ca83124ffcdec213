"""Progression configuration.

``Config`` is immutable: build a new one with ``dataclasses.replace()`` to
change a setting. It can also be loaded from a plain mapping or a YAML file:

```yaml
max: 4
scale_root: A
scale_name: minor
chord_qualities: ["m", "dim", "", "m", "m", "", ""]
net:
  1: [3, 4, 6]
  2: [5]
  3: [4, 6]
  4: [1, 5, 7]
  5: [1]
  6: [2, 4]
  7: [3]
resolve_policy: neighbor
```
"""

import dataclasses
import logging
import os
import typing

import yaml

import chordwalk.exceptions
import chordwalk.walker


logger = logging.getLogger(__name__)


DEFAULT_NET: typing.Dict[int, typing.List[int]] = {
	1: [1, 2, 3, 4, 5, 6],
	2: [3, 5],
	3: [2, 4, 6],
	4: [1, 2, 3, 5],
	5: [1],
	6: [2, 4],
}

DEFAULT_QUALITIES: typing.List[str] = ["", "m", "m", "", "", "m"]


@dataclasses.dataclass(frozen=True)
class Config:

	"""
	Settings for a progression engine.

	Attributes:
		max: Number of chords in a progression.
		net: Vertex id (1..N, contiguous) to successor vertex ids.
		chord_qualities: Quality suffix per vertex; index 0 is vertex 1.
		scale_root: Root note of the reference scale, e.g. ``"C"`` or ``"Bb"``.
		scale_name: Scale name understood by the scale provider.
		octave: Octave of the chords.
		tonic_policy: How the first chord is chosen.
		resolve_policy: How the last chord is chosen.
		substitute: Enable jazz extension and tritone substitution.
		sub_condition: Zero-argument predicate for each substitution decision;
			``None`` means true with probability 1/4.
		flat: Respell sharp pitch names with flats.
	"""

	max: int = 8
	net: typing.Mapping[int, typing.Sequence[int]] = dataclasses.field(default_factory=lambda: {k: list(v) for k, v in DEFAULT_NET.items()})
	chord_qualities: typing.Sequence[str] = dataclasses.field(default_factory=lambda: list(DEFAULT_QUALITIES))
	scale_root: str = "C"
	scale_name: str = "major"
	octave: int = 4
	tonic_policy: chordwalk.walker.Policy = chordwalk.walker.Policy.FIXED
	resolve_policy: chordwalk.walker.Policy = chordwalk.walker.Policy.FIXED
	substitute: bool = False
	sub_condition: typing.Optional[typing.Callable[[], bool]] = dataclasses.field(default=None, compare=False)
	flat: bool = False


	def __post_init__ (self) -> None:

		# Policies given as strings ("neighbor") become enum members; the rest is checked in validate().
		for name in ("tonic_policy", "resolve_policy"):
			value = getattr(self, name)

			if isinstance(value, str):
				object.__setattr__(self, name, chordwalk.walker.coerce_policy(value))


	def validate (self) -> None:

		"""Check the configuration before anything is generated.

		The chord-quality count is checked first. The remaining checks
		(contiguous keys, dangling successors, scalar types) reject nets and
		settings that would otherwise fail part-way through a walk.

		Raises:
			ConfigurationError: On the first problem found.
		"""

		if len(self.chord_qualities) != len(self.net):
			raise chordwalk.exceptions.ConfigurationError(
				f"chord_qualities has {len(self.chord_qualities)} entries but net has {len(self.net)} vertices"
			)

		if not self.net:
			raise chordwalk.exceptions.ConfigurationError("net must contain at least one vertex")

		if isinstance(self.max, bool) or not isinstance(self.max, int) or self.max < 1:
			raise chordwalk.exceptions.ConfigurationError(f"max must be a positive integer, got {self.max!r}")

		if isinstance(self.octave, bool) or not isinstance(self.octave, int):
			raise chordwalk.exceptions.ConfigurationError(f"octave must be an integer, got {self.octave!r}")

		for name in ("substitute", "flat"):
			if not isinstance(getattr(self, name), bool):
				raise chordwalk.exceptions.ConfigurationError(f"{name} must be a boolean, got {getattr(self, name)!r}")

		for name in ("tonic_policy", "resolve_policy"):
			if not isinstance(getattr(self, name), chordwalk.walker.Policy):
				raise chordwalk.exceptions.ConfigurationError(f"{name} must be a Policy, got {getattr(self, name)!r}")

		for vertex in self.net:
			if isinstance(vertex, bool) or not isinstance(vertex, int):
				raise chordwalk.exceptions.ConfigurationError(f"net keys must be integers, got {vertex!r}")

		expected = list(range(1, len(self.net) + 1))

		if sorted(self.net) != expected:
			raise chordwalk.exceptions.ConfigurationError(
				f"net keys must be contiguous integers from 1, got {list(self.net)}"
			)

		for vertex, successors in self.net.items():
			for successor in successors:
				if successor not in self.net:
					raise chordwalk.exceptions.ConfigurationError(
						f"Vertex {vertex} lists successor {successor!r}, which is not a net key"
					)


	@classmethod
	def from_dict (cls, data: typing.Mapping[str, typing.Any]) -> "Config":

		"""Build a Config from a plain mapping (e.g. parsed YAML).

		Net keys and successors are converted to ``int``; unknown keys are rejected.

		Raises:
			ConfigurationError: For unknown keys or non-integer vertex ids.
		"""

		known = {field.name for field in dataclasses.fields(cls)}
		unknown = sorted(set(data) - known)

		if unknown:
			raise chordwalk.exceptions.ConfigurationError(f"Unknown config keys: {unknown}")

		kwargs = dict(data)

		if "net" in kwargs:
			try:
				kwargs["net"] = {int(k): [int(p) for p in (v or [])] for k, v in kwargs["net"].items()}

			except (TypeError, ValueError, AttributeError) as exc:
				raise chordwalk.exceptions.ConfigurationError(f"Invalid net: {exc}") from exc

		if "chord_qualities" in kwargs:
			kwargs["chord_qualities"] = ["" if q is None else str(q) for q in kwargs["chord_qualities"]]

		return cls(**kwargs)


def load_config (config_path: str) -> Config:

	"""
	Load a Config from a YAML file. An empty file gives the defaults.
	"""

	if not os.path.exists(config_path):
		raise chordwalk.exceptions.ConfigurationError(f"Config file {config_path} not found")

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		logger.warning(f"Config file {config_path} is empty. Using defaults.")
		return Config()

	if not isinstance(data, dict):
		raise chordwalk.exceptions.ConfigurationError(f"Config file {config_path} must contain a mapping")

	return Config.from_dict(data)
