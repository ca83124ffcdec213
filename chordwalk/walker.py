"""Random walks over a transition graph.

The walker chooses one vertex per progression position. The first and last
positions follow their own policies; every position in between follows a
random edge out of the previous vertex.

Example:
	```python
	graph = chordwalk.transition_graph.build_graph({1: [2], 2: [1]})
	walker = ProgressionWalker(graph, rng=random.Random(7))
	[step.vertex for step in walker.walk(4)]   # → [1, 2, 1, 1]
	```
"""

import dataclasses
import enum
import logging
import random
import typing

import chordwalk.exceptions
import chordwalk.transition_graph


logger = logging.getLogger(__name__)


class Policy (enum.Enum):

	"""How the first (tonic) or last (resolve) position is chosen."""

	FIXED = "fixed"			# always vertex 1
	NEIGHBOR = "neighbor"	# a random successor of an anchor vertex
	RANDOM = "random"		# any vertex with outgoing transitions


def coerce_policy (value: typing.Union[Policy, str]) -> Policy:

	"""Return a Policy from an enum member or its (case-insensitive) name or value.

	Raises:
		ConfigurationError: If the value names no policy.
	"""

	if isinstance(value, Policy):
		return value

	if isinstance(value, str):
		key = value.strip().lower()

		for policy in Policy:
			if key in (policy.value, policy.name.lower()):
				return policy

	raise chordwalk.exceptions.ConfigurationError(
		f"Unknown policy: {value!r}. Expected one of {[p.value for p in Policy]}"
	)


@dataclasses.dataclass(frozen=True)
class Step:

	"""
	One progression position: the visited vertex and whether it takes a tritone substitution.
	"""

	vertex: int
	tritone: bool = False


class ProgressionWalker:

	"""Walk a TransitionGraph with distinct policies at the first and last positions."""

	def __init__ (
		self,
		graph: chordwalk.transition_graph.TransitionGraph,
		tonic_policy: Policy = Policy.FIXED,
		resolve_policy: Policy = Policy.FIXED,
		rng: typing.Optional[random.Random] = None
	) -> None:

		"""
		Initialize the walker.

		Parameters:
			graph: The graph to walk. Vertex 1 is treated as the tonic.
			tonic_policy: How position 1 is chosen.
			resolve_policy: How the last position is chosen.
			rng: Optional seeded ``random.Random`` for repeatable walks.
		"""

		self.graph = graph
		self.tonic_policy = tonic_policy
		self.resolve_policy = resolve_policy
		self.rng = rng or random.Random()


	def _random_full_key (self) -> int:

		"""Pick any vertex that has outgoing transitions."""

		full_keys = self.graph.full_keys()

		if not full_keys:
			raise chordwalk.exceptions.ConfigurationError("Net has no vertex with outgoing transitions")

		return self.rng.choice(full_keys)


	def _tonic (self) -> int:

		"""Choose the vertex for position 1."""

		if self.tonic_policy is Policy.FIXED:
			return 1

		if self.tonic_policy is Policy.NEIGHBOR:
			return self.graph.random_successor(1, self.rng)

		return self._random_full_key()


	def _resolve (self) -> int:

		"""Choose the vertex for the last position."""

		if self.resolve_policy is Policy.FIXED:
			return 1

		if self.resolve_policy is Policy.NEIGHBOR:
			# Anchored on the highest-numbered vertex, not the vertex visited one step earlier.
			return self.graph.random_successor(max(self.graph.vertices()), self.rng)

		return self._random_full_key()


	def next_vertex (self, n: int, length: int, previous: typing.Optional[int]) -> int:

		"""
		Choose the vertex for 1-based position ``n`` of a progression of ``length`` positions.
		"""

		if n == 1:
			return self._tonic()

		if n == length:
			return self._resolve()

		assert previous is not None
		return self.graph.random_successor(previous, self.rng)


	def walk (self, length: int) -> typing.List[Step]:

		"""
		Return ``length`` Steps, none of them tritone-flagged.
		"""

		steps: typing.List[Step] = []
		previous: typing.Optional[int] = None

		for n in range(1, length + 1):
			previous = self.next_vertex(n, length, previous)
			steps.append(Step(vertex=previous))

		logger.debug(f"Walked {length} steps: {[step.vertex for step in steps]}")

		return steps
