import random
import typing

import chordwalk.exceptions


NetType = typing.Mapping[int, typing.Sequence[int]]


class TransitionGraph:

	"""
	A directed graph over integer vertex ids with uniform random successors.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty graph.
		"""

		self._edges: typing.Dict[int, typing.List[int]] = {}


	@classmethod
	def build (cls, net: NetType) -> "TransitionGraph":

		"""
		Build a graph from an adjacency mapping of vertex to successor list.

		Every key becomes a vertex, including keys with an empty successor list.
		"""

		graph = cls()

		for vertex, successors in net.items():
			graph.add_vertex(vertex)

			for successor in successors:
				graph.add_transition(vertex, successor)

		return graph


	def add_vertex (self, vertex: int) -> None:

		"""
		Add a vertex with no outgoing transitions (no-op if it already exists).
		"""

		if vertex not in self._edges:
			self._edges[vertex] = []


	def add_transition (self, source: int, target: int) -> None:

		"""
		Add a transition between two vertices.
		"""

		self.add_vertex(source)

		# Repeated targets are kept: they make that target proportionally more likely.
		self._edges[source].append(target)


	def get_transitions (self, source: int) -> typing.List[int]:

		"""
		Return the successor list of a vertex.
		"""

		if source not in self._edges:
			return []

		return list(self._edges[source])


	def vertices (self) -> typing.List[int]:

		"""
		Return every vertex in key order.
		"""

		return sorted(self._edges)


	def full_keys (self) -> typing.List[int]:

		"""
		Return the vertices that have at least one outgoing transition, in key order.
		"""

		return sorted(vertex for vertex, targets in self._edges.items() if targets)


	def random_successor (self, vertex: int, rng: random.Random) -> int:

		"""
		Choose a successor of ``vertex`` uniformly at random.

		Raises:
			ConfigurationError: If the vertex has no outgoing transitions.
		"""

		options = self._edges.get(vertex)

		if not options:
			raise chordwalk.exceptions.ConfigurationError(f"Vertex {vertex} has no outgoing transitions")

		return rng.choice(options)


	def __repr__ (self) -> str:

		edges = ",".join(f"{source}-{target}" for source, targets in self._edges.items() for target in targets)

		return f"TransitionGraph({edges})"


def build_graph (net: NetType) -> TransitionGraph:

	"""
	Build a TransitionGraph from an adjacency mapping.
	"""

	return TransitionGraph.build(net)
