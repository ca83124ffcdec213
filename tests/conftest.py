import random
import typing

import pytest

import chordwalk.config
import chordwalk.walker


CHAIN_NET: typing.Dict[int, typing.List[int]] = {1: [2], 2: [3], 3: [4], 4: [5], 5: [6], 6: [1]}


class ScriptedCondition:

	"""A sub_condition that replays a fixed list of answers and counts calls."""

	def __init__ (self, answers: typing.List[bool]) -> None:

		self.answers = list(answers)
		self.calls = 0

	def __call__ (self) -> bool:

		answer = self.answers[self.calls]
		self.calls += 1
		return answer


@pytest.fixture
def rng () -> random.Random:

	"""A seeded random source so every run walks the same path."""

	return random.Random(1234)


@pytest.fixture
def chain_config () -> chordwalk.config.Config:

	"""A 6-vertex cycle where every successor choice is forced."""

	return chordwalk.config.Config(net=CHAIN_NET, max=6, resolve_policy=chordwalk.walker.Policy.NEIGHBOR)
