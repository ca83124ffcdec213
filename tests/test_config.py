import dataclasses
import pathlib

import pytest

import chordwalk.config
import chordwalk.exceptions
import chordwalk.walker


Config = chordwalk.config.Config


def test_defaults () -> None:

	"""The default config matches the documented defaults."""

	config = Config()

	assert config.max == 8
	assert config.net == chordwalk.config.DEFAULT_NET
	assert list(config.chord_qualities) == ["", "m", "m", "", "", "m"]
	assert config.scale_root == "C"
	assert config.scale_name == "major"
	assert config.octave == 4
	assert config.tonic_policy is chordwalk.walker.Policy.FIXED
	assert config.resolve_policy is chordwalk.walker.Policy.FIXED
	assert config.substitute is False
	assert config.sub_condition is None
	assert config.flat is False

	config.validate()


def test_default_net_is_not_shared () -> None:

	"""Each Config gets its own copy of the default net."""

	a = Config()
	b = Config()

	assert a.net is not b.net
	assert a.net is not chordwalk.config.DEFAULT_NET


def test_config_is_frozen () -> None:

	"""Settings cannot be reassigned after construction."""

	config = Config()

	with pytest.raises(dataclasses.FrozenInstanceError):
		config.max = 3  # type: ignore[misc]


def test_policy_strings_are_coerced () -> None:

	"""Policies given as strings become enum members."""

	config = Config(tonic_policy="random", resolve_policy="Neighbor")

	assert config.tonic_policy is chordwalk.walker.Policy.RANDOM
	assert config.resolve_policy is chordwalk.walker.Policy.NEIGHBOR


def test_quality_count_mismatch () -> None:

	"""chord_qualities must have one entry per net vertex."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="chord_qualities"):
		Config(chord_qualities=[""]).validate()


def test_configuration_error_is_value_error () -> None:

	"""ConfigurationError can be caught as ValueError."""

	with pytest.raises(ValueError):
		Config(chord_qualities=[""]).validate()


@pytest.mark.parametrize("value", [0, -3, 2.5, True, "8"])
def test_max_must_be_positive_int (value: object) -> None:

	"""max must be a positive integer."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="max"):
		Config(max=value).validate()  # type: ignore[arg-type]


def test_flags_must_be_bool () -> None:

	"""substitute and flat only accept booleans."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="flat"):
		Config(flat=1).validate()  # type: ignore[arg-type]


# The checks below harden the net beyond the quality-count rule: they reject
# nets that would otherwise fail or misbehave part-way through a walk.

def test_non_contiguous_keys_rejected () -> None:

	"""Net keys must run 1..N without gaps."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="contiguous"):
		Config(net={1: [3], 3: [1]}, chord_qualities=["", ""]).validate()


def test_mixed_key_types_rejected () -> None:

	"""A net mixing integer and string keys is a configuration error, not a TypeError."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="integers"):
		Config(net={1: [1], "2": [1]}, chord_qualities=["", ""]).validate()


def test_dangling_successor_rejected () -> None:

	"""Every successor must itself be a net key."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="successor 7"):
		Config(net={1: [2], 2: [7]}, chord_qualities=["", ""]).validate()


def test_empty_net_rejected () -> None:

	"""A net needs at least one vertex."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="at least one vertex"):
		Config(net={}, chord_qualities=[]).validate()


def test_isolated_vertex_allowed () -> None:

	"""A vertex with an empty successor list is valid."""

	Config(net={1: [1], 2: []}, chord_qualities=["", "m"]).validate()


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def test_from_dict_converts_keys () -> None:

	"""String vertex keys (as from JSON or YAML) become ints."""

	config = Config.from_dict({"net": {"1": ["2"], "2": [1]}, "chord_qualities": [None, "m"], "max": 3})

	assert config.net == {1: [2], 2: [1]}
	assert config.chord_qualities == ["", "m"]
	assert config.max == 3


def test_from_dict_rejects_unknown_keys () -> None:

	"""Misspelled settings are reported instead of ignored."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="maximum"):
		Config.from_dict({"maximum": 4})


def test_from_dict_rejects_bad_net () -> None:

	"""Vertex ids that are not integers are a configuration error."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="Invalid net"):
		Config.from_dict({"net": {"one": [2]}})


def test_load_config_yaml (tmp_path: pathlib.Path) -> None:

	"""A YAML file is parsed into a Config."""

	path = tmp_path / "progression.yaml"
	path.write_text(
		"max: 4\n"
		"scale_root: A\n"
		"scale_name: minor\n"
		"chord_qualities: [m, dim, '']\n"
		"net:\n"
		"  1: [2, 3]\n"
		"  2: [3]\n"
		"  3: [1]\n"
		"resolve_policy: neighbor\n"
		"flat: true\n"
	)

	config = chordwalk.config.load_config(str(path))

	assert config.max == 4
	assert config.scale_root == "A"
	assert config.net == {1: [2, 3], 2: [3], 3: [1]}
	assert config.chord_qualities == ["m", "dim", ""]
	assert config.resolve_policy is chordwalk.walker.Policy.NEIGHBOR
	assert config.flat is True


def test_load_config_numeric_qualities (tmp_path: pathlib.Path) -> None:

	"""Unquoted numeric qualities such as 7 or -5 are read as strings."""

	path = tmp_path / "jazz.yaml"
	path.write_text("net: {1: [2], 2: [1]}\nchord_qualities: [7, -5]\n")

	assert chordwalk.config.load_config(str(path)).chord_qualities == ["7", "-5"]


def test_load_config_empty_file (tmp_path: pathlib.Path) -> None:

	"""An empty file gives the defaults."""

	path = tmp_path / "empty.yaml"
	path.write_text("")

	assert chordwalk.config.load_config(str(path)) == Config()


def test_load_config_missing_file (tmp_path: pathlib.Path) -> None:

	"""A missing file is a configuration error."""

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="not found"):
		chordwalk.config.load_config(str(tmp_path / "missing.yaml"))


def test_load_config_requires_mapping (tmp_path: pathlib.Path) -> None:

	"""A YAML list at the top level is rejected."""

	path = tmp_path / "list.yaml"
	path.write_text("- 1\n- 2\n")

	with pytest.raises(chordwalk.exceptions.ConfigurationError, match="mapping"):
		chordwalk.config.load_config(str(path))
