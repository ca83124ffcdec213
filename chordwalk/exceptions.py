"""Exception types raised by chordwalk.

``ConfigurationError`` is also a ``ValueError`` so callers that catch the
usual ``ValueError`` for bad arguments keep working.
"""


class ChordwalkError (Exception):

	"""Base class for all chordwalk errors."""


class ConfigurationError (ChordwalkError, ValueError):

	"""The configuration (net, qualities, policies, scalars) cannot be used."""


class DependencyError (ChordwalkError, RuntimeError):

	"""A scale provider or chord speller failed. The original error is chained as ``__cause__``."""
