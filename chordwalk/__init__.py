"""
chordwalk - network transition chord progressions for Python.

A progression is a random walk over a small directed network of scale
degrees. Each visited degree becomes a chord (scale note + quality), which is
then spelled out as pitch names at an octave.

What it does:

- **Constrained random walk.** Vertex 1 is the tonic. The first and last
  chords follow their own policies (``fixed``, ``neighbor``, ``random``);
  everything in between follows the network's edges.
- **Jazz substitution.** With ``substitute=True`` each vertex may have its
  quality extended (``""`` → ``"M7"``/``"7"``, ``"7"`` → ``"9"``/``"11"``/``"13"``,
  ...) or, failing that, be swapped for the chord a tritone away.
- **Pitch spelling.** Chords are expanded into names like ``"E4"`` and can be
  respelled with flats (``"A#4"`` → ``"Bb4"``).
- **Pluggable collaborators.** Scale lookup and chord spelling are protocols;
  the built-in implementations cover the common scales and chord qualities.
- **Repeatable.** Pass a seeded ``random.Random`` to get the same progression
  every time.
- **MIDI export.** ``chordwalk.midi_export.save_midi()`` writes a progression to
  a standard MIDI file.

Minimal example:

    ```python
    import random
    import chordwalk

    prog = chordwalk.Progression(max=4, scale_root="A", scale_name="minor",
                                 chord_qualities=["m", "dim", "", "m", "m", ""],
                                 rng=random.Random(42))
    for chord in prog.generate():
        print(chord)
    ```

Package-level exports: ``Config``, ``Progression``, ``Policy``, ``Step``,
``substitution``, ``ConfigurationError``, ``DependencyError``.
"""

import chordwalk.config
import chordwalk.exceptions
import chordwalk.progression
import chordwalk.substitutions
import chordwalk.walker


Config = chordwalk.config.Config
Progression = chordwalk.progression.Progression
Policy = chordwalk.walker.Policy
Step = chordwalk.walker.Step
substitution = chordwalk.substitutions.substitution
ConfigurationError = chordwalk.exceptions.ConfigurationError
DependencyError = chordwalk.exceptions.DependencyError
