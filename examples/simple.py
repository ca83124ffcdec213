import logging
import random

import chordwalk

logging.basicConfig(level=logging.INFO)

# Eight chords in D major, starting and ending on the tonic.
prog = chordwalk.Progression(scale_root="D", rng=random.Random(2024))

for chord in prog.generate():
	print(" ".join(chord))
