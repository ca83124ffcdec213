import logging
import random

import chordwalk
import chordwalk.event_emitter
import chordwalk.midi_export

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

emitter = chordwalk.event_emitter.EventEmitter()
emitter.on("phrase", lambda symbols: logger.info(f"Phrase: {' '.join(symbols)}"))

# A ii-V-I flavoured network in Eb with seventh chords. Substitution fires on
# half of the decisions, so most vertices gain an extension or a tritone swap.
rng = random.Random(7)

prog = chordwalk.Progression(
	max = 8,
	net = {
		1: [2, 4, 6],
		2: [5],
		3: [6],
		4: [2, 5],
		5: [1, 3],
		6: [2, 4],
	},
	chord_qualities = ["M7", "m7", "m7", "M7", "7", "m7"],
	scale_root = "Eb",
	octave = 3,
	resolve_policy = "neighbor",
	substitute = True,
	sub_condition = lambda: rng.random() < 0.5,
	flat = True,
	rng = rng,
	emitter = emitter,
)

chords = prog.generate()

for chord in chords:
	print(" ".join(chord))

chordwalk.midi_export.save_midi(chords, "jazz.mid", bpm=96, beats_per_chord=4)
