#
# Detecting chords in the MIDI input stream
#
import time
from chordvery import *
from chordvery.midiio import *

session = Session(MidiInput())
with session.midi:
    while True:
        if session.tick():  # True when a chord with a new name is played
            chord = session.current_chord
            print(sorted(session.midi.held_notes()), chord.name(),
                  chord.roman_numeral(session.key))
        time.sleep(TICK_INTERVAL)
