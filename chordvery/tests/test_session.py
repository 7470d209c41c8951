import pytest
import mido
from chordvery import *
from chordvery.midiio import MidiInput


def test_history():
    h = ChordHistory()
    for name in ('C', 'C', 'F', 'G', 'G'):
        h.push(Chord.from_name(name))
    assert h.names() == ['C', 'F', 'G'] and len(h) == 3
    assert [e.age for e in h.entries()] == [2, 1, 0]
    assert h.last() == Chord.from_name('G')
    h.push(Chord.from_name('C'))
    assert h.names() == ['C', 'F', 'G', 'C']
    # names are compared, not pitch-class identity
    h.push(Chord.from_name('C/E'))
    assert h.names()[-1] == 'C/E'
    h.clear()
    assert h.entries() == [] and h.last() is None


def test_history_limit():
    h = ChordHistory(max_entries=4)
    names = ['C', 'Dm', 'Em', 'F', 'G', 'Am']
    for name in names:
        h.push(Chord.from_name(name))
    assert h.names() == names[-4:]
    assert [e.age for e in h] == [3, 2, 1, 0]
    with pytest.raises(ValueError):
        ChordHistory(0)

    h = ChordHistory(max_entries=300)
    for i in range(300):
        h.push(Chord.from_name('C' if i % 2 == 0 else 'F'))
    assert len(h) == 300 and h.entries()[0].age == 255
    assert h.entries()[-46].age == 45


def test_history_fade():
    h = ChordHistory()
    for pc in range(10):
        h.push(Chord(Note.from_pitch_class(pc)))
    h.tick()
    assert len(h) == 10
    h.set_fade(True)
    h.tick()
    assert len(h) == 8 and all(e.age < 8 for e in h)
    assert h.names()[0] == 'D' and h.names()[-1] == 'A'


def test_session_update():
    s = Session()
    assert s.suggestions() is None and s.current_chord is None
    assert s.update({60, 64, 67})
    assert s.current_chord.name() == 'C' and s.key == C4
    assert not s.update({60, 64, 67})
    assert not s.update({60, 64})
    assert s.current_chord.name() == 'C'
    # a different voicing with the same name is not recorded again
    assert not s.update({48, 64, 67})
    assert s.history.names() == ['C']
    assert s.update({65, 69, 72})
    assert s.current_chord.name() == 'F' and s.key == C4
    assert s.history.names() == ['C', 'F']
    tree = s.suggestions()
    assert tree.chord.name() == 'F'
    assert (tree.left.chord.name(), tree.right.chord.name()) == ('G', 'C')
    assert not s.tick()
    assert s.current_chord.name() == 'F'


def test_session_modes():
    s = Session()
    assert s.mode is Mode.DISCOVERY and not s.history.fade
    assert s.toggle_mode() is Mode.JAM and s.history.fade
    assert s.toggle_mode() is Mode.DISCOVERY and not s.history.fade

    s.update({57, 60, 64})
    assert s.key == A4
    assert s.suggestions().left.chord.name() == 'D'
    assert s.toggle_extended()
    assert s.suggestions().left.chord.name() == 'Dmaj7'
    assert not s.toggle_extended()

    s.set_key('C')
    assert s.key == C4
    assert s.suggestions().tostr(s.key, True).split('\n')[0] == 'Am (vi)'
    s.set_key(None)
    s.update({55, 59, 62})
    assert s.key == G4
    s.clear()
    assert len(s.history) == 0 and s.key is None
    assert s.current_chord.name() == 'G'
    s.update({60, 64, 67})
    assert s.key == C4


def test_session_jam():
    s = Session()
    s.toggle_mode()
    chords = ('C', 'Dm', 'Em', 'F', 'G', 'Am', 'Bdim', 'C', 'Dm', 'Em')
    for name in chords:
        s.update(Chord.from_name(name).pitches())
    assert s.history.names() == list(chords[-8:])


def test_session_midi():
    midi = MidiInput()
    s = Session(midi)
    for n in (60, 64, 67):
        midi.process_message(mido.Message('note_on', note=n, velocity=100))
    assert s.tick() and s.current_chord.name() == 'C'
    midi.process_message(mido.Message('note_off', note=60))
    midi.process_message(mido.Message('note_on', note=72, velocity=80))
    assert s.tick() and s.current_chord.name() == 'C/E'
    midi.process_message(mido.Message('note_on', note=64, velocity=0))
    assert not s.tick() and s.current_chord.name() == 'C/E'
    assert s.history.names() == ['C', 'C/E']
