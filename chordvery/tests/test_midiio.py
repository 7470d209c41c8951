import pytest
import threading
import mido
from chordvery import *
from chordvery import midiio
from chordvery.midiio import *


DEVICES = ['Midi Through:Midi Through Port-0 14:0',
           'Keystation 49:Keystation 49 MIDI 1 20:0']


class FakePort(object):
    def __init__(self, name, callback):
        self.name = name
        self.callback = callback
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def devices(monkeypatch):
    ports = []

    def open_input(name, callback=None):
        ports.append(FakePort(name, callback))
        return ports[-1]
    monkeypatch.setattr(mido, 'get_input_names', lambda: list(DEVICES))
    monkeypatch.setattr(mido, 'open_input', open_input)
    monkeypatch.setattr(midiio, '_input_devnum', None)
    monkeypatch.delenv('CHORDVERY_INPUT_DEVICE', raising=False)
    return ports


def test_held_notes():
    held = HeldNotes()
    held.note_on(60)
    held.note_on(64)
    held.note_on(60)
    assert held.snapshot() == {60, 64} and len(held) == 2
    assert isinstance(held.snapshot(), frozenset)
    held.note_off(60)
    held.note_off(61)
    assert held.snapshot() == {64}
    with pytest.raises(ValueError):
        held.note_on(128)
    held.clear()
    assert len(held) == 0


def test_process_message():
    held = HeldNotes()
    held.process_message(mido.Message('note_on', note=60, velocity=100))
    held.process_message(mido.Message('note_on', note=64, velocity=1))
    held.process_message(mido.Message('note_on', note=67, channel=9))
    assert held.snapshot() == {60, 64, 67}
    held.process_message(mido.Message('note_on', note=60, velocity=0))
    held.process_message(mido.Message('note_off', note=64, velocity=64))
    held.process_message(mido.Message('program_change', program=5))
    held.process_message(mido.Message('control_change', control=64,
                                      value=127))
    assert held.snapshot() == {67}
    held.process_message(mido.Message('control_change', control=123))
    assert held.snapshot() == frozenset()


def test_held_notes_threads():
    held = HeldNotes()

    def play(base):
        for n in range(base, base + 20):
            held.note_on(n)
    threads = [threading.Thread(target=play, args=(b,))
               for b in (20, 40, 60, 80, 100)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert held.snapshot() == frozenset(range(20, 120))


def test_find_input_device(devices):
    assert input_devices() == DEVICES
    assert find_input_device(1) == 1
    assert find_input_device('0') == 0
    assert find_input_device('Keystation') == 1
    assert find_input_device('Nanokey; Midi Through') == 0
    assert find_input_device(' ;Keystation') == 1
    assert find_input_device([5, 'Through']) == 0
    for dev in (2, -1, 'Nanokey', '', [3, 'x']):
        with pytest.raises(ValueError):
            find_input_device(dev)


def test_current_input_device(devices, monkeypatch):
    assert current_input_device() == 0
    set_input_device('Keystation')
    assert current_input_device() == 1
    with pytest.raises(ValueError):
        set_input_device('Nanokey')
    assert current_input_device() == 1

    monkeypatch.setattr(midiio, '_input_devnum', None)
    monkeypatch.setenv('CHORDVERY_INPUT_DEVICE', 'Nanokey;Keystation')
    assert current_input_device() == 1

    monkeypatch.setattr(midiio, '_input_devnum', None)
    monkeypatch.setenv('CHORDVERY_INPUT_DEVICE', 'Nanokey')
    with pytest.warns(ChordveryWarning):
        assert current_input_device() == 0


def test_show_devices(devices, capsys):
    set_input_device(1)
    with MidiInput(0):
        show_devices()
    lines = capsys.readouterr().out.split('\n')
    assert lines[0] == 'MIDI Input Devices:'
    assert lines[1] == '   *[0] ' + DEVICES[0]
    assert lines[2] == ' >  [1] ' + DEVICES[1]


def test_show_devices_empty(monkeypatch, capsys):
    monkeypatch.setattr(mido, 'get_input_names', lambda: [])
    show_devices()
    assert capsys.readouterr().out == 'MIDI Input Devices:\n  Not available\n'


def test_no_devices(devices, monkeypatch):
    monkeypatch.setattr(mido, 'get_input_names', lambda: [])
    with pytest.raises(ValueError):
        current_input_device()
    assert midiio._input_devnum is None
    midi = MidiInput()
    with pytest.raises(ValueError):
        midi.open()
    assert not midi.is_open() and devices == []

    # a selection made while the port still existed
    monkeypatch.setattr(midiio, '_input_devnum', 1)
    with pytest.raises(ValueError, match='No such device'):
        midi.open()
    assert devices == []


def test_midi_input(devices):
    midi = MidiInput('Keystation')
    assert not midi.is_open() and midi.device_name() is None
    midi.open()
    midi.open()
    assert len(devices) == 1 and midi.is_open()
    assert midi.device_name() == DEVICES[1]
    callback = devices[0].callback
    for n in (64, 67, 72):
        callback(mido.Message('note_on', note=n, velocity=90))
    assert midi.held_notes() == {64, 67, 72}
    assert detect_chord(midi.held_notes()).name() == 'C/E'
    midi.close()
    assert devices[0].closed and not midi.is_open()
    assert midi.held_notes() == frozenset()
    midi.close()

    with MidiInput() as midi:
        assert midi.device_name() == DEVICES[0]
    assert devices[1].closed

    with pytest.raises(ValueError):
        MidiInput('Nanokey').open()
