#!/usr/bin/python3

# Driver script for Chordvery
#  Copyright (C) 2025  Satoshi Nishimura

import argparse
import sys
import time
import chordvery
from chordvery.constants import TICK_INTERVAL
from chordvery.note import Note, to_pitch_class
from chordvery.chord import parse_chord_name
from chordvery.detect import iter_matches, detect_chord
from chordvery.progression import suggest_progressions
from chordvery.session import Session


def error_exit(problem, option=None):
    """ Reports `problem` (a message or an exception) on stderr and exits
    with status 1. """
    if isinstance(problem, Exception):
        problem = '%s: %s' % (type(problem).__name__, problem)
    if option is not None:
        problem = 'Bad argument to the %r option:\n%s' % (option, problem)
    print(problem, file=sys.stderr)
    sys.exit(1)


def parse_notes(text):
    notes = []
    for s in text.replace(',', ' ').split():
        try:
            n = int(s)
        except ValueError:
            notes.append(Note(s))
        else:
            notes.append(Note(n))
    return notes


def chord_label(chord, key):
    if key is None:
        return chord.name()
    return '%s (%s)' % (chord.name(), chord.roman_numeral(key))


def detect_mode(args, key):
    try:
        notes = parse_notes(args.detect)
    except Exception as e:
        error_exit(e, '-d/--detect')
    if args.verbose:
        for score, chord in iter_matches(notes):
            print('%3d  %s' % (score, chord_label(chord, key)))
    chord = detect_chord(notes)
    if chord is None:
        print('-')
        sys.exit(1)
    print(chord_label(chord, key))


def suggest_mode(args, key):
    try:
        chord = parse_chord_name(args.suggest)
    except Exception as e:
        error_exit(e, '-s/--suggest')
    tree = suggest_progressions(chord, key, args.extended)
    print(tree.tostr(key, args.roman))


def monitor_mode(args, key):
    from chordvery.midiio import MidiInput
    midi = MidiInput(args.device)
    try:
        midi.open()
    except Exception as e:
        error_exit(e)
    session = Session(midi)
    if args.extended:
        session.toggle_extended()
    if key is not None:
        session.set_key(key)
    print("Listening on %s (Ctrl-C to quit)" % midi.device_name())
    try:
        while True:
            if session.tick():
                print()
                print(session.suggestions().tostr(session.key, args.roman))
            time.sleep(TICK_INTERVAL)
    except KeyboardInterrupt:
        pass
    finally:
        midi.close()
    print("History:", ' '.join(session.history.names()))


def main():
    parser = argparse.ArgumentParser(
        description=f"""Driver script for Chordvery: a chord recognizer \
with progression suggestions
Version {chordvery.__version__}

When invoked with no mode option, it monitors the MIDI input device and
prints each newly recognized chord with its suggested progressions.""",
        usage='%(prog)s [options]',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""examples:
  chordvery -l
  chordvery -d 64,67,72
  chordvery -v -k C -d 'A3 C4 E4 G4'
  chordvery -r -x -s Am
  chordvery --device=Keystation""",
    )
    group1 = parser.add_mutually_exclusive_group()
    group1.add_argument('-l', '--list-devices', action='store_true',
                        help="show list of MIDI input devices and exit")
    group1.add_argument('-d', '--detect', metavar='NOTES',
                        help="detect a chord from note numbers or note names"
                        " separated by commas or spaces")
    group1.add_argument('-s', '--suggest', metavar='CHORD',
                        help="show suggested progressions from a chord name")
    parser.add_argument('--version', action='version',
                        version='chordvery ' + chordvery.__version__)

    group2 = parser.add_argument_group("options")
    group2.add_argument('-k', '--key', metavar='NOTE',
                        help="key for roman numerals and suggestions"
                        " (e.g. 'C', 'F#', 'A3')")
    group2.add_argument('-x', '--extended', action='store_true',
                        help="suggest seventh chords (extended mode)")
    group2.add_argument('-r', '--roman', action='store_true',
                        help="show roman numerals in suggestion trees")
    group2.add_argument('-v', '--verbose', action='store_true',
                        help="list every matching chord with its score (-d)")
    group2.add_argument('--device',
                        help="select MIDI input device (-l/monitor)")

    args = parser.parse_args()

    key = None
    if args.key is not None:
        try:
            key = Note.from_pitch_class(to_pitch_class(args.key))
        except Exception as e:
            error_exit(e, '-k/--key')

    if args.list_devices:
        from chordvery.midiio import show_devices, set_input_device
        try:
            if args.device is not None:
                set_input_device(args.device)
            show_devices()
        except Exception as e:
            error_exit(e)
        sys.exit(0)
    elif args.detect is not None:
        detect_mode(args, key)
    elif args.suggest is not None:
        suggest_mode(args, key)
    else:
        monitor_mode(args, key)


if __name__ == '__main__':
    main()
