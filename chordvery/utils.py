# coding:utf-8
import numbers
from chordvery.constants import MIDI_NOTE_MIN, MIDI_NOTE_MAX

# Copyright (C) 2025  Satoshi Nishimura

__all__ = ['ChordveryWarning', 'check_note_number']


class ChordveryWarning(UserWarning):
    pass


def check_note_number(note_number) -> int:
    """
    Checks that `note_number` is an integral MIDI note number in the range
    from 0 to 127, and returns it as an int.

    Args:
        note_number(int): value to be checked

    Raises:
        TypeError: `note_number` is not an integer.
        ValueError: `note_number` is out of range.
    """
    """
    `note_number` が 0〜127 の範囲にある整数の MIDI ノート番号であることを
    確認し、int として返します。

    Args:
        note_number(int): 検査される値

    Raises:
        TypeError: `note_number` が整数でない。
        ValueError: `note_number` が範囲外である。
    """
    # bool は int のサブクラスだが、ノート番号としては認めない
    if not isinstance(note_number, numbers.Integral) or \
       isinstance(note_number, bool):
        raise TypeError('%r is not a valid note number' % (note_number,))
    if not MIDI_NOTE_MIN <= note_number <= MIDI_NOTE_MAX:
        raise ValueError('Note number %r is out of range [%d, %d]' %
                         (note_number, MIDI_NOTE_MIN, MIDI_NOTE_MAX))
    return int(note_number)
