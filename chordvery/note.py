# coding:utf-8
"""
This module defines the Note class and utility functions for MIDI note
numbers.
"""
"""
このモジュールには、Noteクラス、及び MIDI ノート番号についての
ユーティリティ関数が定義されています。
"""
# Copyright (C) 2025  Satoshi Nishimura

import re
import numbers
from typing import Optional
from chordvery.constants import NOTE_NAMES, REFERENCE_NOTE, \
     MIDI_NOTE_MIN, MIDI_NOTE_MAX
from chordvery.utils import check_note_number

__all__ = ['pitch_class', 'octave', 'to_pitch_class', 'Note']


def pitch_class(note_number) -> int:
    """
    Returns the pitch class (an integer from 0 to 11, C being 0, C# being 1,
    ..., B being 11) of a MIDI note number.

    Args:
        note_number(int): MIDI note number
    """
    """
    MIDIノート番号からピッチクラス (Cを0, C#を1, ..., Bを11とした
    0〜11の整数) を計算して返します。

    Args:
        note_number(int): MIDIノート番号
    """
    return note_number % 12


def octave(note_number) -> int:
    """
    Returns the octave number of a MIDI note number (the octave starting
    from middle C is 4).

    Args:
        note_number(int): MIDI note number
    """
    """
    MIDIノート番号からオクターブ番号（中央ハから始まるオクターブを4とした
    整数）を計算して返します。

    Args:
        note_number(int): MIDIノート番号
    """
    return note_number // 12 - 1


def to_pitch_class(value) -> int:
    """
    Converts a key specification to a pitch class.

    Args:
        value(Note, int, or str): a MIDI note number (any integer is
            accepted and reduced modulo 12), a note name with octave such
            as 'A3', or a bare note name such as 'A' or 'F#'.

    Raises:
        ValueError: `value` is a string that is not a note name.
        TypeError: `value` is neither an integer nor a string.
    """
    """
    調の指定をピッチクラスに変換します。

    Args:
        value(Note, int, or str): MIDIノート番号 (任意の整数が受け付けられ、
            12を法として還元されます)、'A3' のようなオクターブ付きの音名、
            または 'A' や 'F#' のようなオクターブなしの音名。

    Raises:
        ValueError: `value` が音名でない文字列である。
        TypeError: `value` が整数でも文字列でもない。
    """
    if isinstance(value, str):
        s = value.strip()
        if s in NOTE_NAMES:
            return NOTE_NAMES.index(s)
        note = Note.from_name(s)
        if note is None:
            raise ValueError('%r: Invalid note name' % (value,))
        return note.pitch_class()
    elif isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return pitch_class(int(value))
    else:
        raise TypeError('%r is not a valid key' % (value,))


_NOTE_LETTER_PATTERN = '|'.join(sorted(NOTE_NAMES, key=len, reverse=True))
_NOTE_NAME_RE = re.compile('(%s)([-+]?[0-9]+)' % _NOTE_LETTER_PATTERN)


class Note(int):
    """
    Class of objects representing a sounding note. It inherits the int
    class and behaves like an integer representing a MIDI note number.
    Notes are immutable values; only the pitch class takes part in chord
    identity, and the octave is meaningful only for display.

    Args:
        value(int, str, or Note): A MIDI note number from 0 to 127, or
            a note name with an octave number such as 'C4' or 'F#3'
            (see :meth:`from_name`).

    Examples:
        >>> Note(61)
        Cs4
        >>> Note('A0')
        A0
        >>> Note(61).name(), Note(61).display()
        ('C#', 'C#4')
        >>> Note(69).pitch_class()
        9

    .. rubric:: Note Constants

    Constants whose values are Note objects are predefined for 'C0'
    through 'G9', including the sharps (for example, Cs4 and Fs3).
    Note numbers below 12 (octave -1) have no constant name.

    .. rubric:: Arithmetic Rules

    * Comparison between Note objects is done by note number.
    * Arithmetic operations are done as int; use :meth:`transpose` to
      obtain a Note object.
    """
    """
    鳴っている音を表すオブジェクトのクラスです。intクラスを継承していて、
    MIDIノート番号を表す整数と同じように振る舞います。Noteは不変の値で、
    コードの同一性に関わるのはピッチクラスのみであり、オクターブは
    表示にのみ意味を持ちます。

    Args:
        value(int, str, or Note): 0〜127 の MIDI ノート番号、または
            'C4' や 'F#3' のようなオクターブ番号付きの音名
            (:meth:`from_name` を参照)。

    .. rubric:: ノート定数

    Noteオブジェクトを値とする定数として、'C0' から 'G9' まで
    (シャープ付きのもの、例えば Cs4 や Fs3 を含む) が予め定義されています。
    12未満のノート番号 (オクターブ -1) には定数名がありません。

    .. rubric:: 演算規則

    * Noteオブジェクトどうしの比較はノート番号で行われます。
    * 算術演算は int 型としての演算となります。Noteオブジェクトを
      得るには :meth:`transpose` を使ってください。
    """

    def __new__(cls, value):
        if isinstance(value, str):
            note = Note.from_name(value)
            if note is None:
                raise ValueError('%r: Invalid note name' % (value,))
            return note
        return int.__new__(cls, check_note_number(value))

    def __repr__(self):
        if octave(self) < 0:
            return "Note(%d)" % self
        return self.display().replace('#', 's')

    def __str__(self):
        return self.display()

    def pitch_class(self) -> int:
        """ Returns the pitch class (0 to 11). """
        """ ピッチクラス (0〜11) を返します。 """
        return pitch_class(self)

    def octave(self) -> int:
        """ Returns the octave number (middle C starts octave 4). """
        """ オクターブ番号 (中央ハがオクターブ4の始まり) を返します。 """
        return octave(self)

    def name(self) -> str:
        """ Returns the note name without octave, always spelled with
        sharps ('C', 'C#', ..., 'B'). """
        """ オクターブを含まない音名を返します。常にシャープを使って
        綴られます ('C', 'C#', ..., 'B')。 """
        return NOTE_NAMES[pitch_class(self)]

    def display(self) -> str:
        """ Returns the note name followed by the octave number
        ('C4', 'F#3', 'C-1', etc.). """
        """ 音名にオクターブ番号を続けた文字列 ('C4', 'F#3', 'C-1' など)
        を返します。 """
        return '%s%d' % (self.name(), octave(self))

    def transpose(self, semitones) -> 'Note':
        """ Returns the note `semitones` semitones above (below if
        negative) this note. """
        """ `semitones` 半音上 (負なら下) の音を返します。 """
        return Note(int(self) + semitones)

    @staticmethod
    def from_pitch_class(pc) -> 'Note':
        """
        Returns the note of pitch class `pc` in the octave starting from
        middle C. This is the octave used for roots and basses of chords
        made by detection, parsing and progression suggestion.

        Args:
            pc(int): pitch class; values outside 0 to 11 are reduced
                modulo 12.
        """
        """
        中央ハから始まるオクターブにある、ピッチクラス `pc` の音を
        返します。これは、検出・パース・進行の提案によって作られる
        コードの根音とバス音に使われるオクターブです。

        Args:
            pc(int): ピッチクラス。0〜11 以外の値は12を法として
                還元されます。
        """
        return Note(REFERENCE_NOTE + pc % 12)

    @staticmethod
    def from_name(name) -> Optional['Note']:
        """
        Converts a note name with an octave number to a Note object.
        The note letter is one character, or two if the second character
        is '#'; it must be one of the sharp spellings (flats are not
        recognized). The rest must be a signed integer octave number.
        Surrounding white spaces are ignored.

        Returns None if the name is empty, the letter is unrecognized,
        the octave part is not an integer, or the resulting note number
        is outside the range 0 to 127.

        Args:
            name(str): note name such as 'C4', 'F#3', or 'C-1'

        Examples:
            >>> Note.from_name('C#4')
            Cs4
            >>> Note.from_name('Db4') is None
            True
        """
        """
        オクターブ番号付きの音名を Note オブジェクトに変換します。
        音名部分は1文字、または2文字目が '#' のときは2文字で、
        シャープによる綴りのいずれかでなければなりません (フラットは
        認識されません)。残りの部分は符号付き整数のオクターブ番号で
        なければなりません。前後の空白は無視されます。

        名前が空、音名が認識できない、オクターブ部分が整数でない、
        または結果のノート番号が 0〜127 の範囲外である場合は None を
        返します。

        Args:
            name(str): 'C4', 'F#3', 'C-1' などの音名
        """
        m = _NOTE_NAME_RE.fullmatch(name.strip())
        if not m:
            return None
        midi = (int(m.group(2)) + 1) * 12 + NOTE_NAMES.index(m.group(1))
        if not MIDI_NOTE_MIN <= midi <= MIDI_NOTE_MAX:
            return None
        return Note(midi)


# define note names like 'C4' and 'Fs5' as constants
for _oct in range(0, 10):
    for _pc, _name in enumerate(NOTE_NAMES):
        _n = (_oct + 1) * 12 + _pc
        if _n <= MIDI_NOTE_MAX:
            globals()['%s%d' % (_name.replace('#', 's'), _oct)] = Note(_n)
            __all__.append('%s%d' % (_name.replace('#', 's'), _oct))
