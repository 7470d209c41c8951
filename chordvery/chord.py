# coding:utf-8
"""
This module defines the Chord class, which represents a chord symbol,
and functions for parsing chord names.
"""
"""
このモジュールには、コードシンボルを表す Chord クラスと、コード名の
パースのための関数が定義されています。
"""
# Copyright (C) 2025  Satoshi Nishimura

import re
import warnings
from typing import List, Optional
from chordvery.constants import NOTE_NAMES, ROMAN_NUMERALS, MIDI_NOTE_MAX
from chordvery.note import Note, pitch_class, to_pitch_class
from chordvery.quality import Quality
from chordvery.utils import ChordveryWarning

__all__ = ['Chord', 'ChordNameError', 'parse_chord_name']


class ChordNameError(ValueError):
    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


_NOTE_LETTER_RE = re.compile(
    '|'.join(sorted(NOTE_NAMES, key=len, reverse=True)))
# 長いトークンから順に試す ('m7b5' が 'm' より先にマッチするように)
_QUALITY_RE = re.compile(
    '|'.join(re.escape(t) for t in Quality.symbol_aliases()))

_LOWERCASE_QUALITIES = (Quality.MINOR, Quality.MINOR7, Quality.MINOR_MAJOR7,
                        Quality.HALF_DIMINISHED7, Quality.DIMINISHED,
                        Quality.DIMINISHED7)

# MINOR7 と DOMINANT7 は同じ '7' になる (小文字かどうかで区別される)
_ROMAN_SUFFIX_DICT = {
    Quality.MAJOR: '',
    Quality.MINOR: '',
    Quality.DIMINISHED: '°',
    Quality.AUGMENTED: '+',
    Quality.MAJOR7: 'maj7',
    Quality.MINOR7: '7',
    Quality.DOMINANT7: '7',
    Quality.DIMINISHED7: '°7',
    Quality.HALF_DIMINISHED7: 'ø7',
}


class Chord(object):
    """
    Class of objects representing a chord: a root note, a quality, and an
    optional bass note. The bass marks an inversion; it is the lowest
    sounding note of the input from which the chord was detected.

    Attributes:
        root(Note): root of the chord
        quality(Quality): quality of the chord
        bass(Note or None): bass note, or None if the chord is not
            inverted

    Args:
        root(Note, int, or str): root note (a Note, a MIDI note number,
            or a note name with octave such as 'C4')
        quality(Quality, optional): quality of the chord
        bass(Note, int, str, or None, optional): bass note

    Examples:
        >>> Chord(C4, Quality.MINOR7).name()
        'Cm7'
        >>> Chord(C4, Quality.MAJOR, bass=E3).name()
        'C/E'
        >>> Chord.from_name('F#m7')
        Chord(Fs4, Quality.MINOR7)

    .. rubric:: Chord Names

    A chord name has the form ``<root><quality>[/<bass>]``.
    <root> and <bass> are one of 'C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G',
    'G#', 'A', 'A#', and 'B' (no flats, no octave numbers).
    <quality> is one of the tokens accepted by
    :meth:`.Quality.from_symbol`; :meth:`name` always uses the canonical
    :meth:`.Quality.symbol`.

    .. rubric:: Arithmetic Rules

    * Equivalence comparison ('==') between Chord objects ignores octaves:
      two chords are equal if their roots have the same pitch class,
      their qualities are the same, and the bass notes that appear in their
      names have the same pitch class. A bass with the same pitch class as
      the root is not shown in the name, and thus does not affect equality.
    * If ``chord`` is a Chord object, ``note in chord`` is equivalent to
      ``chord.is_chord_tone(note)``.
    """
    """
    コードを表すオブジェクトのクラスです。根音、種別、および省略可能な
    バス音からなります。バス音は転回形の印であり、コードの検出元となった
    入力のうち最も低く鳴っている音です。

    Attributes:
        root(Note): コードの根音
        quality(Quality): コードの種別
        bass(Note or None): バス音。転回形でなければ None

    Args:
        root(Note, int, or str): 根音 (Note、MIDIノート番号、または
            'C4' のようなオクターブ付きの音名)
        quality(Quality, optional): コードの種別
        bass(Note, int, str, or None, optional): バス音

    .. rubric:: コード名の記述

    コード名は ``<root><quality>[/<bass>]`` の形式を持ちます。
    <root> と <bass> は 'C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G',
    'G#', 'A', 'A#', 'B' のいずれかです (フラットやオクターブ番号は
    使えません)。<quality> は :meth:`.Quality.from_symbol` で認識される
    トークンのいずれかです。:meth:`name` は常に標準の
    :meth:`.Quality.symbol` を使います。

    .. rubric:: 演算規則

    * Chordオブジェクトどうしの等価比較('==')はオクターブを無視します。
      根音のピッチクラス、種別、およびコード名に現れるバス音の
      ピッチクラスが等しいときに真となります。根音と同じピッチクラスの
      バス音はコード名に現れないため、比較に影響しません。
    * chord を Chordオブジェクトとするとき、note ``in`` chord は
      chord.is_chord_tone(note) と等価です。
    """

    def __init__(self, root, quality=Quality.MAJOR, bass=None):
        if not isinstance(quality, Quality):
            raise TypeError('%r is not a chord quality' % (quality,))
        self.root = Note(root)
        self.quality = quality
        self.bass = None if bass is None else Note(bass)

    def __repr__(self):
        if self.bass is None:
            return "%s(%r, %r)" % (self.__class__.__name__, self.root,
                                   self.quality)
        return "%s(%r, %r, bass=%r)" % (self.__class__.__name__, self.root,
                                        self.quality, self.bass)

    def __str__(self):
        return self.name()

    def _identity(self):
        return (self.root.pitch_class(), self.quality, self._shown_bass())

    def __eq__(self, other):
        if not isinstance(other, Chord):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self):
        return hash(self._identity())

    def __contains__(self, note):
        return self.is_chord_tone(note)

    def copy(self) -> 'Chord':
        """ Returns a duplicated Chord object. """
        """ 複製された Chord オブジェクトを返します。 """
        return self.__class__(self.root, self.quality, self.bass)
    __copy__ = copy

    def with_bass(self, bass) -> 'Chord':
        """ Returns a new Chord object with the bass note replaced by
        `bass`. """
        """ バス音を `bass` に置き換えた新しい Chord オブジェクトを
        返します。 """
        return self.__class__(self.root, self.quality, bass)

    def _shown_bass(self) -> Optional[int]:
        if self.bass is None or \
           self.bass.pitch_class() == self.root.pitch_class():
            return None
        return self.bass.pitch_class()

    def name(self) -> str:
        """
        Returns the chord name, such as 'C', 'Am', 'G7', 'C/E', or 'F#m7'.
        The bass is appended after '/' only if its pitch class differs from
        that of the root. Passing the result to :meth:`from_name` yields an
        equal Chord object.
        """
        """
        'C', 'Am', 'G7', 'C/E', 'F#m7' のようなコード名を返します。
        バス音は、そのピッチクラスが根音と異なる場合にだけ '/' に続けて
        付加されます。結果を :meth:`from_name` に渡すと、等価な Chord
        オブジェクトが得られます。
        """
        result = self.root.name() + self.quality.symbol()
        if self._shown_bass() is not None:
            result += '/' + self.bass.name()
        return result

    def roman_numeral(self, key) -> str:
        """
        Returns the roman numeral of the chord relative to `key`, such as
        'I', 'vi', 'V7', or 'vii°'.
        The numeral is chosen by the number of semitones from the tonic
        of `key` to the root ('I', 'bII', 'II', 'bIII', 'III', 'IV', 'bV',
        'V', 'bVI', 'VI', 'bVII', 'VII'), written in lowercase for minor,
        minor-seventh, minor-major-seventh, half-diminished, diminished and
        diminished-seventh chords, and followed by a quality suffix
        ('°', '+', 'maj7', '7', '°7', 'ø7', or the quality symbol).
        Note that minor-seventh and dominant-seventh chords share the
        suffix '7'; they are told apart only by the case of the numeral.

        Args:
            key(Note, int, or str): tonic of the key (see
                :func:`.to_pitch_class`)

        Examples:
            >>> Chord.from_name('Am').roman_numeral(C4)
            'vi'
            >>> Chord.from_name('G7').roman_numeral('C')
            'V7'
        """
        """
        `key` を基準としたコードのローマ数字 ('I', 'vi', 'V7', 'vii°' など)
        を返します。
        数字は `key` の主音から根音までの半音数によって選ばれ
        ('I', 'bII', 'II', 'bIII', 'III', 'IV', 'bV', 'V', 'bVI', 'VI',
        'bVII', 'VII')、マイナー、マイナーセブンス、マイナーメジャー
        セブンス、ハーフディミニッシュ、ディミニッシュ、ディミニッシュ
        セブンスでは小文字になり、種別による接尾辞 ('°', '+', 'maj7', '7',
        '°7', 'ø7'、または種別のシンボル) が続きます。
        マイナーセブンスとドミナントセブンスはどちらも接尾辞が '7' となり、
        数字の大文字/小文字によってのみ区別されることに注意してください。

        Args:
            key(Note, int, or str): 調の主音 (:func:`.to_pitch_class` を参照)
        """
        degree = (self.root.pitch_class() - to_pitch_class(key)) % 12
        numeral = ROMAN_NUMERALS[degree]
        if self.quality in _LOWERCASE_QUALITIES:
            numeral = numeral.lower()
        return numeral + _ROMAN_SUFFIX_DICT.get(self.quality,
                                                self.quality.symbol())

    def pitch_classes(self) -> List[int]:
        """
        Returns the sorted list of pitch classes of the chord tones,
        including the bass.

        Examples:
            >>> Chord.from_name('G7').pitch_classes()
            [2, 5, 7, 11]
        """
        """
        バス音を含むコード構成音のピッチクラスをソートしたリストを
        返します。
        """
        pcs = {pitch_class(self.root + iv) for iv in self.quality.intervals()}
        if self.bass is not None:
            pcs.add(self.bass.pitch_class())
        return sorted(pcs)

    def pitches(self) -> List[Note]:
        """
        Returns the list of chord tones as Note objects, built upward from
        the root. If a bass is shown in the name, it becomes the lowest
        note; other tones of the same pitch class are removed and tones
        below the bass are raised by octaves. Tones that would exceed
        note number 127 are lowered by octaves instead, even when this puts
        them below a bass at the top of the range.

        Examples:
            >>> Chord.from_name('Cmaj7').pitches()
            [C4, E4, G4, B4]
            >>> Chord(C4, Quality.MAJOR, bass=E3).pitches()
            [E3, C4, G4]
        """
        """
        根音から上方向に構成したコード構成音を Note オブジェクトの
        リストとして返します。コード名にバス音が現れる場合はそれが
        最低音になり、同じピッチクラスの他の音は取り除かれ、バス音より
        低い音はオクターブ単位で上げられます。ノート番号127を超える音は
        代わりにオクターブ単位で下げられ、このときは範囲の上端にある
        バス音より低くなることもあります。
        """
        result = []
        shown_bass = self._shown_bass()
        for iv in self.quality.intervals():
            n = self.root + iv
            if shown_bass is not None:
                if pitch_class(n) == shown_bass:
                    continue
                while n < self.bass:
                    n += 12
            while n > MIDI_NOTE_MAX:
                n -= 12
            result.append(Note(n))
        if shown_bass is not None:
            result.append(self.bass)
        result.sort()
        return result

    def is_chord_tone(self, note) -> bool:
        """
        Returns true if a chord tone (or the bass) has the same pitch class
        as `note`.

        Args:
            note(Note or int): MIDI note number
        """
        """
        コード構成音 (またはバス音) に `note` と同じピッチクラスの音が
        含まれていれば真を返します。

        Args:
            note(Note or int): MIDIノート番号
        """
        return pitch_class(note) in self.pitch_classes()

    @staticmethod
    def detect(notes) -> Optional['Chord']:
        """
        Equivalent to :func:`.detect_chord`.
        """
        """
        :func:`.detect_chord` と等価です。
        """
        from chordvery.detect import detect_chord
        return detect_chord(notes)

    @staticmethod
    def from_name(name) -> Optional['Chord']:
        """
        Converts a chord name to a Chord object. Returns None if the root,
        the quality, or the bass is not recognized. The root and the bass
        are placed in the octave starting from middle C.

        Args:
            name(str): chord name (see the class description)

        Examples:
            >>> Chord.from_name('C/E')
            Chord(C4, Quality.MAJOR, bass=E4)
            >>> Chord.from_name('Cb') is None
            True
        """
        """
        コード名を Chord オブジェクトに変換します。根音、種別、または
        バス音が認識できない場合は None を返します。根音とバス音は
        中央ハから始まるオクターブに置かれます。

        Args:
            name(str): コード名 (クラスの説明を参照)
        """
        try:
            return parse_chord_name(name)
        except ChordNameError:
            return None


def parse_chord_name(name) -> Chord:
    """
    Converts a chord name to a Chord object like :meth:`Chord.from_name`,
    but raises :class:`ChordNameError` when the name is not recognized.
    The exception message shows where the parsing stopped.

    Args:
        name(str): chord name
    """
    """
    :meth:`Chord.from_name` と同様にコード名を Chord オブジェクトに
    変換しますが、認識できない場合は :class:`ChordNameError` を
    送出します。例外のメッセージには、パースが止まった位置が示されます。

    Args:
        name(str): コード名
    """
    name = name.strip()

    def _error(pos):
        return ChordNameError("Unrecognized chord name: %s >>> %s <<<" %
                              (name[:pos], name[pos:]), pos)

    # <root>
    m = _NOTE_LETTER_RE.match(name)
    if not m:
        raise _error(0)
    root = Note.from_pitch_class(NOTE_NAMES.index(m.group(0)))
    pos = m.end()

    # <quality>
    quality = Quality.MAJOR
    m = _QUALITY_RE.match(name, pos)
    if m:
        quality = Quality.from_symbol(m.group(0))
        pos = m.end()

    # /<bass>
    bass = None
    if name.startswith('/', pos):
        m = _NOTE_LETTER_RE.match(name, pos + 1)
        if not m or m.end() != len(name):
            raise _error(pos + 1)
        bass = Note.from_pitch_class(NOTE_NAMES.index(m.group(0)))
        pos = m.end()
        if bass.pitch_class() == root.pitch_class():
            warnings.warn('%r: slash bass has no effect' % (name,),
                          ChordveryWarning)

    # error check
    if pos < len(name):
        raise _error(pos)
    return Chord(root, quality, bass)
