# coding:utf-8
"""
This module defines the Quality class, which represents the quality of a
chord, together with its static catalog of intervals and symbols.
"""
"""
このモジュールには、コードの種別を表す Quality クラスと、その音程および
シンボルの静的な一覧表が定義されています。
"""
# Copyright (C) 2025  Satoshi Nishimura

import enum
from typing import Tuple, FrozenSet, List, Optional

__all__ = ['Quality']


class Quality(enum.Enum):
    """
    An enumeration of chord qualities. The set of qualities is closed;
    each member has a fixed list of intervals (in semitones from the root,
    the first element being always 0) and a display symbol.

    ====================  ==================  ==============  ==========
    member                intervals           symbol          catalog
    ====================  ==================  ==============  ==========
    MAJOR                 0, 4, 7             ''              triads
    MINOR                 0, 3, 7             'm'             triads
    DIMINISHED            0, 3, 6             'dim'           triads
    AUGMENTED             0, 4, 8             '+'             triads
    MAJOR7                0, 4, 7, 11         'maj7'          sevenths
    MINOR7                0, 3, 7, 10         'm7'            sevenths
    DOMINANT7             0, 4, 7, 10         '7'             sevenths
    DIMINISHED7           0, 3, 6, 9          'dim7'          sevenths
    HALF_DIMINISHED7      0, 3, 6, 10         'm7b5'          sevenths
    MINOR_MAJOR7          0, 3, 7, 11         'mMaj7'         sevenths
    AUGMENTED7            0, 4, 8, 10         '+7'            sevenths
    SUS2                  0, 2, 7             'sus2'          triads
    SUS4                  0, 5, 7             'sus4'          triads
    ADD9                  0, 4, 7, 14         'add9'          (none)
    UNKNOWN               (empty)             '?'             (none)
    ====================  ==================  ==============  ==========

    The ninth of ADD9 is kept as the compound interval 14. Since ADD9 is in
    neither catalog, it is never produced by chord detection; it can only
    be obtained by parsing a chord name or by direct construction.
    """
    """
    コード種別の列挙型です。種別の集合は固定されており、各メンバーは
    音程のリスト (根音からの半音数で、先頭要素は常に 0) と表示用の
    シンボルを持ちます。

    (表は英語版を参照)

    ADD9 の9度音は複合音程 14 のまま保持されます。ADD9 はどちらの
    カタログにも属さないため、コード検出によって生成されることはなく、
    コード名のパースか直接の生成によってのみ得られます。
    """
    MAJOR = 'major'
    MINOR = 'minor'
    DIMINISHED = 'diminished'
    AUGMENTED = 'augmented'
    MAJOR7 = 'major-seventh'
    MINOR7 = 'minor-seventh'
    DOMINANT7 = 'dominant'
    DIMINISHED7 = 'diminished-seventh'
    HALF_DIMINISHED7 = 'half-diminished'
    MINOR_MAJOR7 = 'major-minor'
    AUGMENTED7 = 'augmented-seventh'
    SUS2 = 'suspended-second'
    SUS4 = 'suspended-fourth'
    ADD9 = 'added-ninth'
    UNKNOWN = 'unknown'

    def __repr__(self):
        return "%s.%s" % (self.__class__.__name__, self.name)

    def intervals(self) -> Tuple[int, ...]:
        """ Returns the canonical intervals of the quality. """
        """ 種別の標準的な音程のタプルを返します。 """
        return _QUALITY_DICT[self][0]

    def interval_set(self) -> FrozenSet[int]:
        """ Returns the set of intervals reduced modulo 12. This is what
        the chord detector compares against.

        Examples:
            >>> sorted(Quality.ADD9.interval_set())
            [0, 2, 4, 7]
        """
        """ 12を法として還元した音程の集合を返します。コード検出では
        これとの比較が行われます。
        """
        return frozenset(i % 12 for i in self.intervals())

    def symbol(self) -> str:
        """ Returns the symbol used in chord names ('m7', 'dim', etc.). """
        """ コード名に使われるシンボル ('m7', 'dim' など) を返します。 """
        return _QUALITY_DICT[self][1]

    def is_triad(self) -> bool:
        return self in _TRIADS

    def is_seventh(self) -> bool:
        return self in _SEVENTHS

    @staticmethod
    def all_triads() -> Tuple['Quality', ...]:
        """ Returns the triad catalog in the order used by the detector. """
        """ 検出で使われる順序で三和音のカタログを返します。 """
        return _TRIADS

    @staticmethod
    def all_sevenths() -> Tuple['Quality', ...]:
        """ Returns the seventh-chord catalog in the order used by the
        detector. """
        """ 検出で使われる順序で七の和音のカタログを返します。 """
        return _SEVENTHS

    @staticmethod
    def from_symbol(token) -> Optional['Quality']:
        """
        Looks up a quality by its symbol or one of its common shorthand
        spellings. Returns None if `token` is not recognized.
        The lookup is case-sensitive ('M7' is major seventh, 'm7' is minor
        seventh).

        Args:
            token(str): quality part of a chord name

        Examples:
            >>> Quality.from_symbol('m7b5')
            Quality.HALF_DIMINISHED7
            >>> Quality.from_symbol('ø')
            Quality.HALF_DIMINISHED7
            >>> Quality.from_symbol('')
            Quality.MAJOR
        """
        """
        シンボル、またはよく使われる略記によって種別を検索します。
        `token` が認識できない場合は None を返します。
        大文字/小文字は区別されます ('M7' はメジャーセブンス、'm7' は
        マイナーセブンス)。

        Args:
            token(str): コード名の種別部分
        """
        return _SYMBOL_ALIASES.get(token)

    @staticmethod
    def symbol_aliases() -> List[str]:
        """ Returns all recognized quality tokens except the empty one,
        longest first. """
        """ 空文字列を除く、認識可能なすべての種別トークンを長い順に
        返します。 """
        return sorted((t for t in _SYMBOL_ALIASES if t),
                      key=lambda t: (-len(t), t))


_QUALITY_DICT = {
    Quality.MAJOR: ((0, 4, 7), ''),
    Quality.MINOR: ((0, 3, 7), 'm'),
    Quality.DIMINISHED: ((0, 3, 6), 'dim'),
    Quality.AUGMENTED: ((0, 4, 8), '+'),
    Quality.MAJOR7: ((0, 4, 7, 11), 'maj7'),
    Quality.MINOR7: ((0, 3, 7, 10), 'm7'),
    Quality.DOMINANT7: ((0, 4, 7, 10), '7'),
    Quality.DIMINISHED7: ((0, 3, 6, 9), 'dim7'),
    Quality.HALF_DIMINISHED7: ((0, 3, 6, 10), 'm7b5'),
    Quality.MINOR_MAJOR7: ((0, 3, 7, 11), 'mMaj7'),
    Quality.AUGMENTED7: ((0, 4, 8, 10), '+7'),
    Quality.SUS2: ((0, 2, 7), 'sus2'),
    Quality.SUS4: ((0, 5, 7), 'sus4'),
    Quality.ADD9: ((0, 4, 7, 14), 'add9'),
    Quality.UNKNOWN: ((), '?'),
}

_TRIADS = (Quality.MAJOR, Quality.MINOR, Quality.DIMINISHED,
           Quality.AUGMENTED, Quality.SUS2, Quality.SUS4)

_SEVENTHS = (Quality.MAJOR7, Quality.MINOR7, Quality.DOMINANT7,
             Quality.DIMINISHED7, Quality.HALF_DIMINISHED7,
             Quality.MINOR_MAJOR7, Quality.AUGMENTED7)

_SYMBOL_ALIASES = {
    '': Quality.MAJOR,
    'm': Quality.MINOR,
    'dim': Quality.DIMINISHED,
    '°': Quality.DIMINISHED,
    '+': Quality.AUGMENTED,
    'aug': Quality.AUGMENTED,
    'maj7': Quality.MAJOR7,
    'M7': Quality.MAJOR7,
    'm7': Quality.MINOR7,
    'min7': Quality.MINOR7,
    '7': Quality.DOMINANT7,
    'dom7': Quality.DOMINANT7,
    'dim7': Quality.DIMINISHED7,
    '°7': Quality.DIMINISHED7,
    'm7b5': Quality.HALF_DIMINISHED7,
    'ø7': Quality.HALF_DIMINISHED7,
    'ø': Quality.HALF_DIMINISHED7,
    'mMaj7': Quality.MINOR_MAJOR7,
    'mM7': Quality.MINOR_MAJOR7,
    '+7': Quality.AUGMENTED7,
    'aug7': Quality.AUGMENTED7,
    'sus2': Quality.SUS2,
    'sus4': Quality.SUS4,
    'sus': Quality.SUS4,
    'add9': Quality.ADD9,
}
