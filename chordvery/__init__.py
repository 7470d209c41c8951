# coding:utf-8
"""
Chordvery: a chord recognizer with progression suggestions.

Chordvery recognizes the chord formed by a set of sounding notes
(:func:`detect_chord`), names it (:meth:`Chord.name`,
:meth:`Chord.roman_numeral`), parses chord names back
(:meth:`Chord.from_name`), and proposes chords that may follow it
(:class:`ProgressionTree`). Real-time MIDI input is available in the
:mod:`chordvery.midiio` module, which is not imported by
``from chordvery import *``.

Examples:
    >>> detect_chord({64, 67, 72}).name()
    'C/E'
    >>> print(suggest_progressions(Chord.from_name('Am'), C4).tostr())
    Am
    ├── Dm
    │   ├── G
    │   └── F
    └── F
        ├── G
        └── C
"""
"""
Chordvery: 進行の提案機能を持つコード認識器

Chordvery は、鳴っている音の集合が形成するコードを認識し
(:func:`detect_chord`)、それに名前を付け (:meth:`Chord.name`,
:meth:`Chord.roman_numeral`)、コード名を逆にパースし
(:meth:`Chord.from_name`)、それに続く可能性のあるコードを提案します
(:class:`ProgressionTree`)。リアルタイムの MIDI 入力は
:mod:`chordvery.midiio` モジュールで利用でき、これは
``from chordvery import *`` ではインポートされません。
"""
# Copyright (C) 2025  Satoshi Nishimura

from chordvery._version import __version__
from chordvery.utils import *
from chordvery.constants import *
from chordvery.quality import *
from chordvery.note import *
from chordvery.chord import *
from chordvery.detect import *
from chordvery.progression import *
from chordvery.session import *
