# coding:utf-8
# Copyright (C) 2025  Satoshi Nishimura

NOTE_NAMES = ('C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B')
"""
Spellings of the twelve pitch classes, indexed by pitch class.
Sharps are always used; flats are never produced.
"""
"""
ピッチクラスをインデックスとした12個の音名の綴りです。
常にシャープが使われ、フラットが生成されることはありません。
"""

REFERENCE_NOTE = 60
"""
Note number of middle C. Chords produced by detection, parsing, and
progression suggestion place their roots in the octave starting here.
"""
"""
中央ハのノート番号です。検出、パース、進行の提案によって生成される
コードの根音は、ここから始まるオクターブに置かれます。
"""

ROMAN_NUMERALS = ('I', 'bII', 'II', 'bIII', 'III', 'IV',
                  'bV', 'V', 'bVI', 'VI', 'bVII', 'VII')
"""
Roman numerals for the twelve scale degrees, indexed by the number of
semitones above the tonic.
"""
"""
主音からの半音数をインデックスとした、12個の音度に対するローマ数字です。
"""

MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127

ROOT_POSITION_SCORE = 10
INVERSION_SCORE = 5
SEVENTH_BONUS = 2
"""
Scores used by the chord detector to rank exact matches.
"""
"""
コード検出において、完全一致した候補を順位付けるためのスコアです。
"""

MAX_HISTORY = 16
HISTORY_FADE_AGE = 8
TICK_INTERVAL = 0.05  # seconds
