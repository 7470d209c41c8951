# coding:utf-8
"""
This module defines functions for recognizing a chord from a set of
sounding notes.
"""
"""
このモジュールには、鳴っている音の集合からコードを認識するための関数が
定義されています。
"""
# Copyright (C) 2025  Satoshi Nishimura

from typing import Iterator, Tuple, Optional
from chordvery.constants import ROOT_POSITION_SCORE, INVERSION_SCORE, \
     SEVENTH_BONUS
from chordvery.note import Note, pitch_class
from chordvery.quality import Quality
from chordvery.chord import Chord
from chordvery.utils import check_note_number

__all__ = ['iter_matches', 'detect_chord']


def iter_matches(notes) -> Iterator[Tuple[int, Chord]]:
    """
    A generator that yields every chord whose quality exactly matches the
    pitch-class set of `notes`, together with its score, as a tuple
    (score, chord).

    Candidate roots are the pitch classes present in `notes`, tried in
    ascending order; for each root, the seventh-chord catalog is scanned
    before the triad catalog (see :meth:`.Quality.all_sevenths` and
    :meth:`.Quality.all_triads`). A match scores 10 if its root is the
    pitch class of the lowest note and 5 otherwise, plus 2 for a seventh
    chord. Chords whose root differs from the lowest note in pitch class
    have the lowest note as their bass.

    Nothing is yielded if `notes` has fewer than 3 distinct pitch classes.

    Args:
        notes(iterable of int): MIDI note numbers of the sounding notes.
            Duplicates are allowed.

    Raises:
        ValueError: a note number is outside the range 0 to 127.
        TypeError: a note number is not an integer.

    Examples:
        >>> list(iter_matches([64, 67, 72]))
        [(5, Chord(C4, Quality.MAJOR, bass=E4))]
        >>> list(iter_matches([60, 64, 67, 69]))
        [(7, Chord(A4, Quality.MINOR7, bass=C4))]
    """
    """
    `notes` のピッチクラス集合と種別が完全に一致するすべてのコードを、
    そのスコアと共にタプル (score, chord) として生成するジェネレータです。

    根音の候補は `notes` に含まれるピッチクラスで、昇順に試されます。
    各根音について、七の和音のカタログが三和音のカタログより先に走査
    されます (:meth:`.Quality.all_sevenths` と :meth:`.Quality.all_triads`
    を参照)。一致したものは、根音が最低音のピッチクラスであれば 10、
    そうでなければ 5 のスコアを持ち、七の和音であれば 2 が加算されます。
    根音が最低音とピッチクラスにおいて異なるコードは、最低音をバス音と
    して持ちます。

    `notes` の異なるピッチクラスが3つ未満の場合は何も生成されません。

    Args:
        notes(iterable of int): 鳴っている音の MIDI ノート番号。
            重複があっても構いません。

    Raises:
        ValueError: ノート番号が 0〜127 の範囲外である。
        TypeError: ノート番号が整数でない。
    """
    note_set = {check_note_number(n) for n in notes}
    pcs = {pitch_class(n) for n in note_set}
    if len(note_set) < 3 or len(pcs) < 3:
        return
    lowest_note = min(note_set)
    lowest_pc = pitch_class(lowest_note)
    catalog = Quality.all_sevenths() + Quality.all_triads()

    for r in sorted(pcs):
        intervals = frozenset((pc - r) % 12 for pc in pcs)
        for quality in catalog:
            if intervals != quality.interval_set():
                continue
            score = ROOT_POSITION_SCORE if r == lowest_pc \
                else INVERSION_SCORE
            if quality.is_seventh():
                score += SEVENTH_BONUS
            bass = Note(lowest_note) if r != lowest_pc else None
            yield (score, Chord(Note.from_pitch_class(r), quality, bass))


def detect_chord(notes) -> Optional[Chord]:
    """
    Recognizes the chord formed by `notes`, and returns it as a Chord
    object. Among the matches produced by :func:`iter_matches`, the one
    with the highest score is chosen; for equal scores the one found
    first wins. The root of the result is placed in the octave starting
    from middle C, while the bass (present only for inversions) keeps the
    actual lowest note.

    Returns None if `notes` has fewer than 3 distinct pitch classes or if
    no quality matches.

    Args:
        notes(iterable of int): MIDI note numbers of the sounding notes.

    Examples:
        >>> detect_chord({60, 64, 67})
        Chord(C4, Quality.MAJOR)
        >>> detect_chord({64, 67, 72}).name()
        'C/E'
        >>> detect_chord({60, 67}) is None
        True
    """
    """
    `notes` によって形成されるコードを認識し、Chord オブジェクトとして
    返します。:func:`iter_matches` が生成する一致のうち最もスコアの高い
    ものが選ばれ、同じスコアの場合は先に見つかったものが優先されます。
    結果の根音は中央ハから始まるオクターブに置かれ、バス音 (転回形の
    場合にだけ存在) は実際の最低音のままとなります。

    `notes` の異なるピッチクラスが3つ未満、あるいは一致する種別がない
    場合は None を返します。

    Args:
        notes(iterable of int): 鳴っている音の MIDI ノート番号。
    """
    best_score = -1
    best_chord = None
    for score, chord in iter_matches(notes):
        if score > best_score:
            best_score = score
            best_chord = chord
    return best_chord
