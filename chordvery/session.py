# coding:utf-8
"""
This module defines the Session class, which drives chord recognition on a
stream of held-note snapshots, and the ChordHistory class used by it.
"""
"""
このモジュールには、押鍵音のスナップショットの列に対してコード認識を
駆動する Session クラスと、それが用いる ChordHistory クラスが定義されて
います。
"""
# Copyright (C) 2025  Satoshi Nishimura

import enum
from typing import List, Optional
from chordvery.constants import MAX_HISTORY, HISTORY_FADE_AGE
from chordvery.note import Note, to_pitch_class
from chordvery.chord import Chord
from chordvery.detect import detect_chord
from chordvery.progression import ProgressionTree, ProgressionNode

__all__ = ['Mode', 'HistoryEntry', 'ChordHistory', 'Session']


_MAX_AGE = 255


class Mode(enum.Enum):
    """
    Operation mode of a session. In JAM mode, old history entries fade
    out; in DISCOVERY mode, they are kept until pushed out.
    """
    """
    セッションの動作モードです。JAM モードでは古い履歴エントリが
    消えていき、DISCOVERY モードでは押し出されるまで保持されます。
    """
    DISCOVERY = 'Discovery'
    JAM = 'Jam'

    def __repr__(self):
        return "%s.%s" % (self.__class__.__name__, self.name)


class HistoryEntry(object):
    """
    An entry of a chord history.

    Attributes:
        chord(Chord): the recorded chord
        age(int): number of chords pushed after this one (at most 255)
    """
    """
    コード履歴のエントリです。

    Attributes:
        chord(Chord): 記録されたコード
        age(int): このエントリより後に追加されたコードの数 (最大255)
    """

    def __init__(self, chord, age=0):
        self.chord = chord
        self.age = age

    def __repr__(self):
        return "%s(%r, age=%d)" % (self.__class__.__name__, self.chord,
                                   self.age)

    def __eq__(self, other):
        if not isinstance(other, HistoryEntry):
            return NotImplemented
        return self.chord == other.chord and self.age == other.age


class ChordHistory(object):
    """
    Bounded list of recently recognized chords, oldest first.

    Args:
        max_entries(int, optional): maximum number of entries kept

    Examples:
        >>> h = ChordHistory()
        >>> for name in ('C', 'C', 'F', 'G'):
        ...     h.push(Chord.from_name(name))
        >>> h.names()
        ['C', 'F', 'G']
        >>> [e.age for e in h.entries()]
        [2, 1, 0]
    """
    """
    最近認識されたコードの、上限のあるリストです (古いものが先頭)。

    Args:
        max_entries(int, optional): 保持されるエントリの最大数
    """

    def __init__(self, max_entries=MAX_HISTORY):
        if max_entries < 1:
            raise ValueError('max_entries must be positive')
        self.max_entries = max_entries
        self.fade = False
        self._entries = []

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, self.names())

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def push(self, chord) -> None:
        """
        Appends `chord` with age 0. Nothing happens if its name is equal to
        the name of the last entry. Otherwise the age of every existing
        entry is incremented, and the oldest entry is removed if the number
        of entries exceeds `max_entries`.

        Args:
            chord(Chord): chord to be recorded
        """
        """
        `chord` を年齢0で追加します。その名前が最後のエントリの名前と
        等しい場合は何もしません。そうでなければ既存の各エントリの年齢が
        1つ増やされ、エントリ数が `max_entries` を超えた場合は最も古い
        エントリが削除されます。

        Args:
            chord(Chord): 記録されるコード
        """
        if self._entries and self._entries[-1].chord.name() == chord.name():
            return
        for entry in self._entries:
            entry.age = min(entry.age + 1, _MAX_AGE)
        self._entries.append(HistoryEntry(chord))
        if len(self._entries) > self.max_entries:
            del self._entries[0]

    def set_fade(self, fade) -> None:
        self.fade = bool(fade)

    def tick(self) -> None:
        """ Removes entries whose age is 8 or more if fading is enabled. """
        """ フェードが有効ならば、年齢が8以上のエントリを削除します。 """
        if self.fade:
            self._entries = [e for e in self._entries
                             if e.age < HISTORY_FADE_AGE]

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def names(self) -> List[str]:
        return [e.chord.name() for e in self._entries]

    def last(self) -> Optional[Chord]:
        return self._entries[-1].chord if self._entries else None


class Session(object):
    """
    Recognition session. Each call of :meth:`update` (or :meth:`tick`)
    takes a snapshot of held notes; when the snapshot differs from the
    previous one, a chord is detected from it. A newly detected chord
    whose name differs from the current chord is recorded in the history,
    and the key is latched to its root if no key has been set yet.
    When nothing is detected, the current chord is kept.

    Attributes:
        mode(Mode): current mode
        extended(bool): true if progressions are suggested in extended mode
        current_chord(Chord or None): most recently detected chord
        history(ChordHistory): chord history
        key(Note or None): latched key
        midi(MidiInput or None): source of held notes used by :meth:`tick`

    Args:
        midi(MidiInput, optional): source of held notes
    """
    """
    認識セッションです。:meth:`update` (または :meth:`tick`) の各呼び出しは
    押鍵音のスナップショットを受け取り、それが前回と異なる場合には
    そこからコードを検出します。新たに検出されたコードの名前が現在の
    コードと異なる場合は、履歴に記録され、調がまだ設定されていなければ
    その根音に固定されます。何も検出されなかった場合は、現在のコードが
    維持されます。

    Attributes:
        mode(Mode): 現在のモード
        extended(bool): 拡張モードで進行を提案するならば真
        current_chord(Chord or None): 最後に検出されたコード
        history(ChordHistory): コード履歴
        key(Note or None): 固定された調
        midi(MidiInput or None): :meth:`tick` で使われる押鍵音の供給元

    Args:
        midi(MidiInput, optional): 押鍵音の供給元
    """

    def __init__(self, midi=None):
        self.midi = midi
        self.mode = Mode.DISCOVERY
        self.extended = False
        self.current_chord = None
        self.history = ChordHistory()
        self.key = None
        self._tree = ProgressionTree()
        self._last_notes = frozenset()

    def __repr__(self):
        return "<%s mode=%r chord=%r key=%r>" % (
            self.__class__.__name__, self.mode, self.current_chord, self.key)

    def toggle_mode(self) -> Mode:
        """ Switches between DISCOVERY and JAM, and returns the new mode.
        History fading is enabled in JAM mode. """
        """ DISCOVERY と JAM を切り替え、新しいモードを返します。
        JAM モードでは履歴のフェードが有効になります。 """
        self.mode = Mode.JAM if self.mode is Mode.DISCOVERY \
            else Mode.DISCOVERY
        self.history.set_fade(self.mode is Mode.JAM)
        return self.mode

    def toggle_extended(self) -> bool:
        self.extended = not self.extended
        self._tree.set_extended(self.extended)
        return self.extended

    def set_key(self, key) -> None:
        """ Overrides the latched key (None to unlatch). `key` is anything
        accepted by :func:`.to_pitch_class`. """
        """ 固定された調を変更します (None で解除)。 """
        self.key = None if key is None \
            else Note.from_pitch_class(to_pitch_class(key))

    def clear(self) -> None:
        """ Clears the history and the latched key. """
        """ 履歴と固定された調を消去します。 """
        self.history.clear()
        self.key = None

    def update(self, notes) -> bool:
        """
        Processes a snapshot of held notes.

        Args:
            notes(iterable of int): note numbers of the held notes

        Returns:
            True if the current chord changed its name.
        """
        """
        押鍵音のスナップショットを処理します。

        Args:
            notes(iterable of int): 押されている音のノート番号

        Returns:
            現在のコードの名前が変わったならば真。
        """
        notes = frozenset(notes)
        changed = False
        if notes != self._last_notes:
            self._last_notes = notes
            chord = detect_chord(notes)
            if chord is not None:
                if self.current_chord is None or \
                   self.current_chord.name() != chord.name():
                    self.history.push(chord)
                    if self.key is None:
                        self.key = chord.root
                    changed = True
                self.current_chord = chord
        self.history.tick()
        return changed

    def tick(self) -> bool:
        """ Calls :meth:`update` with the notes held on `midi` (an empty
        set if there is no MIDI input). """
        """ `midi` 上で押されている音 (MIDI入力がなければ空集合) を
        引数として :meth:`update` を呼び出します。 """
        notes = self.midi.held_notes() if self.midi is not None \
            else frozenset()
        return self.update(notes)

    def suggestions(self) -> Optional[ProgressionNode]:
        """ Returns the progression tree for the current chord and the
        latched key, or None if no chord has been detected. """
        """ 現在のコードと固定された調に対する進行ツリーを返します。
        コードがまだ検出されていなければ None を返します。 """
        if self.current_chord is None:
            return None
        return self._tree.suggest(self.current_chord, self.key)
