# coding:utf-8
"""
This module defines functions for selecting MIDI input devices and classes
for tracking the notes held on them in real time. MIDI input is handled by
the mido library; opening a device requires one of its backends (by
default python-rtmidi).

.. rubric:: Devices

Available input devices can be listed with :func:`show_devices`. Each
device is assigned an integer device number, which is its index in
:func:`input_devices`.

There is a currently selected input device, which is used when no device
is given to :class:`MidiInput`. It is device 0 unless the environment
variable CHORDVERY_INPUT_DEVICE is set to a string recognized by
:func:`find_input_device`.

.. rubric:: Held Notes

Messages from an open device are delivered on a thread of the backend.
:class:`HeldNotes` keeps the set of currently held note numbers under a
lock, and consumers take an immutable snapshot of it with
:meth:`HeldNotes.snapshot`; the lock is never held while a chord is
detected.
"""
"""
このモジュールには、MIDI入力デバイスを選択するための関数、および
デバイス上で押されている音をリアルタイムに追跡するためのクラスが
定義されています。MIDI入力は mido ライブラリによって処理されます。
デバイスをオープンするには、そのバックエンドのいずれか (デフォルトでは
python-rtmidi) が必要です。

.. rubric:: デバイス

利用可能な入力デバイスは :func:`show_devices` で一覧できます。
各デバイスには整数のデバイス番号が割り当てられており、これは
:func:`input_devices` におけるインデックスです。

現在選択されている入力デバイスがあり、:class:`MidiInput` にデバイスが
与えられなかったときに使われます。これはデバイス0ですが、環境変数
CHORDVERY_INPUT_DEVICE に :func:`find_input_device` で認識できる文字列を
設定することで変えることができます。

.. rubric:: 押されている音

オープンされたデバイスからのメッセージは、バックエンドのスレッド上で
配送されます。:class:`HeldNotes` は現在押されているノート番号の集合を
ロックの下で保持し、利用者は :meth:`HeldNotes.snapshot` によって
その不変なスナップショットを得ます。コード検出の間、ロックが保持される
ことはありません。
"""
# Copyright (C) 2025  Satoshi Nishimura

import os
import threading
import warnings
from typing import List, FrozenSet, Optional
import mido
from chordvery.utils import ChordveryWarning, check_note_number

__all__ = ['input_devices', 'find_input_device', 'current_input_device',
           'set_input_device', 'show_devices', 'HeldNotes', 'MidiInput']


_input_devnum = None  # None: not resolved yet
_opened_devices = set()


def input_devices() -> List[str]:
    """ Get a list of the device names of all the input devices. """
    """ すべての入力デバイスの名前のリストを取得します。 """
    return mido.get_input_names()


def _match_device(desc, devices) -> Optional[int]:
    # one alternative: a number, or a substring of a port name
    if isinstance(desc, str):
        desc = desc.strip()
        if not desc:
            return None
        if desc.isdigit():
            desc = int(desc)
        else:
            return next((i for i, name in enumerate(devices)
                         if desc in name), None)
    if isinstance(desc, int) and 0 <= desc < len(devices):
        return desc
    return None


def _find_device(dev, devices) -> int:
    if isinstance(dev, str):
        alternatives = dev.split(';')
    elif isinstance(dev, (list, tuple)):
        alternatives = dev
    else:
        alternatives = [dev]
    for desc in alternatives:
        devnum = _match_device(desc, devices)
        if devnum is not None:
            return devnum
    raise ValueError("No such device: %r" % (dev,))


def find_input_device(dev) -> int:
    """
    Resolves a device description to the index of a MIDI input port in
    the list returned by :func:`input_devices`.

    Args:
        dev(int, str, list, tuple): an index; a string of decimal digits,
            read as an index; or any other string, which selects the first
            port whose name contains it. Alternatives may be joined with
            ';' in a string or given as the items of a list or tuple; the
            first one naming an existing port wins.

    Returns:
        index of the input port

    Raises:
        ValueError: none of the alternatives names an existing port.

    Examples:
        - ``find_input_device(1)``
        - ``find_input_device('Keystation; Midi Through')``
    """
    """
    デバイスの記述を、:func:`input_devices` が返すリストにおける
    MIDI 入力ポートの添字に解決します。

    Args:
        dev(int, str, list, tuple): 添字、添字として読まれる10進数字の
            文字列、またはそれ以外の文字列 (名前にその文字列を含む最初の
            ポートを選びます)。文字列中で ';' で区切るか、リストや
            タプルの要素として複数の候補を与えることができ、存在する
            ポートを指す最初の候補が採用されます。

    Returns:
        入力ポートの添字

    Raises:
        ValueError: どの候補も存在するポートを指していない。
    """
    return _find_device(dev, input_devices())


def current_input_device() -> int:
    """ Returns the device number of the currently selected input device.
    On the first call, the selection is initialized from the environment
    variable CHORDVERY_INPUT_DEVICE; if it is not set or names no existing
    device, device 0 is selected (with a warning in the latter case).

    Raises:
        ValueError: no input device is available.
    """
    """ 現在選択されている入力デバイスの番号を返します。
    最初の呼び出しの際に、選択は環境変数 CHORDVERY_INPUT_DEVICE から
    初期化されます。それが設定されていないか、存在するデバイスを
    指していない場合はデバイス0が選択されます (後者の場合は警告が
    出ます)。

    Raises:
        ValueError: 利用可能な入力デバイスがない。
    """
    global _input_devnum
    if _input_devnum is None:
        if not input_devices():
            raise ValueError("No MIDI input devices available")
        _input_devnum = 0
        if 'CHORDVERY_INPUT_DEVICE' in os.environ:
            try:
                _input_devnum = find_input_device(
                    os.environ['CHORDVERY_INPUT_DEVICE'])
            except ValueError as e:
                warnings.warn('CHORDVERY_INPUT_DEVICE ignored: %s' % e,
                              ChordveryWarning)
    return _input_devnum


def set_input_device(dev) -> None:
    """ Specifies `dev` as currently selected input device.

    Args:
        dev: Device description recognized by :func:`find_input_device`.
    """
    """ `dev` を "現在選択されている入力デバイス" として指定します。

    Args:
        dev: :func:`find_input_device` によって認識可能なデバイス記述。
    """
    global _input_devnum
    _input_devnum = find_input_device(dev)


def show_devices() -> None:
    """ Show the list of all the available input devices. The currently
    selected device is marked with '>', and opened devices with '*'. """
    """ 利用可能な入力デバイスの一覧を表示します。現在選択されている
    デバイスには '>' が、オープンされているデバイスには '*' が付きます。
    """
    print("MIDI Input Devices:")
    idev = input_devices()
    current = current_input_device() if idev else None
    for i, devname in enumerate(idev):
        print(" %c %c[%d] %s" % ('>' if i == current else ' ',
                                 '*' if devname in _opened_devices else ' ',
                                 i, devname))
    if not idev:
        print("  Not available")


class HeldNotes(object):
    """
    A thread-safe set of the note numbers of currently held notes.
    It is updated by note-on/note-off events, typically from the callback
    thread of a MIDI input port, and read through :meth:`snapshot`.

    ``len()`` returns the number of held notes.
    """
    """
    現在押されている音のノート番号の、スレッドセーフな集合です。
    通常は MIDI 入力ポートのコールバックスレッドから、ノートオン/
    ノートオフによって更新され、:meth:`snapshot` を通じて読み出されます。

    ``len()`` は押されている音の数を返します。
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._notes = set()

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, sorted(self.snapshot()))

    def __len__(self):
        with self._lock:
            return len(self._notes)

    def note_on(self, note) -> None:
        note = check_note_number(note)
        with self._lock:
            self._notes.add(note)

    def note_off(self, note) -> None:
        note = check_note_number(note)
        with self._lock:
            self._notes.discard(note)

    def clear(self) -> None:
        with self._lock:
            self._notes.clear()

    def snapshot(self) -> FrozenSet[int]:
        """ Returns an immutable copy of the set of held note numbers. """
        """ 押されているノート番号の集合の不変なコピーを返します。 """
        with self._lock:
            return frozenset(self._notes)

    def process_message(self, msg) -> None:
        """
        Updates the set by a mido message. A note-on message with non-zero
        velocity adds the note; a note-off message, or a note-on message
        with zero velocity, removes it. An all-notes-off control change
        (controller 123) clears the set. Other messages are ignored.

        Args:
            msg(mido.Message): received message
        """
        """
        mido のメッセージによって集合を更新します。ベロシティが0でない
        ノートオンメッセージは音を追加し、ノートオフメッセージ、または
        ベロシティ0のノートオンメッセージは音を取り除きます。オールノート
        オフのコントロールチェンジ (コントローラ番号123) は集合を空に
        します。その他のメッセージは無視されます。

        Args:
            msg(mido.Message): 受信したメッセージ
        """
        if msg.type == 'note_on' and msg.velocity > 0:
            self.note_on(msg.note)
        elif msg.type == 'note_off' or msg.type == 'note_on':
            self.note_off(msg.note)
        elif msg.type == 'control_change' and msg.control == 123:
            self.clear()


class MidiInput(object):
    """
    Class of objects representing a MIDI input device whose held notes are
    tracked. The device is opened with mido and its messages are fed to a
    :class:`HeldNotes` object on the callback thread of the backend.
    It can be used as a context manager, which opens the device on entry
    and closes it on exit.

    Attributes:
        dev: device description given to the constructor

    Args:
        dev(optional): device description recognized by
            :func:`find_input_device`. If None, the currently selected
            input device is used.

    Examples:
        >>> with MidiInput() as midi:
        ...     notes = midi.held_notes()
    """
    """
    押されている音を追跡する MIDI 入力デバイスを表すオブジェクトの
    クラスです。デバイスは mido によってオープンされ、そのメッセージは
    バックエンドのコールバックスレッド上で :class:`HeldNotes` オブジェクトに
    渡されます。コンテキストマネージャとして使うことができ、その場合は
    入るときにデバイスがオープンされ、出るときにクローズされます。

    Attributes:
        dev: コンストラクタに与えられたデバイス記述

    Args:
        dev(optional): :func:`find_input_device` で認識可能なデバイス記述。
            None ならば、現在選択されている入力デバイスが使われます。
    """

    def __init__(self, dev=None):
        self.dev = dev
        self._port = None
        self._notes = HeldNotes()

    def __repr__(self):
        return "<%s dev=%r %s>" % (self.__class__.__name__, self.dev,
                                   'open' if self.is_open() else 'closed')

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def device_name(self) -> Optional[str]:
        """ Returns the name of the opened device, or None if it is not
        open. """
        """ オープンされているデバイスの名前を返します。オープンされて
        いなければ None を返します。 """
        return None if self._port is None else self._port.name

    def open(self) -> None:
        """ Opens the device. Nothing happens if it is already open.

        Raises:
            ValueError: the device is not found.
            OSError: the backend failed to open the device.
        """
        """ デバイスをオープンします。既にオープンされていれば何もしません。

        Raises:
            ValueError: デバイスが見つからない。
            OSError: バックエンドがデバイスのオープンに失敗した。
        """
        if self._port is not None:
            return
        dev = current_input_device() if self.dev is None else self.dev
        devices = input_devices()
        # the selected number may be stale if ports have gone away
        name = devices[_find_device(dev, devices)]
        self._port = mido.open_input(name,
                                     callback=self._notes.process_message)
        _opened_devices.add(name)

    def close(self) -> None:
        """ Closes the device and forgets the held notes. """
        """ デバイスをクローズし、押されている音を忘れます。 """
        if self._port is not None:
            _opened_devices.discard(self._port.name)
            self._port.close()
            self._port = None
        self._notes.clear()

    def is_open(self) -> bool:
        return self._port is not None

    def held_notes(self) -> FrozenSet[int]:
        """ Returns a snapshot of the currently held note numbers. """
        """ 現在押されているノート番号のスナップショットを返します。 """
        return self._notes.snapshot()

    def process_message(self, msg) -> None:
        """ Feeds a message to the held-note set as if it came from the
        device. """
        """ デバイスから来たかのようにメッセージを押鍵音の集合に
        与えます。 """
        self._notes.process_message(msg)
