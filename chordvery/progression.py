# coding:utf-8
"""
This module defines classes and functions for suggesting chord
progressions that may follow a given chord.
"""
"""
このモジュールには、与えられたコードに続く可能性のあるコード進行を
提案するためのクラスと関数が定義されています。
"""
# Copyright (C) 2025  Satoshi Nishimura

from typing import Iterator, List, Tuple
from chordvery.note import Note, to_pitch_class
from chordvery.quality import Quality
from chordvery.chord import Chord

__all__ = ['ProgressionNode', 'ProgressionTree', 'suggest_progressions']


# scale degree -> ((interval, quality) of the expected resolution,
#                  (interval, quality) of the alternate resolution)
_SUGGESTION_DICT = {
    0: ((5, Quality.MAJOR), (9, Quality.MINOR)),    # I -> IV, vi
    2: ((7, Quality.MAJOR), (5, Quality.MAJOR)),    # ii -> V, IV
    4: ((9, Quality.MINOR), (5, Quality.MAJOR)),    # iii -> vi, IV
    5: ((7, Quality.MAJOR), (0, Quality.MAJOR)),    # IV -> V, I
    7: ((0, Quality.MAJOR), (9, Quality.MINOR)),    # V -> I, vi
    9: ((2, Quality.MINOR), (5, Quality.MAJOR)),    # vi -> ii, IV
    11: ((0, Quality.MAJOR), (4, Quality.MINOR)),   # vii -> I, iii
}
_DEFAULT_SUGGESTION = ((7, Quality.MAJOR), (0, Quality.MAJOR))

_EXTENDED_QUALITY_DICT = {
    Quality.MAJOR: Quality.MAJOR7,
    Quality.MINOR: Quality.MINOR7,
}


class ProgressionNode(object):
    """
    Class of objects representing a node of a progression tree. Each node
    holds a chord and either two children (the expected and the alternate
    next chord) or none.

    Attributes:
        chord(Chord): the chord of this node
        left(ProgressionNode or None): subtree for the expected next chord
        right(ProgressionNode or None): subtree for the alternate next chord

    Args:
        chord(Chord): the chord of this node
        left(ProgressionNode, optional): left child
        right(ProgressionNode, optional): right child

    .. rubric:: Arithmetic Rules

    * Equivalence comparison ('==') between ProgressionNode objects
      compares the chords and the children recursively.
    * Iterating over a node yields the nodes of its subtree in pre-order
      (the node itself, then the left subtree, then the right subtree).
    """
    """
    進行ツリーのノードを表すオブジェクトのクラスです。各ノードは
    コードを1つ保持し、2つの子 (期待される次のコードと、意外性のある
    次のコード) を持つか、子を持たないかのいずれかです。

    Attributes:
        chord(Chord): このノードのコード
        left(ProgressionNode or None): 期待される次のコードの部分木
        right(ProgressionNode or None): 意外性のある次のコードの部分木

    Args:
        chord(Chord): このノードのコード
        left(ProgressionNode, optional): 左の子
        right(ProgressionNode, optional): 右の子

    .. rubric:: 演算規則

    * ProgressionNodeオブジェクトどうしの等価比較('==')は、コードと
      子を再帰的に比較します。
    * ノードに対する反復は、その部分木のノードを先行順 (ノード自身、
      左部分木、右部分木の順) で生成します。
    """

    def __init__(self, chord, left=None, right=None):
        if not isinstance(chord, Chord):
            raise TypeError('%r is not a Chord' % (chord,))
        if (left is None) != (right is None):
            raise ValueError('A node must have either two children or none')
        self.chord = chord
        self.left = left
        self.right = right

    def __repr__(self):
        if self.is_leaf():
            return "%s(%r)" % (self.__class__.__name__, self.chord)
        return "%s(%r, %r, %r)" % (self.__class__.__name__, self.chord,
                                   self.left, self.right)

    def __str__(self):
        return self.tostr()

    def __eq__(self, other):
        if not isinstance(other, ProgressionNode):
            return NotImplemented
        return self.chord == other.chord and self.left == other.left and \
            self.right == other.right

    __hash__ = None

    def __iter__(self) -> Iterator['ProgressionNode']:
        yield self
        for child in self.children():
            yield from child

    def is_leaf(self) -> bool:
        return self.left is None

    def children(self) -> Tuple['ProgressionNode', ...]:
        """ Returns a tuple of the children (empty for a leaf). """
        """ 子のタプルを返します (葉では空)。 """
        return () if self.is_leaf() else (self.left, self.right)

    def depth(self) -> int:
        """ Returns the depth of the subtree (0 for a leaf). """
        """ 部分木の深さ (葉では 0) を返します。 """
        return max((c.depth() + 1 for c in self.children()), default=0)

    def leaves(self) -> List['ProgressionNode']:
        """ Returns the list of leaf nodes from left to right. """
        """ 葉ノードを左から順に並べたリストを返します。 """
        return [node for node in self if node.is_leaf()]

    def chords(self) -> List[Chord]:
        """ Returns the chords of the subtree in pre-order. """
        """ 部分木のコードを先行順に並べたリストを返します。 """
        return [node.chord for node in self]

    def tostr(self, key=None, roman=False) -> str:
        """
        Returns a text rendering of the subtree, one chord per line,
        using box-drawing characters.

        Args:
            key(Note, int, or str, optional): key for roman numerals.
                If omitted, the root of this node's chord is used.
            roman(bool, optional): If true, the roman numeral of each chord
                is shown in parentheses after its name.

        Examples:
            >>> print(suggest_progressions(Chord.from_name('C')).tostr())
            C
            ├── F
            │   ├── G
            │   └── C
            └── Am
                ├── Dm
                └── F
        """
        """
        部分木をテキストとして表現した文字列を返します。1行に1つの
        コードが置かれ、罫線文字が使われます。

        Args:
            key(Note, int, or str, optional): ローマ数字のための調。
                省略された場合は、このノードのコードの根音が使われます。
            roman(bool, optional): 真ならば、各コードの名前の後に括弧で
                囲んだローマ数字を表示します。
        """
        if key is None:
            key = self.chord.root
        lines = []
        self._tostr(lines, '', '', key, roman)
        return '\n'.join(lines)

    def _tostr(self, lines, head, indent, key, roman):
        label = self.chord.name()
        if roman:
            label += ' (%s)' % self.chord.roman_numeral(key)
        lines.append(head + label)
        children = self.children()
        for i, child in enumerate(children):
            last = i == len(children) - 1
            child._tostr(lines, indent + ('└── ' if last else '├── '),
                         indent + ('    ' if last else '│   '), key, roman)


class ProgressionTree(object):
    """
    Suggestion engine of chord progressions. For a chord and a key, it
    builds a tree of 7 nodes: the chord itself, two candidate next chords
    (an expected resolution and an alternate one) chosen by the scale
    degree of the chord's root, and two candidates for each of those.

    ======  =================  =================
    degree  expected           alternate
    ======  =================  =================
    I       IV                 vi
    ii      V                  IV
    iii     vi                 IV
    IV      V                  I
    V       I                  vi
    vi      ii                 IV
    vii     I                  iii
    other   V                  I
    ======  =================  =================

    In extended mode, suggested major chords become major seventh chords
    and suggested minor chords become minor seventh chords.

    Attributes:
        extended(bool): true if extended mode is active

    Args:
        extended(bool, optional): initial value of `extended`
    """
    """
    コード進行の提案エンジンです。コードと調が与えられると、7つの
    ノードからなるツリーを構築します: コード自身、根音の音度によって
    選ばれる2つの次のコード候補 (期待される解決と、意外性のある解決)、
    およびそれぞれに対する2つの候補です。

    (表は英語版を参照)

    拡張モードでは、提案されるメジャーコードはメジャーセブンスに、
    マイナーコードはマイナーセブンスになります。

    Attributes:
        extended(bool): 拡張モードならば真

    Args:
        extended(bool, optional): `extended` の初期値
    """

    def __init__(self, extended=False):
        self.extended = bool(extended)

    def __repr__(self):
        return "%s(extended=%r)" % (self.__class__.__name__, self.extended)

    def set_extended(self, extended) -> None:
        self.extended = bool(extended)

    def suggest(self, current, key=None) -> ProgressionNode:
        """
        Builds the suggestion tree for `current`. The result is rebuilt on
        every call, and identical arguments give equal trees.

        Args:
            current(Chord): the chord from which progressions start
            key(Note, int, or str, optional): tonic of the key. If omitted,
                the root of `current` is used.

        Examples:
            >>> tree = ProgressionTree().suggest(Chord.from_name('C'), C4)
            >>> tree.left.chord.name(), tree.right.chord.name()
            ('F', 'Am')
            >>> tree = ProgressionTree(extended=True).suggest(
            ...     Chord.from_name('C'))
            >>> tree.left.chord.name()
            'Fmaj7'
        """
        """
        `current` に対する提案ツリーを構築します。結果は呼び出しの度に
        構築され、同一の引数に対しては等価なツリーが得られます。

        Args:
            current(Chord): 進行の起点となるコード
            key(Note, int, or str, optional): 調の主音。省略された場合は
                `current` の根音が使われます。
        """
        key_pc = to_pitch_class(current.root if key is None else key)
        children = [ProgressionNode(chord, *self._leaves_for(chord, key_pc))
                    for chord in self._next_chords(current, key_pc)]
        return ProgressionNode(current, *children)

    def _next_chords(self, chord, key_pc) -> List[Chord]:
        degree = (chord.root.pitch_class() - key_pc) % 12
        result = []
        for interval, quality in _SUGGESTION_DICT.get(degree,
                                                      _DEFAULT_SUGGESTION):
            if self.extended:
                quality = _EXTENDED_QUALITY_DICT.get(quality, quality)
            result.append(Chord(Note.from_pitch_class(key_pc + interval),
                                quality))
        return result

    def _leaves_for(self, chord, key_pc) -> List[ProgressionNode]:
        return [ProgressionNode(c) for c in self._next_chords(chord, key_pc)]


def suggest_progressions(current, key=None,
                         extended=False) -> ProgressionNode:
    """
    Equivalent to ``ProgressionTree(extended).suggest(current, key)``.
    """
    """
    ``ProgressionTree(extended).suggest(current, key)`` と等価です。
    """
    return ProgressionTree(extended).suggest(current, key)
