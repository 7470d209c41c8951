import pytest
from chordvery import *
import random
import warnings

random.seed(0)


def test_note():
    for n in range(0, 128):
        assert eval(repr(Note(n))) == n
        assert Note.from_name(Note(n).display()) == n
        assert Note(n).pitch_class() == n % 12
    assert repr(Note(61)) == 'Cs4' and str(Note(61)) == 'C#4'
    assert repr(Note(5)) == 'Note(5)' and Note(5).display() == 'F-1'
    assert Note(69).name() == 'A' and Note(69).octave() == 4
    assert Note('A0') == A0 == 21
    assert Note(Note(60)) == C4
    assert C4.transpose(7) == G4 and isinstance(C4.transpose(7), Note)
    assert Note.from_pitch_class(13) == Cs4
    assert pitch_class(Fs3) == 6 and octave(Fs3) == 3

    assert Note.from_name('C-1') == 0
    assert Note.from_name('G9') == 127
    assert Note.from_name(' C4 ') == 60
    assert Note.from_name('C+4') == 60
    for bad in ('', 'C', 'H4', 'Db4', 'C#x', 'c4', 'C4.5', 'G#9', 'C-2'):
        assert Note.from_name(bad) is None

    with pytest.raises(ValueError):
        Note(128)
    with pytest.raises(ValueError):
        Note(-1)
    with pytest.raises(ValueError):
        Note('X4')
    with pytest.raises(TypeError):
        Note(1.5)
    with pytest.raises(TypeError):
        Note(True)


def test_to_pitch_class():
    assert to_pitch_class('C') == 0
    assert to_pitch_class('F#') == 6
    assert to_pitch_class(' A3 ') == 9
    assert to_pitch_class(D4) == 2
    assert to_pitch_class(14) == 2
    with pytest.raises(ValueError):
        to_pitch_class('Bb')
    with pytest.raises(TypeError):
        to_pitch_class(1.0)


def test_quality():
    assert Quality.MAJOR.intervals() == (0, 4, 7)
    assert Quality.ADD9.intervals() == (0, 4, 7, 14)
    assert Quality.ADD9.interval_set() == {0, 2, 4, 7}
    assert Quality.HALF_DIMINISHED7.symbol() == 'm7b5'
    assert Quality.MAJOR.symbol() == ''
    assert len(Quality.all_triads()) == 6 and len(Quality.all_sevenths()) == 7
    assert all(q.is_triad() and not q.is_seventh()
               for q in Quality.all_triads())
    assert all(q.is_seventh() and len(q.intervals()) == 4
               for q in Quality.all_sevenths())
    assert not Quality.ADD9.is_triad() and not Quality.ADD9.is_seventh()
    catalog = Quality.all_triads() + Quality.all_sevenths()
    assert all(q.intervals()[0] == 0 for q in catalog)
    # interval sets of the catalog are all distinct
    assert len({q.interval_set() for q in catalog}) == len(catalog)
    assert repr(Quality.MINOR7) == 'Quality.MINOR7'
    aliases = Quality.symbol_aliases()
    assert '' not in aliases
    assert all(len(a) >= len(b) for a, b in zip(aliases, aliases[1:]))


@pytest.mark.parametrize("token, quality", [
    ('', Quality.MAJOR), ('m', Quality.MINOR), ('dim', Quality.DIMINISHED),
    ('°', Quality.DIMINISHED), ('aug', Quality.AUGMENTED),
    ('M7', Quality.MAJOR7), ('m7', Quality.MINOR7),
    ('min7', Quality.MINOR7), ('dom7', Quality.DOMINANT7),
    ('°7', Quality.DIMINISHED7), ('ø', Quality.HALF_DIMINISHED7),
    ('ø7', Quality.HALF_DIMINISHED7), ('mM7', Quality.MINOR_MAJOR7),
    ('aug7', Quality.AUGMENTED7), ('sus', Quality.SUS4),
    ('add9', Quality.ADD9), ('Maj7', None), ('xyz', None),
])
def test_quality_from_symbol(token, quality):
    assert Quality.from_symbol(token) is quality


def test_chord_name():
    assert Chord(C4, Quality.MAJOR).name() == 'C'
    assert Chord(A4, Quality.MINOR).name() == 'Am'
    assert Chord(G4, Quality.DOMINANT7).name() == 'G7'
    assert Chord(Fs4, Quality.MINOR7).name() == 'F#m7'
    assert Chord(C4, Quality.MAJOR, bass=E3).name() == 'C/E'
    assert Chord(C4, Quality.MAJOR, bass=C3).name() == 'C'
    assert Chord('D3', Quality.SUS2).name() == 'Dsus2'
    assert str(Chord(B3, Quality.HALF_DIMINISHED7)) == 'Bm7b5'

    assert Chord(C4, Quality.MAJOR, bass=C3) == Chord(C4, Quality.MAJOR)
    assert Chord(C5, Quality.MAJOR) == Chord(C3, Quality.MAJOR)
    assert Chord(C4, Quality.MAJOR, bass=E3) == \
        Chord(C4, Quality.MAJOR, bass=E5)
    assert Chord(C4, Quality.MAJOR) != Chord(C4, Quality.MINOR)
    assert Chord(C4, Quality.MAJOR) != Chord(C4, Quality.MAJOR, bass=E3)
    assert len({Chord(C4), Chord(C5), Chord(C4, bass=C2)}) == 1
    with pytest.raises(TypeError):
        Chord(C4, 'major')


@pytest.mark.parametrize("name, root, quality, bass", [
    ('C', C4, Quality.MAJOR, None),
    ('Am', A4, Quality.MINOR, None),
    ('F#m7', Fs4, Quality.MINOR7, None),
    ('Cm7b5', C4, Quality.HALF_DIMINISHED7, None),
    ('Bø', B4, Quality.HALF_DIMINISHED7, None),
    ('Bø7', B4, Quality.HALF_DIMINISHED7, None),
    ('C°7', C4, Quality.DIMINISHED7, None),
    ('Cdim7', C4, Quality.DIMINISHED7, None),
    ('Cdim', C4, Quality.DIMINISHED, None),
    ('Caug', C4, Quality.AUGMENTED, None),
    ('C+7', C4, Quality.AUGMENTED7, None),
    ('CmM7', C4, Quality.MINOR_MAJOR7, None),
    ('CmMaj7', C4, Quality.MINOR_MAJOR7, None),
    ('CM7', C4, Quality.MAJOR7, None),
    ('Cmaj7', C4, Quality.MAJOR7, None),
    ('Csus', C4, Quality.SUS4, None),
    ('Csus2', C4, Quality.SUS2, None),
    ('Cadd9', C4, Quality.ADD9, None),
    ('C/E', C4, Quality.MAJOR, E4),
    ('G7/B', G4, Quality.DOMINANT7, B4),
    (' A#m/C# ', As4, Quality.MINOR, Cs4),
])
def test_chord_from_name(name, root, quality, bass):
    chord = Chord.from_name(name)
    assert chord.root == root and chord.root.octave() == 4
    assert chord.quality is quality
    assert chord.bass == bass


@pytest.mark.parametrize("name", [
    '', 'H', 'Cb', 'Db', 'Cxyz', 'C/', 'C/H', 'C/E4', 'C/Eb', 'E#', 'cm',
    'C7b9', 'C4',
])
def test_chord_from_name_failure(name):
    assert Chord.from_name(name) is None
    with pytest.raises(ChordNameError):
        parse_chord_name(name)


def test_parse_chord_name():
    with pytest.raises(ValueError) as excinfo:
        parse_chord_name('Cmxyz')
    assert excinfo.value.position == 2
    assert 'Cm >>> xyz <<<' in str(excinfo.value)
    with pytest.warns(ChordveryWarning):
        chord = parse_chord_name('C/C')
    assert chord.bass == C4 and chord.name() == 'C'
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert Chord.from_name('C/E').name() == 'C/E'


def test_chord_methods():
    c = Chord.from_name('C/E')
    assert repr(c) == 'Chord(C4, Quality.MAJOR, bass=E4)'
    assert eval(repr(c)) == c
    assert c.copy() == c and c.copy() is not c
    assert Chord.from_name('C').with_bass(E3) == c
    assert c.with_bass(None).name() == 'C' and c.name() == 'C/E'

    assert Chord.from_name('G7').pitch_classes() == [2, 5, 7, 11]
    assert Chord.from_name('Cadd9').pitch_classes() == [0, 2, 4, 7]
    assert Chord.from_name('Am/G').pitch_classes() == [0, 4, 7, 9]
    assert Chord.from_name('Cmaj7').pitches() == [C4, E4, G4, B4]
    assert Chord.from_name('Cadd9').pitches() == [C4, E4, G4, D5]
    assert Chord(C4, Quality.MAJOR, bass=E3).pitches() == [E3, C4, G4]
    assert c.pitches() == [E4, G4, C5]
    assert Chord(Note(120), Quality.ADD9).pitches() == [C9, D9, E9, G9]
    assert Chord(C9, Quality.MAJOR, bass=G9).pitches() == [C9, E9, G9]
    assert E5 in Chord.from_name('C') and D4 not in Chord.from_name('C')
    assert Chord.from_name('Am/G').is_chord_tone(G2)


@pytest.mark.parametrize("name, key, numeral", [
    ('C', C4, 'I'), ('Am', C4, 'vi'), ('G7', C4, 'V7'), ('Dm7', C4, 'ii7'),
    ('Bm7b5', C4, 'viiø7'), ('Bdim', C4, 'vii°'), ('Bdim7', C4, 'vii°7'),
    ('Cmaj7', C4, 'Imaj7'), ('Caug', C4, 'I+'), ('C#dim', C4, 'bii°'),
    ('A#sus4', C4, 'bVIIsus4'), ('CmM7', C4, 'imMaj7'), ('G+7', C4, 'V+7'),
    ('D7', 'G', 'V7'), ('Em', 67, 'vi'), ('F#', 'F#3', 'I'),
    ('C/E', C4, 'I'), ('Eb', C4, None),
])
def test_roman_numeral(name, key, numeral):
    chord = Chord.from_name(name)
    if numeral is None:
        assert chord is None
    else:
        assert chord.roman_numeral(key) == numeral


def test_roman_numeral_all_degrees():
    numerals = [Chord(Note.from_pitch_class(pc)).roman_numeral(C4)
                for pc in range(12)]
    assert numerals == ['I', 'bII', 'II', 'bIII', 'III', 'IV',
                        'bV', 'V', 'bVI', 'VI', 'bVII', 'VII']
    # minor seventh and dominant seventh share the suffix
    assert Chord(G4, Quality.MINOR7).roman_numeral(C4) == 'v7'
    assert Chord(G4, Quality.DOMINANT7).roman_numeral(C4) == 'V7'


@pytest.mark.parametrize("notes, name", [
    ({60, 64, 67}, 'C'),
    ({69, 72, 76}, 'Am'),
    ({67, 71, 74, 77}, 'G7'),
    ({64, 67, 72}, 'C/E'),
    ({48, 60, 64, 67, 76}, 'C'),
    ({57, 60, 64, 67}, 'Am7'),
    ({60, 64, 67, 69}, 'Am7/C'),
    ({64, 67, 70, 72}, 'C7/E'),
    ({60, 65, 67}, 'Csus4'),
    ({65, 67, 72}, 'Fsus2'),
    ({62, 67, 72}, 'Csus2/D'),
    ({60, 63, 66, 69}, 'Cdim7'),
    ({63, 66, 69, 72}, 'D#dim7'),
    ({60, 64, 68}, 'C+'),
    ({64, 68, 72}, 'E+'),
    ({59, 62, 65, 69}, 'Bm7b5'),
    ({60, 63, 67, 71}, 'CmMaj7'),
    ({60, 67}, None),
    (set(), None),
    ({60, 72, 84}, None),
    ({60, 67, 72}, None),
    ({60, 62, 64, 67}, None),  # add9 is never detected
    ({60, 61, 62}, None),
])
def test_detect(notes, name):
    chord = detect_chord(notes)
    if name is None:
        assert chord is None
    else:
        assert chord.name() == name
        assert Chord.detect(notes) == chord
        assert REFERENCE_NOTE <= chord.root < REFERENCE_NOTE + 12
        if chord.bass is not None:
            assert chord.bass == min(notes)
            assert chord.bass.pitch_class() != chord.root.pitch_class()


def test_detect_details():
    chord = detect_chord([64, 67, 72, 67])
    assert chord.root == C4 and chord.quality is Quality.MAJOR
    assert chord.bass == E4 and isinstance(chord.bass, Note)
    assert detect_chord({60, 64, 67}).bass is None
    assert list(iter_matches([62, 67, 72])) == [
        (5, Chord(C4, Quality.SUS2, bass=D4)),
        (5, Chord(G4, Quality.SUS4, bass=D4))]
    assert [score for score, chord in iter_matches({60, 63, 66, 69})] == \
        [12, 7, 7, 7]
    assert list(iter_matches([60, 64])) == []
    with pytest.raises(ValueError):
        detect_chord([60, 64, 128])
    with pytest.raises(TypeError):
        detect_chord([60, 64, 67.0])


def test_detect_root_position():
    for r in range(48, 60):
        for q in Quality.all_sevenths() + Quality.all_triads():
            notes = [r + iv for iv in q.intervals()]
            chord = detect_chord(notes)
            assert chord.quality is q and chord.bass is None
            assert chord.root.pitch_class() == r % 12
            assert chord.name() == \
                Note(r).name() + q.symbol()


def test_detect_round_trip():
    for r in range(48, 60):
        for q in Quality.all_sevenths() + Quality.all_triads():
            notes = [r + iv for iv in q.intervals()]
            for k in range(len(notes)):
                voicing = notes[k:] + [n + 12 for n in notes[:k]]
                chord = detect_chord(voicing)
                assert chord is not None
                assert Chord.from_name(chord.name()) == chord
    for count in range(1000):
        notes = random.sample(range(21, 109), random.randrange(3, 6))
        chord = detect_chord(notes)
        if chord is not None:
            assert Chord.from_name(chord.name()) == chord
            assert set(chord.pitch_classes()) == {n % 12 for n in notes}


def test_progression():
    tree = ProgressionTree().suggest(Chord.from_name('C'), C4)
    assert tree.chord.name() == 'C'
    assert tree.left.chord.name() == 'F' and tree.right.chord.name() == 'Am'
    assert [n.chord.name() for n in tree.left.children()] == ['G', 'C']
    assert [n.chord.name() for n in tree.right.children()] == ['Dm', 'F']
    assert [c.name() for c in tree.chords()] == \
        ['C', 'F', 'G', 'C', 'Am', 'Dm', 'F']
    assert len(list(tree)) == 7 and tree.depth() == 2
    assert len(tree.leaves()) == 4
    assert all(node.is_leaf() and node.children() == ()
               for node in tree.leaves())
    assert all(REFERENCE_NOTE <= node.chord.root < REFERENCE_NOTE + 12
               for node in list(tree)[1:])
    assert tree == ProgressionTree().suggest(Chord.from_name('C'), C4)
    assert tree == suggest_progressions(Chord.from_name('C'))
    assert tree != suggest_progressions(Chord.from_name('C'), 'G')

    ext = ProgressionTree(extended=True).suggest(Chord.from_name('C'), C4)
    assert ext.chord.name() == 'C'
    assert [c.name() for c in ext.chords()] == \
        ['C', 'Fmaj7', 'Gmaj7', 'Cmaj7', 'Am7', 'Dm7', 'Fmaj7']
    assert ext == suggest_progressions(Chord.from_name('C'), 'C', True)

    t = ProgressionTree(extended=1)
    assert t.extended is True and repr(t) == 'ProgressionTree(extended=True)'
    t.set_extended(0)
    assert t.extended is False


@pytest.mark.parametrize("name, key, chords", [
    ('G7', None, ['G7', 'C', 'D', 'G', 'Em', 'Am', 'C']),
    ('G7', 'C', ['G7', 'C', 'F', 'Am', 'Am', 'Dm', 'F']),
    ('Dm', 'C', ['Dm', 'G', 'C', 'Am', 'F', 'G', 'C']),
    ('Em', 'C', ['Em', 'Am', 'Dm', 'F', 'F', 'G', 'C']),
    ('Bdim', 'C', ['Bdim', 'C', 'F', 'Am', 'Em', 'Am', 'F']),
    ('C#', 'C', ['C#', 'G', 'C', 'Am', 'C', 'F', 'Am']),
    ('D#/G', 'C', ['D#/G', 'G', 'C', 'Am', 'C', 'F', 'Am']),
])
def test_progression_table(name, key, chords):
    tree = suggest_progressions(Chord.from_name(name), key)
    assert [c.name() for c in tree.chords()] == chords


def test_progression_tostr():
    tree = suggest_progressions(Chord.from_name('C'))
    assert tree.tostr() == """\
C
├── F
│   ├── G
│   └── C
└── Am
    ├── Dm
    └── F"""
    assert str(tree) == tree.tostr()
    lines = tree.tostr(roman=True).split('\n')
    assert lines[0] == 'C (I)' and lines[1] == '├── F (IV)'
    assert lines[4] == '└── Am (vi)' and lines[5] == '    ├── Dm (ii)'
    lines = tree.tostr(key='G', roman=True).split('\n')
    assert lines[0] == 'C (IV)'
    assert tree.leaves()[0].tostr() == 'G'


def test_progression_node():
    c = Chord.from_name('C')
    node = ProgressionNode(c)
    assert node.is_leaf() and node.depth() == 0 and list(node) == [node]
    with pytest.raises(ValueError):
        ProgressionNode(c, node)
    with pytest.raises(TypeError):
        ProgressionNode('C')
    tree = ProgressionNode(c, ProgressionNode(c), ProgressionNode(c))
    assert tree.depth() == 1 and tree.leaves() == [node, node]
