import pytest
from packages.engine import LetterOutcome, Word, evaluate, merge
from packages.engine.constraints import initial_knowledge, update_knowledge, missing_hints
from packages.render import pattern

U = LetterOutcome.UNKNOWN
N = LetterOutcome.NO_MATCH
W = LetterOutcome.WRONG_POSITION
E = LetterOutcome.EXACT_MATCH


def _score(target, guess):
    return pattern(evaluate(Word.parse(target), Word.parse(guess)))


# --- N=5 golden tests (placements + uncapped duplicates) ---
@pytest.mark.parametrize("target,guess,expected", [
    ("today", "today", "GGGGG"),
    ("today", "txday", "G-GGG"),
    ("today", "todax", "GGGG-"),
    ("level", "belle", "-GYYY"),
    ("scoop", "cools", "YYG-Y"),
    ("crane", "raise", "YY--G"),
    # a single O in the target lights up every other O
    ("today", "ooooo", "YGYYY"),
    ("today", "ddxxx", "YY---"),
    # two-pass scoring would give "--Y-G" here
    ("crane", "eerie", "YYY-G"),
])
def test_evaluate_n5_golden(target, guess, expected):
    assert _score(target, guess) == expected


def test_evaluate_keeps_guess_letters():
    g = evaluate(Word.parse("today"), Word.parse("txday"))
    assert g.word == "TXDAY"
    assert [sl.letter for sl in g] == ["T", "X", "D", "A", "Y"]
    assert g.outcomes == (E, N, E, E, E)
    assert not g.perfect_match()


@pytest.mark.parametrize("raw", ["today", "crane", "level", "zzzzz"])
def test_evaluate_self_is_perfect(raw):
    w = Word.parse(raw)
    assert evaluate(w, w).perfect_match()


def test_evaluate_structural_equality():
    t = Word.parse("today")
    assert evaluate(t, Word.parse("arise")) == evaluate(t, Word.parse("ARISE"))
    assert evaluate(t, Word.parse("arise")) != evaluate(t, Word.parse("raise"))


def test_evaluate_length_mismatch():
    with pytest.raises(ValueError):
        evaluate(Word.parse("today"), Word.parse("letter", size=6))


# --- N=6 samples ---
@pytest.mark.parametrize("target,guess,expected", [
    ("letter", "settle", "-GGGYY"),
    ("palate", "planet", "GYY-YY"),
])
def test_evaluate_n6_samples(target, guess, expected):
    assert pattern(evaluate(Word.parse(target, size=6), Word.parse(guess, size=6))) == expected


# --- knowledge merging ---
@pytest.mark.parametrize("existing,new,expected", [
    (U, U, U), (U, N, N), (U, W, W), (U, E, E),
    (N, U, N), (N, N, N), (N, W, W), (N, E, E),
    (W, U, W), (W, N, W), (W, W, W), (W, E, E),
    (E, U, E), (E, N, E), (E, W, E), (E, E, E),
])
def test_merge_table(existing, new, expected):
    assert merge(existing, new) is expected


def test_merge_never_weakens():
    for a in LetterOutcome:
        for b in LetterOutcome:
            assert merge(a, b) >= a


def test_initial_knowledge_is_alphabetical_and_unknown():
    k = initial_knowledge()
    assert list(k) == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    assert set(k.values()) == {U}


def test_update_knowledge_exact_is_sticky():
    t = Word.parse("today")
    k = initial_knowledge()
    update_knowledge(k, evaluate(t, Word.parse("txday")))
    assert (k["T"], k["X"], k["D"], k["A"], k["Y"]) == (E, N, E, E, E)

    # T now lands in the wrong spot, but stays EXACT_MATCH
    update_knowledge(k, evaluate(t, Word.parse("ytxda")))
    assert k["T"] is E and k["Y"] is E


def test_update_knowledge_skips_missing_letters():
    k = {}
    update_knowledge(k, evaluate(Word.parse("today"), Word.parse("tadxy")))
    assert k == {}


def test_missing_hints():
    t = Word.parse("today")
    k = initial_knowledge()
    update_knowledge(k, evaluate(t, Word.parse("arise")))
    assert missing_hints(evaluate(t, Word.parse("xxxxx")), k) == {"A"}
    assert missing_hints(evaluate(t, Word.parse("xxxxa")), k) == set()
