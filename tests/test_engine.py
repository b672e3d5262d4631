import pytest
from wordlepop.datasets import load_corpus
from wordlepop.engine import (
    Constraint, GuessResult, LetterStatus, as_statuses, feedback, filter_candidates,
    score, to_pattern, validate_guess,
)

# --- golden scoring (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("crane","crane","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
    ("sassy","abyss","YY-GY"),
    ("level","hotel","---GG"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected
    assert to_pattern(feedback(guess, answer)) == expected

def test_as_statuses_normalizes_and_rejects():
    st = as_statuses("gy--G")
    assert st == (LetterStatus.CORRECT, LetterStatus.MISPLACED, LetterStatus.UNUSED,
                  LetterStatus.UNUSED, LetterStatus.CORRECT)
    assert as_statuses(list(st)) == st
    with pytest.raises(ValueError):
        as_statuses("GGX--")
    with pytest.raises(ValueError):
        as_statuses("GG")

def test_guess_result_helpers():
    first = GuessResult.default()
    assert first.is_first_turn and first.is_valid and not first.is_solved
    r = GuessResult.from_pattern("CRANE", "GGGGG")
    assert r.word == "crane" and r.guesses == ("crane",)
    assert not r.is_first_turn and r.is_solved

# --- filtering rules ---
def test_filter_candidates_history():
    words = ["crane","raise","stare","trace","cared","racer","scoop"]
    cand = filter_candidates(words, [("raise", "YY--G")])
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand

def test_all_correct_keeps_only_the_guess():
    words = ["crane","crate","trace","caner"]
    assert filter_candidates(words, [("crane", "GGGGG")]) == ["crane"]

def test_misplaced_letter_must_move():
    words = ["actor","coast","scout","cloud"]
    # c is in the word but not first; r, a, n, e are out entirely
    assert filter_candidates(words, [("crane", "Y----")]) == ["scout"]

def test_correct_plus_unused_duplicate_caps_the_count():
    # one 'e' and one 'l' confirmed, the other copies marked unused
    words = ["hotel","steel","motel","level"]
    assert filter_candidates(words, [("level", "---GG")]) == ["hotel","motel"]

def test_constraint_counts_for_repeated_letters():
    c = Constraint.from_feedback("geese", "--GGG")
    assert c.min_counts["e"] == 2 and c.max_counts["e"] == 2
    assert c.max_counts["g"] == 0
    assert c.min_counts["s"] == 1 and "s" not in c.max_counts
    assert c.fixed == {2: "e", 3: "s", 4: "e"}

def test_repeated_letter_guess_keeps_true_answer():
    words = ["abyss","sassy","basis","sissy","essay"]
    cand = filter_candidates(words, [("sassy", score("sassy", "abyss"))])
    assert "abyss" in cand
    assert "sissy" not in cand and "sassy" not in cand

def test_filter_is_pure_and_order_preserving():
    words = ["trace","crane","slate"]
    before = list(words)
    out = filter_candidates(words, [("crane", "-----")])
    assert out == [] and words == before

def test_empty_history_keeps_everything():
    assert filter_candidates(["crane","slate"], []) == ["crane","slate"]

def test_wrong_length_words_never_survive():
    assert filter_candidates(["crane","cranes"], [("crane","GGGGG")]) == ["crane"]

# --- properties over the bundled word list ---
@pytest.fixture(scope="module")
def corpus():
    return load_corpus()

@pytest.mark.parametrize("guess", ["crane","sassy","level","geese","eerie"])
def test_honest_feedback_never_removes_answer(corpus, guess):
    for answer in corpus.words:
        cand = filter_candidates(corpus.words, [(guess, score(guess, answer))])
        assert answer in cand, (guess, answer)

@pytest.mark.parametrize("guess,answer", [("crane","slate"),("sassy","abyss"),("about","youth")])
def test_filter_shrinks_and_is_idempotent(corpus, guess, answer):
    history = [(guess, score(guess, answer))]
    once = filter_candidates(corpus.words, history)
    twice = filter_candidates(once, history)
    assert set(once) <= set(corpus.words)
    assert twice == once

def test_validate_guess():
    allowed = ["crane","raise","stare"]
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess("crane", frozenset(allowed)) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess(None, allowed) is False
