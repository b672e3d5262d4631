import pytest
from wordlepop.datasets import Corpus
from wordlepop.engine import GuessResult
from wordlepop.solvers import (
    CandidatePool, ExhaustedCandidates, InvalidFeedback, SolverError,
    choose_best, create_solver, distinct_letter_score, get_solver_ids,
)


@pytest.fixture
def small_corpus():
    return Corpus.from_words(["crane", "slate", "trace"])


def test_registry_lists_both_variants():
    assert get_solver_ids() == ["adaptive_popularity", "popularity"]
    with pytest.raises(ValueError):
        create_solver("nope")


def test_first_guess_is_opener_and_leaves_pool(small_corpus):
    solver = create_solver("popularity")
    solver.reset(corpus=small_corpus)
    assert solver.pick_next_guess(GuessResult.default()) == "crane"
    assert solver.pool.words == ("slate", "trace")


def test_all_unused_feedback_exhausts_pool(small_corpus):
    solver = create_solver("popularity")
    solver.reset(corpus=small_corpus)
    solver.pick_next_guess(GuessResult.default())
    with pytest.raises(ExhaustedCandidates):
        solver.pick_next_guess(GuessResult.from_pattern("crane", "-----"))


def test_invalid_feedback_is_rejected(small_corpus):
    solver = create_solver("popularity")
    solver.reset(corpus=small_corpus)
    with pytest.raises(InvalidFeedback):
        solver.pick_next_guess(GuessResult(word="xxxxx", is_valid=False))


def test_pick_before_reset_fails():
    with pytest.raises(SolverError):
        create_solver("popularity").pick_next_guess(GuessResult.default())


def test_opener_must_be_in_corpus():
    solver = create_solver("popularity")
    with pytest.raises(ValueError):
        solver.reset(corpus=Corpus.from_words(["slate", "trace"]))


def test_reset_restores_full_pool(small_corpus):
    solver = create_solver("popularity")
    solver.reset(corpus=small_corpus)
    solver.pick_next_guess(GuessResult.default())
    solver.reset(corpus=small_corpus)
    assert solver.pool.words == small_corpus.words


def test_second_guess_uses_corpus_popularity():
    corpus = Corpus.from_words(["crane", "slate", "trace", "abyss", "sassy"])
    solver = create_solver("popularity")
    solver.reset(corpus=corpus)
    solver.pick_next_guess(GuessResult.default())
    # crane vs abyss: only 'a' is in the answer, and not in the middle
    nxt = solver.pick_next_guess(GuessResult.from_pattern("crane", "--Y--"))
    # abyss: a5 + b1 + y2 + s3 = 11 beats sassy: s3 + a5 + y2 = 10
    assert nxt == "abyss"
    assert solver.pool.words == ("sassy",)


def test_adaptive_opener_is_best_over_corpus(small_corpus):
    solver = create_solver("adaptive_popularity")
    solver.reset(corpus=small_corpus)
    # trace: t2 r2 a3 c2 e3 = 12, crane = 11, slate = 10
    assert solver.pick_next_guess(GuessResult.default()) == "trace"


def test_adaptive_does_not_need_fixed_opener():
    solver = create_solver("adaptive_popularity")
    solver.reset(corpus=Corpus.from_words(["slate", "trace"]))
    assert solver.pick_next_guess(GuessResult.default()) in ("slate", "trace")


# --- selector ---

def test_distinct_letter_score_counts_each_letter_once():
    table = {"s": 3, "a": 5, "y": 2}
    assert distinct_letter_score("sassy", table) == 10
    assert distinct_letter_score("zzzzz", table) == 0


def test_choose_best_ties_go_to_first_word():
    table = {"a": 1, "b": 1, "c": 1, "d": 1, "e": 1}
    assert choose_best(["abcde", "edcba"], table) == "abcde"
    assert choose_best(["edcba", "abcde"], table) == "edcba"


def test_choose_best_is_deterministic(small_corpus):
    picks = {choose_best(small_corpus.words, small_corpus.popularity) for _ in range(10)}
    assert picks == {"trace"}


def test_choose_best_empty_pool():
    with pytest.raises(ExhaustedCandidates):
        choose_best([], {"a": 1})


# --- pool ---

def test_pool_apply_only_shrinks(small_corpus):
    pool = CandidatePool(small_corpus)
    before = set(pool)
    pool.apply("crane", "YGG-G")
    assert set(pool) <= before
    assert "trace" in pool and len(pool) == 1
    pool.remove("trace")
    assert len(pool) == 0
    pool.reset()
    assert pool.words == small_corpus.words
