import pytest

from wordle.consts import MAX_GUESSES
from wordle.logic import Match
from wordle.state import GameFinished, GameOver, MissingExactValues, NotInWordList, State

GREEN = "\U0001F7E9"
YELLOW = "\U0001F7E8"
BLACK = "\u2B1B"

LOSING_GUESSES = ["crane", "carts", "stars", "kills", "soare", "raise"]


def test_win(word_set):
    state = State("cigar", word_set)
    assert state.game_over() is None

    for word in ["crane", "carts", "chair"]:
        state.guess(word)
        assert state.game_over() is None

    matches = state.guess("cigar")
    assert matches.win
    assert state.game_over() == GameOver.WIN
    assert state.num_guesses == 4
    assert state.score_card() == "\n".join([
        "4/6",
        GREEN + YELLOW + YELLOW + BLACK + BLACK,
        GREEN + YELLOW + YELLOW + BLACK + BLACK,
        GREEN + BLACK + YELLOW + YELLOW + GREEN,
        GREEN * 5,
    ])

    with pytest.raises(GameFinished):
        state.guess("crane")
    assert state.num_guesses == 4
    assert state.game_over() == GameOver.WIN


def test_lose(word_set):
    state = State("cigar", word_set)
    for word in LOSING_GUESSES:
        assert state.game_over() is None
        state.guess(word)

    assert state.game_over() == GameOver.LOSE
    assert state.num_guesses == MAX_GUESSES
    assert state.score_card().startswith("X/6\n")

    with pytest.raises(GameFinished):
        state.guess("cigar")
    assert state.num_guesses == MAX_GUESSES


def test_win_on_last_guess(word_set):
    state = State("cigar", word_set)
    for word in LOSING_GUESSES[:5]:
        state.guess(word)
    state.guess("cigar")
    assert state.game_over() == GameOver.WIN
    assert state.score() == "6"


def test_not_in_word_list(word_set):
    state = State("cigar", word_set)
    for word in ["zzzzz", "CIGAR", "cig", "cigars", ""]:
        with pytest.raises(NotInWordList):
            state.guess(word)
    assert state.num_guesses == 0
    assert state.last_guess() is None


def test_hard_mode(word_set):
    state = State("cigar", word_set, hard_mode=True)
    matches = state.guess("crane")
    assert matches[0] == Match.EXACT

    with pytest.raises(MissingExactValues) as e:
        state.guess("rebut")
    assert e.value.position == 0
    assert state.num_guesses == 1

    state.guess("chair")
    # chair confirmed c and r, carts keeps c but moves r
    with pytest.raises(MissingExactValues) as e:
        state.guess("carts")
    assert e.value.position == 4
    assert state.num_guesses == 2
    assert state.last_guess()[0] == "chair"

    state.guess("cigar")
    assert state.game_over() == GameOver.WIN
    assert state.score_card().startswith("3/6*\n")


def test_soft_mode_ignores_exact_letters(word_set):
    state = State("cigar", word_set)
    state.guess("crane")
    state.guess("rebut")
    assert state.num_guesses == 2


def test_guesses_iterates_in_order(word_set):
    state = State("crest", word_set)
    state.guess("class")
    state.guess("stars")
    assert [word for word, _ in state.guesses()] == ["class", "stars"]
    assert [m for _, m in state.guesses()][1] == (Match.CLOSE, Match.CLOSE, Match.WRONG, Match.CLOSE, Match.WRONG)


def test_solution_must_be_in_solutions(word_set):
    with pytest.raises(ValueError):
        State("crane", word_set)
