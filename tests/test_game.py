import datetime

import pytest

from wordle.consts import FIRST_DAY
from wordle.game import Game
from wordle.render import AnsiRenderer, PlainRenderer
from wordle.state import GameOver

from .test_state import LOSING_GUESSES


def test_share_daily(word_set):
    game = Game.from_day(0, word_set)
    assert game.solution == "cigar"
    for word in ["crane", "carts", "chair", "cigar"]:
        game.guess(word)

    assert game.game_over() == GameOver.WIN
    first_line = game.share().split("\n")[0]
    assert first_line == "Wordle 0 4/6"
    assert len(game.share().split("\n")) == 5


def test_share_lost_hard_mode(word_set):
    game = Game.custom("humph", word_set, hard_mode=True)
    for word in LOSING_GUESSES:
        game.guess(word)

    assert game.game_over() == GameOver.LOSE
    assert game.share().startswith("Wordle custom X/6*\n")


def test_share_title(word_set):
    game = Game.custom("cigar", word_set, title="Termo")
    game.guess("cigar")
    assert game.share() == "Termo custom 1/6\n" + "\U0001F7E9" * 5


def test_from_date(word_set):
    game = Game.from_date(FIRST_DAY + datetime.timedelta(days=1), word_set)
    assert str(game.game_type) == "1"
    assert game.solution == "crest"


def test_random_is_seeded(word_set):
    assert Game.random(word_set, seed=3).solution == Game.random(word_set, seed=3).solution


def test_custom_requires_solution(word_set):
    with pytest.raises(ValueError):
        Game.custom("crane", word_set)


def test_renderers(word_set):
    game = Game.custom("cigar", word_set)
    matches = game.guess("chair")

    plain = PlainRenderer().render_row("chair", matches)
    assert plain == "C\U0001F7E9H\u2B1BA\U0001F7E8I\U0001F7E8R\U0001F7E9"

    ansi = AnsiRenderer().render_row("chair", matches)
    assert ansi.startswith("\x1b[30;42mC\x1b[0mH")
    assert PlainRenderer().render_board(game.state) == plain
