import datetime
import random
from dataclasses import dataclass
from typing import Optional

from .consts import DEFAULT_TITLE
from .logic import Matches
from .state import GameOver, State
from .words import WordSet, default_word_set


@dataclass(frozen=True)
class GameType:
    """A daily puzzle (numbered by day) or a custom word."""
    day: Optional[int] = None

    @property
    def daily(self) -> bool:
        return self.day is not None

    def __str__(self) -> str:
        return str(self.day) if self.daily else "custom"


CUSTOM = GameType()


class Game:
    def __init__(self, state: State, game_type: GameType = CUSTOM, title: str = DEFAULT_TITLE) -> None:
        self.state = state
        self.game_type = game_type
        self.title = title

    @classmethod
    def custom(cls, solution: str, word_set: Optional[WordSet] = None,
               hard_mode: bool = False, **kwargs) -> "Game":
        word_set = word_set or default_word_set()
        return cls(State(solution, word_set, hard_mode=hard_mode), CUSTOM, **kwargs)

    @classmethod
    def from_day(cls, day: int, word_set: Optional[WordSet] = None,
                 hard_mode: bool = False, **kwargs) -> "Game":
        word_set = word_set or default_word_set()
        solution = word_set.get_solution(day)
        return cls(State(solution, word_set, hard_mode=hard_mode), GameType(day), **kwargs)

    @classmethod
    def from_date(cls, date: datetime.date, word_set: Optional[WordSet] = None, **kwargs) -> "Game":
        word_set = word_set or default_word_set()
        return cls.from_day(word_set.get_day(date), word_set, **kwargs)

    @classmethod
    def today(cls, word_set: Optional[WordSet] = None, **kwargs) -> "Game":
        return cls.from_date(datetime.date.today(), word_set, **kwargs)

    @classmethod
    def random(cls, word_set: Optional[WordSet] = None, seed: Optional[int] = None, **kwargs) -> "Game":
        word_set = word_set or default_word_set()
        day = random.Random(seed).randrange(len(word_set))
        return cls.from_day(day, word_set, **kwargs)

    def guess(self, word: str) -> Matches:
        return self.state.guess(word)

    def game_over(self) -> Optional[GameOver]:
        return self.state.game_over()

    @property
    def solution(self) -> str:
        return self.state.solution

    def share(self) -> str:
        """The shareable score card, e.g. 'Wordle 0 4/6*' followed by one glyph row per guess."""
        return f"{self.title} {self.game_type} {self.state.score_card()}"
