import enum
from typing import Iterator, List, Optional, Tuple

from .consts import MAX_GUESSES
from .logic import Match, Matches, diff
from .words import WordSet

Guess = Tuple[str, Matches]


class GuessError(ValueError):
    """A guess was rejected. The game state is unchanged."""


class NotInWordList(GuessError):
    def __init__(self, word: str) -> None:
        super().__init__(f"'{word}' is not in the word list")
        self.word = word


class MissingExactValues(GuessError):
    def __init__(self, position: int) -> None:
        super().__init__(f"hard mode: letter {position + 1} must match the previous exact letter")
        self.position = position


class GameFinished(RuntimeError):
    """Raised when guessing after the game is already won or lost."""


class GameOver(enum.Enum):
    WIN = "win"
    LOSE = "lose"


class State:
    def __init__(self, solution: str, word_set: WordSet, hard_mode: bool = False) -> None:
        if not word_set.is_solution(solution):
            raise ValueError(f"'{solution}' is not a valid solution")
        self._solution = solution
        self._guesses: List[str] = []
        self.word_set = word_set
        self.hard_mode = hard_mode

    @property
    def solution(self) -> str:
        """The hidden word. Only meant for display once the game is over."""
        return self._solution

    @property
    def num_guesses(self) -> int:
        return len(self._guesses)

    def guesses(self) -> Iterator[Guess]:
        for word in self._guesses:
            yield word, diff(word, self._solution)

    def last_guess(self) -> Optional[Guess]:
        if not self._guesses:
            return None
        word = self._guesses[-1]
        return word, diff(word, self._solution)

    def check_hard_mode(self, word: str) -> None:
        """Raise MissingExactValues if `word` drops a letter confirmed by the last guess."""
        last = self.last_guess()
        if last is None:
            return
        previous, matches = last
        for i, m in enumerate(matches):
            if m == Match.EXACT and word[i] != previous[i]:
                raise MissingExactValues(i)

    def guess(self, word: str) -> Matches:
        if self.game_over() is not None:
            raise GameFinished("cannot guess after the game is over")
        if not self.word_set.valid(word):
            raise NotInWordList(word)
        if self.hard_mode:
            self.check_hard_mode(word)

        self._guesses.append(word)
        return diff(word, self._solution)

    def game_over(self) -> Optional[GameOver]:
        last = self.last_guess()
        if last is None:
            return None
        if last[0] == self._solution:
            return GameOver.WIN
        if len(self._guesses) >= MAX_GUESSES:
            return GameOver.LOSE
        return None

    def score(self) -> str:
        """Guess count on a win, 'X' on a loss."""
        if self.game_over() == GameOver.LOSE:
            return "X"
        return str(len(self._guesses))

    def score_card(self) -> str:
        lines = [f"{self.score()}/{MAX_GUESSES}{'*' if self.hard_mode else ''}"]
        lines.extend(str(matches) for _, matches in self.guesses())
        return "\n".join(lines)
