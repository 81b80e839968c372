"""Word lists: possible solutions, acceptable guesses and puzzle numbering."""

import datetime
from typing import Dict, List, Optional, Sequence

from .consts import ACCEPTABLE_FILE, FIRST_DAY, SOLUTIONS_FILE, WORD_LENGTH


def is_word_shaped(word: str) -> bool:
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha() and word.islower()


def load_words(filepath: str) -> List[str]:
    """Load a word list from file, one word per line. Order is preserved."""
    words: List[str] = []
    seen = set()
    with open(filepath, 'r', encoding="utf-8") as f:
        for line in f:
            w = line.strip().lower()
            if is_word_shaped(w) and w not in seen:
                seen.add(w)
                words.append(w)
    return words


class WordSet:
    """
    Immutable pair of word lists.

    `solutions` is the ordered list of daily answers; `acceptable` is every
    word that may be guessed and always starts with the solutions.
    """

    def __init__(self, solutions: Sequence[str], acceptable: Sequence[str] = (),
                 date_offset: datetime.date = FIRST_DAY):
        if not solutions:
            raise ValueError("a word set needs at least one solution")
        for w in list(solutions) + list(acceptable):
            if not is_word_shaped(w):
                raise ValueError(f"'{w}' is not a {WORD_LENGTH} letter lower-case word")

        self._solutions = tuple(dict.fromkeys(solutions))
        self._acceptable = tuple(dict.fromkeys(list(self._solutions) + list(acceptable)))
        self._solution_idx: Dict[str, int] = {w: i for i, w in enumerate(self._solutions)}
        self._acceptable_set = frozenset(self._acceptable)
        self.date_offset = date_offset

    @classmethod
    def from_files(cls, solutions_path: str, acceptable_path: Optional[str] = None,
                   date_offset: datetime.date = FIRST_DAY) -> "WordSet":
        solutions = load_words(solutions_path)
        acceptable = load_words(acceptable_path) if acceptable_path else []
        return cls(solutions, acceptable, date_offset=date_offset)

    @property
    def solutions(self) -> Sequence[str]:
        return self._solutions

    @property
    def acceptable(self) -> Sequence[str]:
        return self._acceptable

    def valid(self, word: str) -> bool:
        """Determines if the given word may be guessed."""
        return word in self._acceptable_set

    def is_solution(self, word: str) -> bool:
        return word in self._solution_idx

    def index(self, word: str) -> int:
        """Position of `word` in the solution list."""
        try:
            return self._solution_idx[word]
        except KeyError:
            raise ValueError(f"'{word}' is not a valid solution") from None

    def get_solution(self, day: int) -> str:
        """Gets the solution word for the given day."""
        return self._solutions[day % len(self._solutions)]

    def get_day(self, date: datetime.date) -> int:
        """Gets the day number for the given date."""
        return (date - self.date_offset).days

    def __len__(self) -> int:
        return len(self._solutions)

    def __repr__(self) -> str:
        return f"WordSet({len(self._solutions)} solutions, {len(self._acceptable)} acceptable)"


_default: Optional[WordSet] = None


def default_word_set() -> WordSet:
    """The bundled word lists, loaded once."""
    global _default
    if _default is None:
        _default = WordSet.from_files(SOLUTIONS_FILE, ACCEPTABLE_FILE)
    return _default
