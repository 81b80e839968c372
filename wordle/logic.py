"""
Feedback matching
=================

`diff` compares one guess with one solution, letter by letter. The numba
functions below run the same two-pass algorithm on letter-index arrays so the
solver can precompute feedback for every guess/solution pair at once.
"""

import enum
from typing import Iterable, List

import numpy as np
from numba import jit, prange

from .consts import N_PATTERNS, WIN_PATTERN, WORD_LENGTH


class Match(enum.IntEnum):
    WRONG = 0
    CLOSE = 1
    EXACT = 2

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Match.EXACT: "\U0001F7E9",  # green square
    Match.CLOSE: "\U0001F7E8",  # yellow square
    Match.WRONG: "\u2B1B",      # black square
}


class Matches(tuple):
    """Feedback for one guess: exactly one `Match` per letter position."""

    def __new__(cls, matches: Iterable[int]) -> "Matches":
        matches = tuple(Match(m) for m in matches)
        if len(matches) != WORD_LENGTH:
            raise ValueError(f"feedback must have {WORD_LENGTH} entries, got {len(matches)}")
        return super().__new__(cls, matches)

    @classmethod
    def from_code(cls, code: int) -> "Matches":
        if not 0 <= code < N_PATTERNS:
            raise ValueError(f"feedback code out of range: {code}")
        digits = []
        for _ in range(WORD_LENGTH):
            code, digit = divmod(code, 3)
            digits.append(digit)
        return cls(digits)

    @property
    def code(self) -> int:
        """Base-3 pattern, same encoding as `compute_feedback`."""
        return sum(int(m) * 3 ** i for i, m in enumerate(self))

    @property
    def win(self) -> bool:
        return self.code == WIN_PATTERN

    def __str__(self) -> str:
        return "".join(m.glyph for m in self)

    def __repr__(self) -> str:
        return f"Matches({', '.join(m.name for m in self)})"


def diff(guess: str, solution: str) -> Matches:
    """
    Compute the feedback for `guess` against `solution`.

    Exact matches are resolved first and consume their solution letter, so a
    letter guessed twice but present once only scores once.
    """
    if len(guess) != WORD_LENGTH or not guess.isascii():
        raise ValueError("input guess should only be 5 ascii letters")
    assert len(solution) == WORD_LENGTH and solution.isascii()

    remaining: List = list(solution)
    result = [Match.WRONG] * WORD_LENGTH

    for i, letter in enumerate(guess):
        if remaining[i] == letter:
            remaining[i] = None  # letters only match once
            result[i] = Match.EXACT

    for i, letter in enumerate(guess):
        if result[i] != Match.WRONG:
            continue
        if letter in remaining:
            remaining[remaining.index(letter)] = None
            result[i] = Match.CLOSE

    return Matches(result)


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK
# ============================================================================

def words_to_chars(words: List[str]) -> np.ndarray:
    """Convert words to an (n, 5) array of letter indices 0-25."""
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c) - ord('a')
    return arr


@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> int:
    """
    Compute the feedback code for a guess against an answer.

    Args:
        guess: shape (5,) array of letter indices
        answer: shape (5,) array of letter indices

    Returns:
        Integer feedback pattern (0-242), equal to `diff(...).code`
    """
    feedback = np.zeros(5, dtype=np.int32)
    answer_counts = np.zeros(26, dtype=np.int32)

    for i in range(5):
        answer_counts[answer[i]] += 1

    # First pass: exact
    for i in range(5):
        if guess[i] == answer[i]:
            feedback[i] = 2
            answer_counts[guess[i]] -= 1

    # Second pass: close, only against letters not yet consumed
    for i in range(5):
        if feedback[i] == 0 and answer_counts[guess[i]] > 0:
            feedback[i] = 1
            answer_counts[guess[i]] -= 1

    return feedback[0] + 3*feedback[1] + 9*feedback[2] + 27*feedback[3] + 81*feedback[4]


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_matrix(guess_chars: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """
    Compute feedback for all guess/answer pairs in parallel.

    Returns:
        shape (n_guesses, n_answers) feedback matrix
    """
    n_guesses = guess_chars.shape[0]
    n_answers = answer_chars.shape[0]
    result = np.zeros((n_guesses, n_answers), dtype=np.uint8)

    for i in prange(n_guesses):
        for j in range(n_answers):
            result[i, j] = compute_feedback(guess_chars[i], answer_chars[j])

    return result
