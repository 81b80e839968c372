"""
Entropy Wordle Solver
=====================

Plays Wordle without human input by picking, every turn, the guess whose
feedback splits the remaining candidate solutions with the most information.

- Candidates start as every solution and shrink after each feedback.
- Guesses are scored over every acceptable word, not just the candidates:
  a word that cannot be the answer is often the most informative guess.
- Score = Shannon entropy of the feedback partition, in bits.
- The opening guess is fixed ("soare" for the bundled lists) since the first
  move always scores the same full pool.
"""

import numpy as np
from numba import jit, prange
from typing import List, Optional, Tuple

from .consts import DEFAULT_OPENING, N_PATTERNS
from .logic import Match, Matches, compute_feedback_matrix, words_to_chars
from .state import GameOver, GuessError, State
from .words import WordSet

TIE_BREAKS = ("last", "first")


# ============================================================================
# NUMBA-ACCELERATED ENTROPY
# ============================================================================

@jit(nopython=True, cache=True)
def get_partition_sizes(feedback_row: np.ndarray, candidates: np.ndarray) -> np.ndarray:
    """
    Count how many candidates fall into each feedback partition.

    Args:
        feedback_row: feedback codes for one guess against all solutions
        candidates: indices of the remaining candidate solutions

    Returns:
        Array of 243 partition sizes
    """
    sizes = np.zeros(N_PATTERNS, dtype=np.int32)
    for c in candidates:
        sizes[feedback_row[c]] += 1
    return sizes


@jit(nopython=True, cache=True)
def compute_entropy(sizes: np.ndarray, total: int) -> float:
    """Shannon entropy (bits) of a partition distribution."""
    if total == 0:
        return 0.0

    entropy = 0.0
    for s in sizes:
        if s > 0:
            p = s / total
            entropy -= p * np.log2(p)

    return entropy


def _entropies(feedback_matrix: np.ndarray, guesses: np.ndarray, candidates: np.ndarray) -> np.ndarray:
    n = guesses.shape[0]
    total = candidates.shape[0]
    result = np.zeros(n, dtype=np.float64)

    for i in prange(n):
        sizes = get_partition_sizes(feedback_matrix[guesses[i]], candidates)
        result[i] = compute_entropy(sizes, total)

    return result


# Every guess is scored independently, so both variants return identical arrays.
compute_entropies = jit(nopython=True, parallel=True, cache=True)(_entropies)
compute_entropies_serial = jit(nopython=True)(_entropies)


# ============================================================================
# SOLVER CLASS
# ============================================================================

class Solver:
    """
    Entropy-maximising solver over a word set.

    The guess x solution feedback matrix is computed once at construction;
    `reset()` starts a new session reusing it.
    """

    def __init__(self, word_set: WordSet, opening: str = DEFAULT_OPENING,
                 tie_break: str = "last", parallel: bool = True, decimals: int = 3):
        """
        Args:
            word_set: solutions and acceptable guesses
            opening: first guess; the best opening is computed if it is not acceptable
            tie_break: "last" or "first" maximal-entropy guess in allowable order,
                applied after preferring candidates among equal scores
            parallel: score guesses with numba's parallel loop
            decimals: entropies are truncated to this many decimals before comparing
        """
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got '{tie_break}'")

        self.word_set = word_set
        self.guesses = list(word_set.acceptable)
        self.answers = list(word_set.solutions)
        self.guess_to_idx = {w: i for i, w in enumerate(self.guesses)}
        self.n_guesses = len(self.guesses)
        self.n_answers = len(self.answers)

        self.tie_break = tie_break
        self.parallel = parallel
        self.decimals = decimals

        # Row of each solution in the feedback matrix
        self.answer_guess_idx = np.array([self.guess_to_idx[w] for w in self.answers], dtype=np.int64)

        self.guess_chars = words_to_chars(self.guesses)
        self.feedback_matrix = compute_feedback_matrix(self.guess_chars, words_to_chars(self.answers))

        self.reset()
        self._setup_opening(opening)

    def _setup_opening(self, opening: str):
        if self.word_set.valid(opening):
            self.opening = opening
        else:
            self.opening = self.guesses[self._best_guess(self._allowable_guesses())]

    def reset(self):
        """Start a new session with every solution as a candidate."""
        self.candidates = np.arange(self.n_answers, dtype=np.int64)
        self.first_move = True
        self._last: Optional[Tuple[str, Matches]] = None

    @property
    def candidate_words(self) -> List[str]:
        return [self.answers[i] for i in self.candidates]

    def _allowable_guesses(self, hard_mode: bool = False) -> np.ndarray:
        """
        Guess indices worth scoring: acceptable words that are not candidates,
        followed by the candidates.
        """
        pool = self.answer_guess_idx[self.candidates]
        in_pool = np.zeros(self.n_guesses, dtype=np.bool_)
        in_pool[pool] = True
        allowable = np.concatenate((np.where(~in_pool)[0].astype(np.int64), pool))

        if hard_mode and self._last is not None:
            word, matches = self._last
            keep = np.ones(len(allowable), dtype=np.bool_)
            for i, m in enumerate(matches):
                if m == Match.EXACT:
                    keep &= self.guess_chars[allowable, i] == ord(word[i]) - ord('a')
            allowable = allowable[keep]

        return allowable

    def _entropies(self, allowable: np.ndarray) -> np.ndarray:
        compute = compute_entropies if self.parallel else compute_entropies_serial
        entropies = compute(self.feedback_matrix, allowable, self.candidates)
        # truncate to `decimals` places so near-equal scores tie
        scale = 10 ** self.decimals
        return np.floor(entropies * scale) / scale

    def _best_guess(self, allowable: np.ndarray) -> int:
        entropies = self._entropies(allowable)
        tied = np.flatnonzero(entropies == entropies.max())

        # Among equal scores, a word that can still be the answer wins
        is_candidate = np.isin(allowable[tied], self.answer_guess_idx[self.candidates])
        if is_candidate.any():
            tied = tied[is_candidate]

        best = tied[0] if self.tie_break == "first" else tied[-1]
        return int(allowable[best])

    def entropy(self, guess: str) -> float:
        """Expected information (bits) of `guess` over the current candidates."""
        if guess not in self.guess_to_idx:
            raise ValueError(f"'{guess}' is not in the word list")
        allowable = np.array([self.guess_to_idx[guess]], dtype=np.int64)
        return float(self._entropies(allowable)[0])

    def suggest(self, top_k: int = 10, hard_mode: bool = False) -> List[Tuple[str, float]]:
        """Top guesses by entropy, best first."""
        allowable = self._allowable_guesses(hard_mode)
        entropies = self._entropies(allowable)
        order = np.argsort(-entropies, kind="stable")[:top_k]
        return [(self.guesses[allowable[i]], float(entropies[i])) for i in order]

    def next_guess(self, hard_mode: bool = False) -> str:
        if self.first_move:
            return self.opening
        return self.guesses[self._best_guess(self._allowable_guesses(hard_mode))]

    def update(self, guess: str, matches: Matches):
        """Keep only the candidates that would have produced `matches` for `guess`."""
        if guess not in self.guess_to_idx:
            raise ValueError(f"'{guess}' is not in the word list")
        matches = Matches(matches)

        feedback_row = self.feedback_matrix[self.guess_to_idx[guess]]
        self.candidates = self.candidates[feedback_row[self.candidates] == matches.code]
        self.first_move = False
        self._last = (guess, matches)

        if len(self.candidates) == 0:
            raise RuntimeError("No candidates remaining - bug in solver")

    def play_turn(self, state: State) -> Tuple[str, Matches]:
        """Choose a guess, submit it to `state` and learn from the feedback."""
        guess = self.next_guess(hard_mode=state.hard_mode)
        try:
            matches = state.guess(guess)
        except GuessError as e:
            raise RuntimeError(f"solver made an invalid guess '{guess}'") from e
        self.update(guess, matches)
        return guess, matches

    def solve(self, state: State) -> GameOver:
        """Play `state` to the end."""
        while state.game_over() is None:
            self.play_turn(state)
        return state.game_over()

    def play(self, solution: str, hard_mode: bool = False) -> Tuple[GameOver, List[str]]:
        """
        Solve for a given solution in a fresh session.

        Returns:
            (outcome, list_of_guesses)
        """
        self.reset()
        state = State(solution, self.word_set, hard_mode=hard_mode)
        outcome = self.solve(state)
        return outcome, [word for word, _ in state.guesses()]
