"""
Wordle - game core and entropy solver
=====================================

Feedback matching, a game state machine with optional hard mode, and a
solver that picks guesses by maximising expected information gain.
"""

__version__ = "0.1.0"

from .logic import Match, Matches, diff
from .words import WordSet, default_word_set, load_words
from .state import GameFinished, GameOver, GuessError, MissingExactValues, NotInWordList, State
from .game import Game, GameType
from .solver import Solver
from .benchmark import benchmark, print_results
