import pytest

from wordle.words import WordSet

SOLUTIONS = ["cigar", "crest", "skill", "class", "chair", "rebut", "sissy", "humph", "awake", "blush"]
EXTRA = ["crane", "carts", "stars", "kills", "soare", "raise", "tares"]


@pytest.fixture
def word_set() -> WordSet:
    return WordSet(SOLUTIONS, EXTRA)
