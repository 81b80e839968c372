import time
from collections import Counter
from typing import Dict, List, Optional

from .consts import MAX_GUESSES
from .solver import Solver
from .state import GameOver


def benchmark(solver: Solver, test_words: Optional[List[str]] = None,
              hard_mode: bool = False, verbose: bool = True) -> Dict:
    """
    Benchmark solver on word list.

    Args:
        solver: Solver instance
        test_words: Solutions to test (default: all solutions)
        hard_mode: Play every game in hard mode
        verbose: Print progress

    Returns:
        Dict with results. A lost game counts as MAX_GUESSES + 1.
    """
    if test_words is None:
        test_words = solver.answers

    results = []
    dist = Counter()
    failures = []

    start = time.time()
    for i, word in enumerate(test_words):
        if verbose and i % 500 == 0:
            elapsed = time.time() - start
            rate = (i + 1) / elapsed if elapsed > 0 else 0
            avg = sum(results) / len(results) if results else 0
            print(f"[{i}/{len(test_words)}] {rate:.1f} w/s, avg={avg:.4f}")

        outcome, guesses = solver.play(word, hard_mode=hard_mode)
        n = len(guesses) if outcome == GameOver.WIN else MAX_GUESSES + 1
        results.append(n)
        dist[n] += 1
        if outcome == GameOver.LOSE:
            failures.append(word)

    elapsed = time.time() - start

    return {
        'total': len(test_words),
        'hard_mode': hard_mode,
        'average': sum(results) / len(results) if results else 0.0,
        'distribution': dict(sorted(dist.items())),
        'failures': len(failures),
        'failed_words': failures[:20],
        'time': elapsed,
        'rate': len(test_words) / elapsed if elapsed > 0 else 0.0,
    }


def print_results(results: Dict):
    """Print a benchmark summary with one bar per score, X for losses."""
    total = results['total']
    lost = results['failures']
    mode = "hard mode" if results.get('hard_mode') else "normal mode"

    print()
    print(f"Solver benchmark, {mode}: {total} solutions in {results['time']:.1f}s")
    print(f"  won {total - lost}, lost {lost}, average score {results['average']:.4f}")
    for n in range(1, MAX_GUESSES + 2):
        count = results['distribution'].get(n, 0)
        label = str(n) if n <= MAX_GUESSES else "X"
        share = count / total if total else 0.0
        print(f"  {label}/{MAX_GUESSES} {count:5d} {'#' * round(40 * share)}")
    if results['failed_words']:
        print("  lost on: " + ", ".join(results['failed_words']))
