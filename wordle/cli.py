"""
Command line for the word game.

Usage:
  python -m wordle play                 # today's puzzle
  python -m wordle play --day 42 --hard
  python -m wordle solve --word cigar
  python -m wordle benchmark --limit 200
"""

import argparse
import random
import sys
from typing import List, Optional

from .benchmark import benchmark, print_results
from .consts import DEFAULT_OPENING, DEFAULT_TITLE, MAX_GUESSES
from .game import Game
from .render import AnsiRenderer, PlainRenderer, Renderer
from .solver import Solver
from .state import GameOver, GuessError
from .words import WordSet, default_word_set


def _word_set(args: argparse.Namespace) -> WordSet:
    if args.solutions:
        return WordSet.from_files(args.solutions, args.acceptable)
    return default_word_set()


def _make_game(args: argparse.Namespace, word_set: WordSet) -> Game:
    kwargs = dict(word_set=word_set, hard_mode=args.hard, title=args.title)
    if args.word:
        return Game.custom(args.word.strip().lower(), **kwargs)
    if args.day is not None:
        return Game.from_day(args.day, **kwargs)
    if getattr(args, "random", False):
        return Game.random(**kwargs)
    return Game.today(**kwargs)


def _renderer(args: argparse.Namespace) -> Renderer:
    return AnsiRenderer() if args.ansi else PlainRenderer()


def _finish(game: Game) -> None:
    if game.game_over() == GameOver.LOSE:
        print(f"GAME OVER - '{game.solution.upper()}'")
    print()
    print(game.share())


def play(args: argparse.Namespace) -> int:
    game = _make_game(args, _word_set(args))
    renderer = _renderer(args)

    print(f"{game.title} {game.game_type}: guess the word in {MAX_GUESSES} tries.")
    for line in sys.stdin:
        word = line.strip().lower()
        if not word:
            continue
        try:
            matches = game.guess(word)
        except GuessError as e:
            print(f"INVALID: {e}")
            continue

        print(renderer.render_row(word, matches))
        if game.game_over() is not None:
            _finish(game)
            return 0

    print("Input ended before the game was over.", file=sys.stderr)
    return 1


def solve(args: argparse.Namespace) -> int:
    word_set = _word_set(args)
    game = _make_game(args, word_set)
    renderer = _renderer(args)
    solver = Solver(word_set, opening=args.opening, parallel=not args.serial)

    while game.game_over() is None:
        n = len(solver.candidates)
        guess, matches = solver.play_turn(game.state)
        print(f"{renderer.render_row(guess, matches)}  ({n} candidates)")

    _finish(game)
    return 0


def run_benchmark(args: argparse.Namespace) -> int:
    word_set = _word_set(args)
    solver = Solver(word_set, opening=args.opening, parallel=not args.serial)

    words = list(word_set.solutions)
    if args.limit is not None and args.limit < len(words):
        words = random.Random(args.seed).sample(words, args.limit)

    results = benchmark(solver, words, hard_mode=args.hard)
    print_results(results)
    return 0 if results['failures'] == 0 else 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle", description="Five-letter word game and entropy solver.")
    ap.add_argument("--solutions", type=str, default=None,
                    help="Path to the solution word list, one per line (default: bundled list).")
    ap.add_argument("--acceptable", type=str, default=None,
                    help="Path to extra acceptable guesses, one per line.")
    sub = ap.add_subparsers(dest="command", required=True)

    def puzzle_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--day", type=int, default=None, help="Play the given puzzle number.")
        p.add_argument("--word", type=str, default=None, help="Play with a custom solution word.")
        p.add_argument("--hard", action="store_true", help="Hard mode: exact letters must be reused.")
        p.add_argument("--title", type=str, default=DEFAULT_TITLE, help="Title on the score card.")
        p.add_argument("--ansi", action="store_true", help="Colour letters with ANSI escapes.")

    def solver_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--opening", type=str, default=DEFAULT_OPENING, help="First guess of the solver.")
        p.add_argument("--serial", action="store_true", help="Score guesses without parallel workers.")

    p_play = sub.add_parser("play", help="Play interactively, one guess per line.")
    puzzle_args(p_play)
    p_play.add_argument("--random", action="store_true", help="Play a random puzzle.")
    p_play.set_defaults(func=play)

    p_solve = sub.add_parser("solve", help="Let the solver play a puzzle.")
    puzzle_args(p_solve)
    solver_args(p_solve)
    p_solve.set_defaults(func=solve)

    p_bench = sub.add_parser("benchmark", help="Run the solver over many solutions.")
    solver_args(p_bench)
    p_bench.add_argument("--hard", action="store_true", help="Play every game in hard mode.")
    p_bench.add_argument("--limit", type=int, default=None, help="Sample this many solutions.")
    p_bench.add_argument("--seed", type=int, default=42, help="Seed for --limit sampling.")
    p_bench.set_defaults(func=run_benchmark)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
