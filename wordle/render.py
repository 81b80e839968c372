import abc

from .logic import Match, Matches
from .state import State

RESET = "\x1b[0m"

_ANSI = {
    Match.EXACT: "\x1b[30;42m",  # black on green
    Match.CLOSE: "\x1b[30;43m",  # black on yellow
    Match.WRONG: "",
}


class Renderer(abc.ABC):
    @abc.abstractmethod
    def render_letter(self, letter: str, match: Match) -> str:
        ...

    def render_row(self, word: str, matches: Matches) -> str:
        return "".join(self.render_letter(letter, m) for letter, m in zip(word, matches))

    def render_board(self, state: State) -> str:
        return "\n".join(self.render_row(word, matches) for word, matches in state.guesses())


class PlainRenderer(Renderer):
    def render_letter(self, letter: str, match: Match) -> str:
        return f"{letter.upper()}{match.glyph}"


class AnsiRenderer(Renderer):
    def render_letter(self, letter: str, match: Match) -> str:
        style = _ANSI[match]
        if not style:
            return letter.upper()
        return f"{style}{letter.upper()}{RESET}"
