from __future__ import annotations

import re
from collections.abc import Callable
from re import Match, Pattern
from typing import TypeVar

from ._exceptions import CronSyntaxError

T = TypeVar("T")

HORIZONTAL_SPACE_RE = re.compile(r"[ \t]*")


class Scanner:
    """
    A cursor over a piece of text.

    The grammar functions in this package take a scanner, consume what they
    recognize and leave :attr:`pos` after it. This makes it possible to embed
    the cron grammar in a larger line grammar: parse a schedule with
    :func:`~cronspec.cron_schedule_loose` and continue from
    :attr:`remaining`.

    :param text: the text to scan
    :param pos: starting offset
    """

    __slots__ = "text", "pos", "_furthest"

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos
        self._furthest: CronSyntaxError | None = None

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def at_line_end(self) -> bool:
        return self.at_end or self.text.startswith(("\n", "\r\n"), self.pos)

    @property
    def remaining(self) -> str:
        return self.text[self.pos :]

    def fail(self, reason: str) -> CronSyntaxError:
        """
        Create a syntax error for the current position.

        If an alternative rolled back earlier had got further into the text, its
        error is returned instead, as it points closer to the actual problem.

        """
        if self._furthest is not None and self._furthest.position > self.pos:
            return self._furthest

        return CronSyntaxError(reason, self.text, self.pos)

    def match(self, pattern: Pattern[str]) -> Match[str] | None:
        match = pattern.match(self.text, self.pos)
        if match:
            self.pos = match.end()

        return match

    def expect(self, pattern: Pattern[str], description: str) -> Match[str]:
        match = self.match(pattern)
        if match is None:
            raise self.fail(f"expected {description}")

        return match

    def expect_char(self, char: str) -> None:
        if not self.text.startswith(char, self.pos):
            raise self.fail(f"expected {char!r}")

        self.pos += len(char)

    def skip_horizontal_space(self) -> None:
        self.match(HORIZONTAL_SPACE_RE)

    def end_of_input(self) -> None:
        if not self.at_end:
            raise self.fail("unexpected trailing input")

    def choice(self, *parsers: Callable[[Scanner], T]) -> T:
        """
        Try each parser in order and return the result of the first one that
        succeeds.

        A parser that raises :exc:`CronSyntaxError` is rolled back before the next
        one is tried. Any other exception propagates immediately. If every
        alternative fails, the error that got furthest into the text is raised.

        """
        if not parsers:
            raise ValueError("no alternatives given")

        start = self.pos
        for parser in parsers:
            try:
                return parser(self)
            except CronSyntaxError as exc:
                self.pos = start
                if self._furthest is None or exc.position > self._furthest.position:
                    self._furthest = exc

        raise self._furthest

    def __repr__(self) -> str:
        return f"Scanner(text={self.text!r}, pos={self.pos})"
