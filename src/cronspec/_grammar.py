"""
Grammar for a single cron field::

    field   := step | list | base
    step    := base '/' integer
    list    := base (',' base)+
    base    := range | '*' | value
    range   := value '-' value
    value   := integer | name

Names are only recognized when the caller passes a name table (months and
weekdays).
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import lru_cache
from re import Pattern

from ._scanner import Scanner
from .fields import (
    BaseField,
    CronField,
    Field,
    ListField,
    RangeField,
    SpecificField,
    Star,
    StepField,
)

MONTHS = (
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)
WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

INTEGER_RE = re.compile(r"[0-9]+")
STAR_RE = re.compile(r"\*")


@lru_cache(maxsize=None)
def _names_re(names: tuple[str, ...]) -> Pattern[str]:
    return re.compile("|".join(re.escape(name) for name in names), re.IGNORECASE)


def parse_int(scanner: Scanner) -> int:
    return int(scanner.expect(INTEGER_RE, "an integer").group())


def value(scanner: Scanner, names: Sequence[str] = ()) -> int:
    """
    Parse an integer, or one of ``names`` which is translated to its 1-based
    position in the table.

    """
    if not names:
        return parse_int(scanner)

    match = scanner.match(_names_re(tuple(names)))
    if match:
        return tuple(names).index(match.group().lower()) + 1

    match = scanner.match(INTEGER_RE)
    if match is None:
        raise scanner.fail(f"expected an integer or one of {', '.join(names)}")

    return int(match.group())


def star(scanner: Scanner) -> Star:
    scanner.expect(STAR_RE, "'*'")
    return Star()


def range_field(scanner: Scanner, names: Sequence[str] = ()) -> RangeField:
    begin = value(scanner, names)
    scanner.expect_char("-")
    end = value(scanner, names)
    return RangeField(begin, end)


def specific_field(scanner: Scanner, names: Sequence[str] = ()) -> SpecificField:
    return SpecificField(value(scanner, names))


def base_field(scanner: Scanner, names: Sequence[str] = ()) -> BaseField:
    return scanner.choice(
        lambda s: range_field(s, names),
        star,
        lambda s: specific_field(s, names),
    )


def step_field(scanner: Scanner, names: Sequence[str] = ()) -> StepField:
    base = base_field(scanner, names)
    scanner.expect_char("/")
    return StepField(base, parse_int(scanner))


def list_field(scanner: Scanner, names: Sequence[str] = ()) -> ListField:
    fields = [base_field(scanner, names)]
    while scanner.text.startswith(",", scanner.pos):
        scanner.pos += 1
        fields.append(base_field(scanner, names))

    if len(fields) < 2:
        raise scanner.fail("expected ','")

    return ListField(fields)


def cron_field(scanner: Scanner, names: Sequence[str] = ()) -> CronField:
    """
    Parse one cron field at the current position of ``scanner``.

    Steps are tried before lists and lists before plain fields, so ``*/2`` is a
    step over a star and ``1,2`` is a list, never a plain field followed by junk.

    :param scanner: the scanner to consume from
    :param names: name table accepted in place of integers
    """
    return scanner.choice(
        lambda s: step_field(s, names),
        lambda s: list_field(s, names),
        lambda s: Field(base_field(s, names)),
    )


def parse_field(text: str, names: Sequence[str] = ()) -> CronField:
    """
    Parse the whole of ``text`` as a single cron field.

    :raises CronSyntaxError: if the text is not a field or has trailing input
    :raises CronValidationError: if a range is reversed or a step is not positive
    """
    scanner = Scanner(text)
    field = cron_field(scanner, names)
    scanner.end_of_input()
    return field
