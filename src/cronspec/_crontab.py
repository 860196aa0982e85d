from __future__ import annotations

import re
from collections.abc import Iterator
from logging import getLogger
from typing import Union

import attrs
from attrs.validators import instance_of, matches_re

from ._exceptions import CronParseError, CrontabLineError
from ._scanner import Scanner
from ._schedule import CronSchedule, cron_schedule_loose

logger = getLogger(__name__)

ENV_NAME_RE = re.compile(r"[^\s=]+")
ENV_VALUE_RE = re.compile(r"\S+")
SEPARATOR_RE = re.compile(r"[ \t]+")
COMMAND_RE = re.compile(r"[^\n]*?(?=\r?\n|\Z)")
LINE_END_RE = re.compile(r"\r?\n")
COMMENT_RE = re.compile(r"\s*#")


@attrs.define(frozen=True)
class EnvVariable:
    """
    An environment variable assignment (``NAME=VALUE``) in a crontab.

    :var str name: name of the variable
    :var str value: value assigned to the variable
    """

    name: str = attrs.field(validator=[instance_of(str), matches_re(r"[^\s=]+")])
    value: str = attrs.field(validator=instance_of(str))

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


@attrs.define(frozen=True)
class CommandEntry:
    """
    A scheduled command in a crontab.

    :var CronSchedule schedule: when the command is run
    :var str command: the rest of the line, verbatim
    """

    schedule: CronSchedule = attrs.field(validator=instance_of(CronSchedule))
    command: str = attrs.field(validator=instance_of(str), default="")

    def __str__(self) -> str:
        return f"{self.schedule} {self.command}"


CrontabEntry = Union[EnvVariable, CommandEntry]


@attrs.define(frozen=True)
class Crontab:
    """
    The entries of a crontab document in the order they appear in.

    Comment lines and blank lines have no counterpart here.
    """

    entries: tuple[CrontabEntry, ...] = attrs.field(converter=tuple, factory=tuple)

    def __iter__(self) -> Iterator[CrontabEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> CrontabEntry:
        return self.entries[index]

    def __str__(self) -> str:
        return "\n".join(str(entry) for entry in self.entries)


def env_variable(scanner: Scanner) -> EnvVariable:
    name = scanner.expect(ENV_NAME_RE, "a variable name").group()
    scanner.skip_horizontal_space()
    scanner.expect_char("=")
    scanner.skip_horizontal_space()
    value = scanner.expect(ENV_VALUE_RE, "a variable value").group()
    scanner.skip_horizontal_space()
    if not scanner.at_line_end:
        raise scanner.fail("expected end of line")

    return EnvVariable(name, value)


def command_entry(scanner: Scanner) -> CommandEntry:
    schedule = cron_schedule_loose(scanner)
    scanner.expect(SEPARATOR_RE, "whitespace after the schedule")
    command = scanner.expect(COMMAND_RE, "a command").group()
    return CommandEntry(schedule, command)


def crontab_entry(scanner: Scanner) -> CrontabEntry:
    """
    Parse a single crontab line at the current position of ``scanner``.

    Leading whitespace is skipped. The line is an environment variable
    assignment if it looks like one, and a scheduled command otherwise. The
    scanner is left at the end of the line.

    """
    scanner.skip_horizontal_space()
    return scanner.choice(env_variable, command_entry)


def crontab(scanner: Scanner) -> Crontab:
    """
    Parse a crontab document from the current position of ``scanner`` to the end
    of the input.

    :raises CrontabLineError: if any non-comment, non-blank line is not a valid
        entry
    """
    entries: list[CrontabEntry] = []
    lines = scanner.remaining.split("\n")
    for line_number, line in enumerate(lines, 1):
        # CRLF line endings
        if line.endswith("\r"):
            line = line[:-1]

        if COMMENT_RE.match(line):
            logger.debug("Skipping comment on line %d", line_number)
        elif line.strip():
            line_scanner = Scanner(line)
            try:
                entries.append(crontab_entry(line_scanner))
            except CronParseError as exc:
                raise CrontabLineError(line_number, line, str(exc)) from exc

    scanner.pos = len(scanner.text)
    logger.debug("Parsed %d crontab entries", len(entries))
    return Crontab(entries)
