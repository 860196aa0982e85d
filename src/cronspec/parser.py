"""
Convenience functions for parsing complete pieces of text.

Each function either returns the parsed value or raises
:exc:`~cronspec.CronParseError` with a human readable message. The lower level
parsers they are built on are re-exported here for embedding the cron grammar in
other grammars.
"""

from __future__ import annotations

from ._crontab import LINE_END_RE, Crontab, CrontabEntry, crontab, crontab_entry
from ._scanner import Scanner
from ._schedule import CronSchedule, cron_schedule, cron_schedule_loose

__all__ = (
    "Scanner",
    "cron_schedule",
    "cron_schedule_loose",
    "crontab",
    "crontab_entry",
    "parse_cron_schedule",
    "parse_crontab",
    "parse_crontab_entry",
)


def parse_cron_schedule(text: str) -> CronSchedule:
    """
    Parse a cron schedule like ``*/2 * 3 * 4,5,6`` or ``@daily``.

    The text is matched case insensitively and must not contain anything after
    the schedule.

    :param text: the schedule text
    :raises CronParseError: if the text is not a valid schedule
    """
    return cron_schedule(Scanner(text.lower()))


def parse_crontab(text: str) -> Crontab:
    """
    Parse a whole crontab document.

    :param text: the contents of the crontab
    :raises CrontabLineError: if any of the lines is not a valid entry
    """
    return crontab(Scanner(text))


def parse_crontab_entry(text: str) -> CrontabEntry:
    """
    Parse a single crontab line, either ``NAME=VALUE`` or ``<schedule> <command>``.

    A single trailing line terminator (``\\n`` or ``\\r\\n``) is accepted, so lines
    read from a file can be passed as they are.

    :param text: the line to parse
    :raises CronParseError: if the line is not a valid entry, or if it is followed
        by more lines
    """
    scanner = Scanner(text)
    entry = crontab_entry(scanner)
    scanner.match(LINE_END_RE)
    scanner.end_of_input()
    return entry
