"""Verb dispatcher for the process fixture.

Usage: process-fixture [verb] [arg]

The first argument picks exactly one behavior; anything unrecognised (or no
argument at all) exits 0 without side effects:

    segfault                 die with SIGSEGV
    abort                    die with SIGABRT
    timeout                  sleep TIMEOUT_SECONDS, then exit 0
    usersig                  no-op
    rc N                     exit with status N mod 256
    stderr MSG               write "MSG\\n" to stderr
    stdouterr MSG            write "OUT: MSG\\n" to stdout, then "ERR: MSG\\n" to stderr
    read_line_from_stdin     copy one line from stdin to stdout

rc, stderr and stdouterr abort with SIGABRT when MSG/N is missing.
"""
from __future__ import annotations

import re
import sys
import time

from process_fixture import crash, streams

TIMEOUT_SECONDS = 3

# atoi(): optional C whitespace, optional sign, then as many digits as follow
_LEADING_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_exit_code(text: str) -> int:
    """Parse ``text`` like C ``atoi`` and truncate it to an exit status."""
    match = _LEADING_INT_RE.match(text)
    if match is None:
        return 0
    return int(match.group(1)) % 256


def _require_one_argument(verb: str, args: list[str]) -> str:
    if len(args) != 2:
        crash.precondition_failed(
            f"{verb!r} takes exactly one argument, got {len(args) - 1}"
        )
    return args[1]


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0

    verb = args[0]
    if verb == "segfault":
        crash.segfault()
    elif verb == "abort":
        crash.abort()
    elif verb == "timeout":
        time.sleep(TIMEOUT_SECONDS)
    elif verb == "usersig":
        # Reserved. Nothing is known about what it was meant to do, so it
        # deliberately does not raise SIGUSR1 or anything else.
        pass
    elif verb == "rc":
        return parse_exit_code(_require_one_argument(verb, args))
    elif verb == "stderr":
        streams.write_stderr(_require_one_argument(verb, args))
    elif verb == "stdouterr":
        streams.write_stdout_and_stderr(_require_one_argument(verb, args))
    elif verb == "read_line_from_stdin":
        streams.echo_line_from_stdin()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
