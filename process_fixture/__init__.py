"""A child process that crashes, exits, sleeps or echoes on command.

Used by process-lifecycle tests to produce one known behavior per run.
"""
from process_fixture.cli import TIMEOUT_SECONDS, main, parse_exit_code

__all__ = ["TIMEOUT_SECONDS", "main", "parse_exit_code"]
