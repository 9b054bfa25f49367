"""Stream verbs.

Everything is written to the binary layer of the standard streams so the
harness gets back exactly the bytes it put on the command line or stdin.
A stream whose file descriptor was closed before startup is None in Python;
writes to it are dropped, as fprintf() to a closed descriptor would be.
"""
import os
import sys
from typing import Optional, TextIO


def _write(stream: Optional[TextIO], data: bytes) -> None:
    if stream is None:
        return
    stream.buffer.write(data)
    stream.flush()


def write_stderr(message: str) -> None:
    _write(sys.stderr, os.fsencode(message) + b"\n")


def write_stdout_and_stderr(message: str) -> None:
    payload = os.fsencode(message)
    # stdout must reach the pipe before stderr is touched
    _write(sys.stdout, b"OUT: " + payload + b"\n")
    _write(sys.stderr, b"ERR: " + payload + b"\n")


def echo_line_from_stdin() -> None:
    """Copy one line, newline included, from stdin to stdout.

    At end of input the partial line is copied as-is. With no stdin at all
    there is nothing to copy.
    """
    if sys.stdin is None:
        return
    line = sys.stdin.buffer.readline()
    _write(sys.stdout, line)
