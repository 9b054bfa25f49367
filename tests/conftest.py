from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


def fixture_command(*args) -> list:
    return [sys.executable, "-m", "process_fixture", *args]


def _run(*args, input: bytes | None = None, timeout: float = 30, **kwargs):
    if input is None:
        kwargs.setdefault("stdin", subprocess.DEVNULL)
    # pipe whichever stream the caller did not redirect
    kwargs.setdefault("stdout", subprocess.PIPE)
    kwargs.setdefault("stderr", subprocess.PIPE)
    return subprocess.run(
        fixture_command(*args),
        cwd=ROOT,
        input=input,
        timeout=timeout,
        **kwargs,
    )


@pytest.fixture
def run_fixture():
    """Launch the fixture as a real child process and capture its bytes."""
    return _run
