"""Abnormal-termination verbs.

Each function here ends the interpreter from inside native code or through a
signal, bypassing Python's own exception handling. A harness watching the
child sees a signal death, never a normal exit status.
"""
import ctypes
import os
import sys


def segfault() -> None:
    """Read one byte from address 1 via ctypes - SIGSEGV expected.

    Address 0 is no good: string_at() treats a NULL pointer as "allocate
    uninitialised bytes" and returns normally. Address 1 sits in the
    unmapped zero page, so the read faults inside memcpy.

    This is what a buggy C extension looks like from the outside: the fault
    happens in native code and the Python stack is lost unless faulthandler
    was enabled by whoever launched us.
    """
    ctypes.string_at(1, 1)


def abort() -> None:
    """SIGABRT via os.abort() - signal 6 expected."""
    os.abort()


def precondition_failed(message: str) -> None:
    """Report a misused verb and abort, as a failed C assert() would."""
    if sys.stderr is not None:
        print(f"[process_fixture] precondition failed: {message}", file=sys.stderr)
        sys.stderr.flush()
    os.abort()
