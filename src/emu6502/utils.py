"""Utilities too unspecific for other modules."""

from typing import Never


def assert_never(arg: Never) -> Never:
    """Help the type checker perform exhaustiveness checks."""
    msg = f"Unhandled value: {arg!r}"
    raise AssertionError(msg)
