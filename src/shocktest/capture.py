"""Capture of text written to stdout or stderr.

`capture_stream` redirects one of the standard streams into a buffer while a
callable runs and always puts the original stream back, including when the
callable raises. The ``expect_*`` helpers compare the captured text and fail
through the usual `ExpectationFailed` channel.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from contextlib import redirect_stderr, redirect_stdout
from typing import Any, Literal, TypeAlias

from shocktest.errors import ExpectationFailed

StreamName: TypeAlias = Literal["stdout", "stderr"]

_REDIRECTORS = {"stdout": redirect_stdout, "stderr": redirect_stderr}


def capture_stream(
    name: StreamName, fn: Callable[..., Any], *args: Any, **kwargs: Any
) -> str:
    """Run ``fn(*args, **kwargs)`` and return what it wrote to stream `name`.

    Raises:
        ValueError: If `name` is not ``"stdout"`` or ``"stderr"``.
        Exception: Whatever `fn` raises, after the stream is restored.
    """
    try:
        redirector = _REDIRECTORS[name]
    except KeyError as e:
        raise ValueError(f"Unknown stream {name!r}; expected 'stdout' or 'stderr'") from e
    sink = io.StringIO()
    with redirector(sink):
        fn(*args, **kwargs)
    return sink.getvalue()


def expect_stream_eq(stream_name: str, actual: str, expected: str) -> None:
    """Expect captured text to equal `expected` exactly."""
    if actual != expected:
        raise ExpectationFailed(
            f'{stream_name} mismatch. Expected: "{expected}", got: "{actual}"'
        )


def expect_stdout(
    fn: Callable[..., Any], expected: str, *args: Any, **kwargs: Any
) -> None:
    """Expect ``fn(*args, **kwargs)`` to write exactly `expected` to stdout."""
    expect_stream_eq("stdout", capture_stream("stdout", fn, *args, **kwargs), expected)


def expect_stderr(
    fn: Callable[..., Any], expected: str, *args: Any, **kwargs: Any
) -> None:
    """Expect ``fn(*args, **kwargs)`` to write exactly `expected` to stderr."""
    expect_stream_eq("stderr", capture_stream("stderr", fn, *args, **kwargs), expected)
