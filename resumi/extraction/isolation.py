"""Runs a blocking call in a child process that is terminated when it overruns."""

import multiprocessing
from collections.abc import Callable
from multiprocessing.connection import Connection
from typing import Any

_CONTEXT = multiprocessing.get_context("spawn")


def _run_child(conn: Connection, func: Callable[..., Any], args: tuple[Any, ...]) -> None:
    try:
        result = func(*args)
    except Exception as exc:
        conn.send((False, exc))
    else:
        conn.send((True, result))
    finally:
        conn.close()


def call_with_timeout(
    func: Callable[..., Any],
    *args: Any,
    timeout_seconds: float,
) -> Any:
    """Call ``func(*args)`` in a child process and return its result.

    ``func``, its arguments and its result must be picklable.

    Raises:
        TimeoutError: the call did not finish in time. The child is terminated.
        ChildProcessError: the child exited without sending a result.
        Exception: whatever ``func`` raised, re-raised here.
    """
    reader, writer = _CONTEXT.Pipe(duplex=False)
    process = _CONTEXT.Process(
        target=_run_child,
        args=(writer, func, args),
        name="resumi-isolated-call",
        daemon=True,
    )
    process.start()
    writer.close()
    try:
        if not reader.poll(timeout_seconds):
            raise TimeoutError(f"Call did not finish within {timeout_seconds}s")
        try:
            succeeded, value = reader.recv()
        except EOFError as exc:
            raise ChildProcessError("Worker process exited without a result") from exc
    finally:
        reader.close()
        if process.is_alive():
            process.terminate()
        process.join()

    if not succeeded:
        raise value
    return value
