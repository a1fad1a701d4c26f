"""
Concurrent page slices.

A page that needs several independent queries hands them to
``gather_slices`` as ``{name: callable}``. Each callable runs on a worker
thread inside its own app context (and therefore its own database session).
Every slice settles as a ``SliceResult`` holding either the value or the
error message, so one failing query never hides the others and never turns
into an empty list.
"""

import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import structlog
from flask import current_app

from apoxer.exceptions import ApoxerException
from apoxer.metrics import record_slice
from apoxer.settings import get_setting

logger = structlog.get_logger("aggregation")


@dataclass
class SliceResult:
    name: str
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self):
        from apoxer.viewmodels import serialize

        if self.ok:
            return serialize(self.value)
        return {"error": self.error}


def _error_message(e: Exception) -> str:
    if isinstance(e, ApoxerException):
        return e.message
    return str(e) or e.__class__.__name__


def gather_slices(
    tasks: Dict[str, Callable[[], Any]],
    timeout: Optional[float] = None,
    max_workers: Optional[int] = None,
) -> Dict[str, SliceResult]:
    """
    Run every task concurrently and wait until all settle or ``timeout``
    seconds pass. Results keep the order of ``tasks``; a task still running
    at the deadline is reported as timed out.
    """
    if not tasks:
        return {}

    app = current_app._get_current_object()
    if timeout is None:
        timeout = float(get_setting("aggregation", "timeout_seconds", 5.0))
    if max_workers is None:
        max_workers = int(get_setting("aggregation", "max_workers", 8))

    def run(name, fn):
        start = time.time()
        with app.app_context():
            try:
                value = fn()
            except Exception as e:
                duration = time.time() - start
                record_slice(name, "error", duration)
                logger.warning("slice_failed", slice=name, error=str(e), duration_ms=round(duration * 1000, 1))
                return SliceResult(name=name, error=_error_message(e))
        record_slice(name, "ok", time.time() - start)
        return SliceResult(name=name, value=value)

    executor = ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(tasks))), thread_name_prefix="apoxer-slice")
    try:
        futures = {executor.submit(run, name, fn): name for name, fn in tasks.items()}
        done, not_done = wait(futures, timeout=timeout)

        results = {}
        for future in done:
            result = future.result()
            results[result.name] = result
        for future in not_done:
            name = futures[future]
            record_slice(name, "timeout", timeout)
            logger.warning("slice_timed_out", slice=name, timeout=timeout)
            results[name] = SliceResult(name=name, error=f"Timed out after {timeout:g} seconds")
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    return {name: results[name] for name in tasks}
