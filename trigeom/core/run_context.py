"""Per-run context for trigeom callers using contextvars.

This isolates mutable flags so multiple runs can execute in parallel without
interfering with each other (e.g., in threads or async tasks). The only flag
read by the library today is ``check_winding``.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional
import contextvars

_CTX: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar('trigeom_run_ctx', default={})


def set_context(values: Dict[str, Any]) -> None:
    current = dict(_CTX.get())
    current.update(values)
    _CTX.set(current)


def get_context() -> Dict[str, Any]:
    return _CTX.get()


def get(key: str, default: Optional[Any] = None) -> Any:
    return _CTX.get().get(key, default)


@contextmanager
def winding_checks(enabled: bool = True) -> Iterator[None]:
    """Enable (or disable) CCW winding checks for the enclosed block."""
    current = dict(_CTX.get())
    current['check_winding'] = bool(enabled)
    token = _CTX.set(current)
    try:
        yield
    finally:
        _CTX.reset(token)


__all__ = ['set_context', 'get_context', 'get', 'winding_checks']
