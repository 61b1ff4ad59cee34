"""Package logger setup.

All trigeom modules log through children of the ``trigeom`` logger, which
writes to stdout and never propagates to the process root logger.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT_NAME = 'trigeom'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _package_root() -> logging.Logger:
    root = logging.getLogger(_ROOT_NAME)
    if all(isinstance(h, logging.NullHandler) for h in root.handlers):
        # replace the import-time NullHandler with a real stream
        root.handlers = []
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Set the level of the whole ``trigeom`` logger family.

    Unknown level names fall back to INFO.
    """
    _package_root().setLevel(_level(level))


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Logger ``name`` under the ``trigeom`` namespace (prefixed if needed).

    Without ``level`` the logger inherits from the family root.
    """
    _package_root()
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(logging.NOTSET if level is None else _level(level))
    return log


__all__ = ['get_logger', 'configure_logging']
