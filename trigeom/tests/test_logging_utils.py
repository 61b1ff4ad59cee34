import logging

from trigeom.core.logging_utils import configure_logging, get_logger


def test_loggers_live_under_package_namespace():
    assert get_logger('trigeom.sampling').name == 'trigeom.sampling'
    assert get_logger('scratch').name == 'trigeom.scratch'


def test_root_is_isolated_with_stream_handler():
    get_logger('trigeom.geometry')
    root = logging.getLogger('trigeom')
    assert root.propagate is False
    assert any(not isinstance(h, logging.NullHandler) for h in root.handlers)


def test_configure_logging_sets_family_level():
    root = logging.getLogger('trigeom')
    previous = root.level
    try:
        configure_logging('DEBUG')
        assert root.level == logging.DEBUG
        assert get_logger('trigeom.predicates').getEffectiveLevel() == logging.DEBUG
        configure_logging('not-a-level')
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


def test_explicit_logger_level():
    log = get_logger('trigeom.explicit', 'warning')
    assert log.level == logging.WARNING
    assert get_logger('trigeom.explicit').level == logging.NOTSET
