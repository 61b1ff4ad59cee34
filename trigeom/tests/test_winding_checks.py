"""Winding checks are off by default and enabled per run via the run context."""
import contextvars

import pytest

from trigeom.core import run_context
from trigeom.core.errors import TrigeomError, WindingOrderError
from trigeom.core.predicates import check_winding, inside_circumcircle, point_in_triangle

CCW = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
CW = [CCW[0], CCW[2], CCW[1]]


def test_disabled_by_default():
    assert not run_context.get('check_winding', False)
    assert point_in_triangle((0.25, 0.25), *CW) is False
    assert inside_circumcircle((0.5, 0.5), *CW) is False


def test_enabled_block_raises_for_clockwise():
    with run_context.winding_checks():
        with pytest.raises(WindingOrderError):
            point_in_triangle((0.25, 0.25), *CW)
        with pytest.raises(WindingOrderError):
            inside_circumcircle((0.5, 0.5), *CW)
        assert point_in_triangle((0.25, 0.25), *CCW)
        assert inside_circumcircle((0.5, 0.5), *CCW)
    # flag is restored on exit
    assert point_in_triangle((0.25, 0.25), *CW) is False


def test_disable_inside_enabled_block():
    with run_context.winding_checks():
        with run_context.winding_checks(False):
            assert point_in_triangle((0.25, 0.25), *CW) is False
        with pytest.raises(WindingOrderError):
            point_in_triangle((0.25, 0.25), *CW)


def test_check_winding_rejects_collinear():
    with pytest.raises(WindingOrderError) as exc:
        check_winding((0, 0), (1, 1), (2, 2))
    assert exc.value.orientation == 0.0
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, TrigeomError)
    check_winding(*CCW)


def test_context_values_round_trip():
    def body():
        run_context.set_context({'label': 'unit-test'})
        assert run_context.get('label') == 'unit-test'
        assert run_context.get_context()['label'] == 'unit-test'
        assert run_context.get('missing', 3) == 3

    contextvars.copy_context().run(body)
    assert run_context.get('label') is None
