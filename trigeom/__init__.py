"""Public package API for the trigeom predicate library.

This facade provides a stable, flat import surface on top of the internal
implementation package ``trigeom.core``.

Example
-------
    from trigeom import to_the_left, inside_circumcircle, circumcircle_center

The deeper modules (``trigeom.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:  # Python 3.8+ runtime version export
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("trigeom")  # populated when installed
except _NotFound:  # pragma: no cover - source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('trigeom.core.constants')
_vec = _imp('trigeom.core.vector')
_pred = _imp('trigeom.core.predicates')
_geom = _imp('trigeom.core.geometry')
_vops = _imp('trigeom.core.vectorized_ops')
_samp = _imp('trigeom.core.sampling')
_conf = _imp('trigeom.core.config')
_errors = _imp('trigeom.core.errors')
_ctx = _imp('trigeom.core.run_context')
_log = _imp('trigeom.core.logging_utils')

# Vector helpers
as_point = _vec.as_point
is_real = _vec.is_real
to_2d = _vec.to_2d
to_3d = _vec.to_3d
cross = _vec.cross

# Predicates
are_coincident = _pred.are_coincident
to_the_left = _pred.to_the_left
to_the_right = _pred.to_the_right
point_in_triangle = _pred.point_in_triangle
inside_circumcircle = _pred.inside_circumcircle
is_ccw = _pred.is_ccw
check_winding = _pred.check_winding
winding_checks = _ctx.winding_checks

# Constructions
LineIntersection = _geom.LineIntersection
rotate_right_angle = _geom.rotate_right_angle
line_line_intersection = _geom.line_line_intersection
line_line_intersection_point = _geom.line_line_intersection_point
find_line_intersection = _geom.find_line_intersection
circumcircle_center = _geom.circumcircle_center
circumcircle_radius = _geom.circumcircle_radius
triangle_centroid = _geom.triangle_centroid
area = _geom.area

# Sampling
SeedCounter = _samp.SeedCounter
SiteSampler = _samp.SiteSampler
SamplingConfig = _conf.SamplingConfig
normalized_random = _samp.normalized_random
random_site = _samp.random_site
reset_seed = _samp.reset_seed

# Errors and logging
TrigeomError = _errors.TrigeomError
WindingOrderError = _errors.WindingOrderError
get_logger = _log.get_logger
configure_logging = _log.configure_logging

# Tolerances
EPS_COINCIDENT = _const.EPS_COINCIDENT
EPS_INCIRCLE = _const.EPS_INCIRCLE
EPS_PARALLEL = _const.EPS_PARALLEL

# Namespace submodules for exploratory users
constants = _const
vector = _vec
predicates = _pred
geometry = _geom
vectorized_ops = _vops
sampling = _samp

__all__ = [
    '__version__',
    # vector helpers
    'as_point', 'is_real', 'to_2d', 'to_3d', 'cross',
    # predicates
    'are_coincident', 'to_the_left', 'to_the_right', 'point_in_triangle',
    'inside_circumcircle', 'is_ccw', 'check_winding', 'winding_checks',
    # constructions
    'LineIntersection', 'rotate_right_angle', 'line_line_intersection',
    'line_line_intersection_point', 'find_line_intersection',
    'circumcircle_center', 'circumcircle_radius', 'triangle_centroid', 'area',
    # sampling
    'SeedCounter', 'SiteSampler', 'SamplingConfig', 'normalized_random',
    'random_site', 'reset_seed',
    # errors / logging
    'TrigeomError', 'WindingOrderError', 'get_logger', 'configure_logging',
    # tolerances
    'EPS_COINCIDENT', 'EPS_INCIRCLE', 'EPS_PARALLEL',
    # submodules
    'constants', 'vector', 'predicates', 'geometry', 'vectorized_ops', 'sampling',
]
