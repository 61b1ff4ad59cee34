"""Internal implementation package for trigeom; import from ``trigeom`` instead."""
