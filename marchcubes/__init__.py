"""Marching Cubes isosurface extraction from regular volume grids.

Modules: ``marching`` (the mesher and its mesh types) and ``tables``
(lookup tables and configuration helpers).
"""

__version__ = "0.1.1"
__all__ = ["marching", "tables"]