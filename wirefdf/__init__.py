"""Wireframe viewer for .fdf height maps: parsing, projection, rasterisation and a pygame window."""

__version__ = "0.1.0"
__all__ = ["app", "geometry", "heightmap", "raster", "viewer"]