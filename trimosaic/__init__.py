"""Low-poly triangle mosaics from raster images."""

__version__ = "0.1.0"
