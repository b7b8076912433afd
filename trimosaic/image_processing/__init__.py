"""Image processing pipeline for image-to-mosaic conversion.

Organized into modular components:
- processor: Main MosaicProcessor orchestrator
- decoding: PNG decoding and RGB normalization
- tessellation: Triangle grid sizing and traversal
- svg_writer: SVG path generation and output
- utils: Pixel sampling and colour helpers
"""

from .processor import MosaicProcessor
from .svg_writer import mosaic_to_svg

__all__ = ["MosaicProcessor", "mosaic_to_svg"]
