"""Data models and constants for the triangle mosaic generator."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import numpy as np

# Command-line defaults
DEFAULT_N_VERTICAL = 30
DEFAULT_TRIANGLE_HEIGHT = 0.1  # canvas units
DEFAULT_OUTPUT_PATH = "out.svg"

# Hairline stroke drawn around every triangle so neighbours overlap slightly
# and no seams show when the document is rasterized.
STROKE_WIDTH = 0.001  # canvas units

# Configuration file path
CONFIG_FILE = Path.home() / ".trimosaic_config.json"


class RenderStyle(Enum):
    """How each triangle is painted."""

    FILL = "fill"  # Sampled colour fill
    OUTLINE = "outline"  # Transparent fill, solid stroke, no sampling


@dataclass
class MosaicConfig:
    """User-facing settings for one mosaic run."""

    # Grid
    n_vertical: int = DEFAULT_N_VERTICAL  # rows of triangles
    triangle_height: float = DEFAULT_TRIANGLE_HEIGHT  # canvas units per row

    # Output
    output_path: str = DEFAULT_OUTPUT_PATH
    render_style: RenderStyle = RenderStyle.FILL
    stroke_width: float = STROKE_WIDTH
    outline_color: str = "black"  # stroke colour in OUTLINE style


# --- Pipeline Models ---


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded image as a flat, row-major run of RGB bytes.

    Pixel (x, y) lives at ``data[(x + y * width) * 3 : ... + 3]``.
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self):
        expected = self.width * self.height * 3
        if len(self.data) != expected:
            raise ValueError(
                f"Pixel data has {len(self.data)} bytes, "
                f"expected {expected} for {self.width}x{self.height} RGB"
            )

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        """Build a buffer from a (height, width, 3) uint8 array."""
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected a (H, W, 3) array, got shape {array.shape}")
        height, width = array.shape[:2]
        data = np.ascontiguousarray(array, dtype=np.uint8).tobytes()
        return cls(width=int(width), height=int(height), data=data)

    @property
    def is_empty(self) -> bool:
        return len(self.data) == 0


@dataclass(frozen=True)
class GridParameters:
    """Dimensions of the triangle grid laid over an image."""

    n_vertical: int  # rows
    n_horizontal: int  # columns (derived from the image aspect ratio)
    triangle_height: float  # canvas units
    half_base_width: float  # canvas units, also the column stride

    @property
    def canvas_size(self) -> "tuple[float, float]":
        """(width, height) of the drawing in canvas units."""
        return (
            self.n_horizontal * self.half_base_width,
            self.n_vertical * self.triangle_height,
        )

    @property
    def record_count(self) -> int:
        """Number of triangles a full walk produces.

        Columns run over ``[0, n_horizontal]`` inclusive so the last,
        partial column at the right edge is covered too.
        """
        return self.n_vertical * (self.n_horizontal + 1)


@dataclass(frozen=True)
class TriangleRecord:
    """One grid cell ready for serialization.

    ``color`` is ``None`` when the mosaic is drawn as outlines only.
    """

    row: int
    col: int
    x: float  # cell origin in canvas units
    y: float
    points_up: bool
    vertices: "tuple[tuple[float, float], tuple[float, float], tuple[float, float]]"
    sample_x: int  # source pixel the colour was taken from
    sample_y: int
    color: "tuple[int, int, int] | None" = None


@dataclass
class MosaicDocument:
    """Ordered triangle records plus the canvas they are drawn on."""

    width: float  # canvas units
    height: float
    records: "list[TriangleRecord]" = field(default_factory=list)

    def append(self, record: TriangleRecord) -> None:
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def up_count(self) -> int:
        return sum(1 for record in self.records if record.points_up)

    @property
    def down_count(self) -> int:
        return len(self.records) - self.up_count


@dataclass
class ProcessedMosaic:
    """Result of the mosaic pipeline."""

    document: MosaicDocument
    params: GridParameters
    output_path: Path

    # Original image dimensions (pixels)
    original_width: int = 0
    original_height: int = 0

    # Statistics
    triangle_count: int = 0
    up_count: int = 0
    down_count: int = 0
