"""Tests for SVG path generation and output."""

import math
import xml.etree.ElementTree as ET

import pytest
import svg

from trimosaic.errors import DocumentWriteError
from trimosaic.image_processing.svg_writer import (
    mosaic_to_svg,
    triangle_path,
    triangle_to_element,
    write_svg,
)
from trimosaic.image_processing.tessellation import (
    build_document,
    compute_grid_parameters,
)
from trimosaic.models import MosaicConfig, RenderStyle


def _paths(svg_text: str) -> "list[ET.Element]":
    root = ET.fromstring(svg_text)
    return [el for el in root.iter() if el.tag.rsplit("}", 1)[-1] == "path"]


def test_up_triangle_path():
    d = triangle_path(0.0, 0.0, 0.5, 1.0, True)
    assert [type(op) for op in d] == [
        svg.MoveTo,
        svg.LineToRel,
        svg.LineToRel,
        svg.ClosePath,
    ]
    assert (d[0].x, d[0].y) == (0.0, 0.0)
    assert (d[1].dx, d[1].dy) == (-0.5, 1.0)
    assert (d[2].dx, d[2].dy) == (1.0, 0)


def test_down_triangle_path_starts_at_bottom_apex():
    d = triangle_path(2.0, 3.0, 0.5, 1.0, False)
    assert (d[0].x, d[0].y) == (2.0, 4.0)
    assert (d[1].dx, d[1].dy) == (-0.5, -1.0)
    assert (d[2].dx, d[2].dy) == (1.0, 0)
    assert isinstance(d[3], svg.ClosePath)


def test_filled_element(quad_buffer):
    params = compute_grid_parameters(2, 2, 2, 1.0)
    record = build_document(quad_buffer, params).records[0]
    element = triangle_to_element(record, params, MosaicConfig())
    assert element.fill == "#FF0000"
    assert element.stroke == "#FF0000"
    assert element.stroke_width == 0.001


def test_outline_element(quad_buffer):
    params = compute_grid_parameters(2, 2, 2, 1.0)
    record = build_document(quad_buffer, params, RenderStyle.OUTLINE).records[0]
    config = MosaicConfig(outline_color="navy", stroke_width=0.01)
    element = triangle_to_element(record, params, config)
    assert element.fill == "transparent"
    assert element.stroke == "navy"
    assert element.stroke_width == 0.01


def test_mosaic_to_svg_document(quad_buffer):
    params = compute_grid_parameters(2, 2, 2, 1.0)
    document = build_document(quad_buffer, params)
    text = mosaic_to_svg(document, params, MosaicConfig())

    root = ET.fromstring(text)
    view_box = [float(v) for v in root.attrib["viewBox"].split()]
    assert view_box == pytest.approx([0, 0, 3 / math.sqrt(3), 2.0])

    paths = _paths(text)
    assert len(paths) == 8
    assert [p.attrib["fill"] for p in paths] == [
        "#FF0000",
        "#FF0000",
        "#00FF00",
        "#00FF00",
        "#0000FF",
        "#0000FF",
        "#FFFFFF",
        "#FFFFFF",
    ]
    assert all(p.attrib["stroke-width"] == "0.001" for p in paths)


def test_write_svg(tmp_path):
    output = write_svg("<svg/>", tmp_path / "out.svg")
    assert output.read_text() == "<svg/>"


def test_write_svg_failure(tmp_path):
    with pytest.raises(DocumentWriteError):
        write_svg("<svg/>", tmp_path / "missing" / "out.svg")
