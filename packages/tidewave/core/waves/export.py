"""Standalone SVG export.

Regenerates the wave from its config, so the same options always produce
the same document.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from pydantic import BaseModel, ConfigDict

from tidewave.core.utils.logging import log_performance
from tidewave.core.waves.grammar import format_number
from tidewave.core.waves.models import (
    DEFAULT_AMPLITUDE,
    DEFAULT_FREQUENCY,
    DEFAULT_VIEWBOX_WIDTH,
    DEFAULT_WAVE_HEIGHT,
    GeometryConfig,
    PatternName,
)
from tidewave.core.waves.patterns import generate_path

SHADOW_FILTER_ID = "wave-shadow"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class StrokeStyle(BaseModel):
    """Outline drawn along the wave."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: str = "rgba(0, 0, 0, 0.3)"
    width: float = 2.0
    dash_array: str | None = None
    fill: bool = True


class ShadowStyle(BaseModel):
    """Drop shadow under the wave."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: str = "rgba(0, 0, 0, 0.1)"
    blur: float = 10.0
    offset_x: float = 0.0
    offset_y: float = 4.0


class ExportSVGOptions(BaseModel):
    """Inputs for :func:`export_wave_as_svg`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: PatternName | str = PatternName.SMOOTH
    width: float = DEFAULT_VIEWBOX_WIDTH
    height: float = DEFAULT_WAVE_HEIGHT
    amplitude: float = DEFAULT_AMPLITUDE
    frequency: float = DEFAULT_FREQUENCY
    seed: int | None = None
    fill_color: str = "#6c5ce7"
    background_color: str = "#ffffff"
    stroke: StrokeStyle | None = None
    shadow: ShadowStyle | None = None


def _append_shadow_defs(svg: ET.Element, shadow: ShadowStyle) -> None:
    """Add the drop-shadow filter the wave path refers to."""
    f = format_number
    defs = ET.SubElement(svg, "defs")
    shadow_filter = ET.SubElement(
        defs,
        "filter",
        {"id": SHADOW_FILTER_ID, "x": "-20%", "y": "-20%", "width": "140%", "height": "140%"},
    )
    ET.SubElement(
        shadow_filter,
        "feDropShadow",
        {
            "dx": f(shadow.offset_x),
            "dy": f(shadow.offset_y),
            "stdDeviation": f(shadow.blur / 2),
            "flood-color": shadow.color,
        },
    )


def _path_attributes(opts: ExportSVGOptions, path: str) -> dict[str, str]:
    attrs = {"d": path, "fill": opts.fill_color}
    if opts.stroke is not None:
        attrs["stroke"] = opts.stroke.color
        attrs["stroke-width"] = format_number(opts.stroke.width)
        if opts.stroke.dash_array:
            attrs["stroke-dasharray"] = opts.stroke.dash_array
        if not opts.stroke.fill:
            attrs["fill"] = "none"
    if opts.shadow is not None:
        attrs["filter"] = f"url(#{SHADOW_FILTER_ID})"
    return attrs


def _build_svg(opts: ExportSVGOptions, path: str) -> ET.Element:
    """Build the SVG element tree for a generated path."""
    width = format_number(opts.width)
    height = format_number(opts.height)
    svg = ET.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "viewBox": f"0 0 {width} {height}",
            "preserveAspectRatio": "none",
        },
    )

    if opts.shadow is not None:
        _append_shadow_defs(svg, opts.shadow)

    ET.SubElement(svg, "rect", {"width": width, "height": height, "fill": opts.background_color})
    ET.SubElement(svg, "path", _path_attributes(opts, path))
    return svg


@log_performance
def export_wave_as_svg(options: ExportSVGOptions | None = None) -> str:
    """Render a wave as a self-contained SVG document.

    Args:
        options: Export options; defaults to ExportSVGOptions().

    Returns:
        Indented SVG markup with a background rect and the wave path.
    """
    opts = options or ExportSVGOptions()
    path = generate_path(
        opts.pattern,
        GeometryConfig(
            width=opts.width,
            height=opts.height,
            amplitude=opts.amplitude,
            frequency=opts.frequency,
            seed=opts.seed,
        ),
    )

    svg = _build_svg(opts, path)
    ET.indent(svg, space="  ", level=0)
    return ET.tostring(svg, encoding="unicode")
