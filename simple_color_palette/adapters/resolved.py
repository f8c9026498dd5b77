"""Resolved colours: plain (linear_red, linear_green, linear_blue, opacity) floats.

This is the lossless bridge. Toolkits that hand out resolved linear values
(extended range included) map onto it directly; nothing is clamped except
opacity, which Components always clamps.
"""

from __future__ import annotations

from simple_color_palette.core.color import Color
from simple_color_palette.core.components import Components

ResolvedColor = tuple[float, float, float, float]


class ResolvedAdapter:
    def to_core(self, native: ResolvedColor, name: str | None = None) -> Color:
        red, green, blue, opacity = native
        return Color(Components(red, green, blue, opacity), name=name)

    def from_core(self, color: Color) -> ResolvedColor:
        lin = color.linear_components
        return (lin.red, lin.green, lin.blue, lin.opacity)
