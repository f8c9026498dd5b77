"""A single palette colour.

The stored value is `linear_components` (extended linear sRGB). The
`components` property is the non-linear sRGB view most callers want: reading
it converts from linear, assigning it converts back and replaces the stored
linear value. Nothing else is stored, so the two can never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from simple_color_palette.core.components import Components
from simple_color_palette.core.transfer import linear_to_srgb, srgb_to_linear


@dataclass
class Color:
    """A colour with an optional name, stored as linear components.

    Mutable and therefore unhashable; use `tuple(color.linear_components)`
    and the name as a key when a set or dict of colours is needed.
    """

    linear_components: Components
    name: str | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        # Components is mutable, so keep a private copy
        if name == 'linear_components':
            value = value.copy()
        super().__setattr__(name, value)

    @classmethod
    def from_components(cls, components: Components, name: str | None = None) -> Color:
        """Create a colour from non-linear (display) sRGB components."""
        return cls(_to_linear(components), name=name)

    @property
    def components(self) -> Components:
        """Non-linear sRGB components, rounded like any new Components.

        Each read returns a new object, so `color.components.red = 0.5` changes
        nothing. Assign a whole value instead: `color.components = c`.
        """
        lin = self.linear_components
        return Components(
            red=linear_to_srgb(lin.red),
            green=linear_to_srgb(lin.green),
            blue=linear_to_srgb(lin.blue),
            opacity=lin.opacity,
        )

    @components.setter
    def components(self, value: Components) -> None:
        self.linear_components = _to_linear(value)

    def copy(self) -> Color:
        return Color(self.linear_components, name=self.name)


def _to_linear(components: Components) -> Components:
    return Components(
        red=srgb_to_linear(components.red),
        green=srgb_to_linear(components.green),
        blue=srgb_to_linear(components.blue),
        opacity=components.opacity,
    )
