"""Tests for simple_color_palette.adapters (resolved, Pillow and numpy bridges)."""

import numpy as np
import pytest
from PIL import Image
from simple_color_palette.adapters import (
    PillowAdapter,
    ResolvedAdapter,
    palette_from_array,
    palette_from_named,
    palette_from_native,
    palette_to_array,
    palette_to_named,
    palette_to_native,
    render_swatch,
)
from simple_color_palette.core.color import Color
from simple_color_palette.core.components import Components
from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.report import presentation_name


def _palette() -> ColorPalette:
    return ColorPalette(
        [
            Color.from_components(Components(1, 0, 0), name='Red'),
            Color.from_components(Components(0, 1, 0, opacity=0.5), name='Green'),
        ],
        name='Test',
    )


class TestPresentationName:
    def test_opaque(self):
        assert presentation_name(Components(1, 0, 0)) == '255 0 0'

    def test_translucent(self):
        assert presentation_name(Components(0, 1, 0, 0.5)) == '0 255 0 50%'

    def test_rounds_channels(self):
        assert presentation_name(Components(0.5, 0.5, 0.5)) == '128 128 128'

    def test_transparent(self):
        assert presentation_name(Components(0, 0, 0, 0)) == '0 0 0 0%'


class TestResolvedAdapter:
    def test_to_core_is_linear(self):
        color = ResolvedAdapter().to_core((0.2, 0.3, 0.4, 0.5), name='Mix')
        assert color.linear_components == Components(0.2, 0.3, 0.4, 0.5)
        assert color.name == 'Mix'

    def test_from_core(self):
        color = Color(Components(0.2, 0.3, 0.4, 0.5))
        assert ResolvedAdapter().from_core(color) == (0.2, 0.3, 0.4, 0.5)

    def test_extended_range_is_lossless(self):
        adapter = ResolvedAdapter()
        assert adapter.from_core(adapter.to_core((1.5, -0.25, 0.0, 1.0))) == (1.5, -0.25, 0.0, 1.0)

    def test_srgb_view_matches(self):
        color = ResolvedAdapter().to_core((0.214, 0.214, 0.214, 0.8))
        assert color.components.red == pytest.approx(0.5, abs=1e-3)
        assert color.components.opacity == 0.8


class TestPillowAdapter:
    def test_to_core_tuple(self):
        color = PillowAdapter().to_core((255, 0, 0))
        assert color.linear_components == Components(1, 0, 0)

    def test_to_core_rgba_tuple(self):
        color = PillowAdapter().to_core((0, 255, 0, 0))
        assert color.linear_components == Components(0, 1, 0, 0)

    def test_to_core_colour_name(self):
        assert PillowAdapter().to_core('red', name='Red') == Color(Components(1, 0, 0), name='Red')

    def test_to_core_hex_with_alpha(self):
        color = PillowAdapter().to_core('#00ff0080')
        assert color.linear_components.opacity == pytest.approx(128 / 255, abs=1e-4)

    def test_from_core(self):
        assert PillowAdapter().from_core(Color(Components(1, 0, 0))) == (255, 0, 0, 255)

    def test_round_trip(self):
        adapter = PillowAdapter()
        for rgba in [(12, 34, 56, 255), (128, 128, 128, 128), (250, 5, 99, 0)]:
            assert adapter.from_core(adapter.to_core(rgba)) == rgba

    def test_from_core_clamps_extended_range(self):
        red, green, _blue, _alpha = PillowAdapter().from_core(Color(Components(2.0, -1.0, 0.5)))
        assert red == 255
        assert green == 0

    def test_bad_tuple(self):
        with pytest.raises(ValueError):
            PillowAdapter().to_core((1, 2))

    def test_bad_string(self):
        with pytest.raises(ValueError):
            PillowAdapter().to_core('not-a-colour')


class TestPaletteHelpers:
    def test_palette_from_native(self):
        palette = palette_from_native(PillowAdapter(), [(255, 0, 0), (0, 0, 255)], name='RB')
        assert palette.name == 'RB'
        assert [c.name for c in palette.colors] == [None, None]
        assert palette.colors[1].linear_components == Components(0, 0, 1)

    def test_palette_to_native(self):
        assert palette_to_native(PillowAdapter(), _palette()) == [(255, 0, 0, 255), (0, 255, 0, 128)]

    def test_palette_from_named_keeps_order(self):
        named = {'B': (0.0, 0.0, 1.0, 1.0), 'A': (1.0, 0.0, 0.0, 1.0)}
        palette = palette_from_named(ResolvedAdapter(), named, name='List')
        assert palette.name == 'List'
        assert [c.name for c in palette.colors] == ['B', 'A']

    def test_palette_to_named(self):
        named = palette_to_named(ResolvedAdapter(), _palette())
        assert list(named) == ['Red', 'Green']
        assert named['Red'] == (1.0, 0.0, 0.0, 1.0)

    def test_unnamed_colours_get_presentation_names(self):
        palette = ColorPalette(
            [
                Color.from_components(Components(1, 0, 0)),
                Color.from_components(Components(0, 1, 0, opacity=0.5)),
            ]
        )
        named = palette_to_named(PillowAdapter(), palette)
        assert list(named) == ['255 0 0', '0 255 0 50%']

    def test_empty(self):
        assert palette_to_named(ResolvedAdapter(), ColorPalette()) == {}
        assert palette_from_named(ResolvedAdapter(), {}, name='Empty').colors == []


class TestArrays:
    def test_to_array_linear(self):
        arr = palette_to_array(_palette())
        assert arr.shape == (2, 4)
        np.testing.assert_allclose(arr[1], [0, 1, 0, 0.5])

    def test_to_array_srgb(self):
        palette = ColorPalette([Color.from_components(Components(0.5, 0.5, 0.5, 0.25))])
        arr = palette_to_array(palette, linear=False)
        np.testing.assert_allclose(arr[0], [0.5, 0.5, 0.5, 0.25], atol=1e-4)

    def test_empty(self):
        assert palette_to_array(ColorPalette()).shape == (0, 4)

    def test_from_array_three_columns(self):
        palette = palette_from_array(np.array([[1.0, 0.0, 0.0]]), names=['Red'], name='P')
        assert palette.name == 'P'
        assert palette.colors[0] == Color(Components(1, 0, 0), name='Red')

    def test_from_array_srgb(self):
        palette = palette_from_array(np.array([[0.5, 0.5, 0.5, 1.0]]), linear=False)
        assert palette.colors[0].linear_components.red == pytest.approx(0.214, abs=1e-4)

    def test_array_round_trip(self):
        original = _palette()
        back = palette_from_array(palette_to_array(original), names=[c.name for c in original.colors])
        assert back.colors == original.colors

    def test_bad_shape(self):
        with pytest.raises(ValueError):
            palette_from_array(np.zeros((2, 5)))
        with pytest.raises(ValueError):
            palette_from_array(np.zeros(4))

    def test_names_length_mismatch(self):
        with pytest.raises(ValueError):
            palette_from_array(np.zeros((2, 3)), names=['only one'])


class TestRenderSwatch:
    def test_grid_layout(self):
        palette = ColorPalette(
            [
                Color.from_components(Components(1, 0, 0)),
                Color.from_components(Components(0, 1, 0)),
                Color.from_components(Components(0, 0, 1, 0.5)),
            ]
        )
        image = render_swatch(palette, size=4, columns=2)
        assert isinstance(image, Image.Image)
        assert image.mode == 'RGBA'
        assert image.size == (8, 8)
        assert image.getpixel((0, 0)) == (255, 0, 0, 255)
        assert image.getpixel((5, 1)) == (0, 255, 0, 255)
        assert image.getpixel((1, 5)) == (0, 0, 255, 128)
        assert image.getpixel((5, 5)) == (0, 0, 0, 0)

    def test_single_row_is_trimmed(self):
        image = render_swatch(_palette(), size=10, columns=8)
        assert image.size == (20, 10)

    def test_empty_palette(self):
        image = render_swatch(ColorPalette(), size=4)
        assert image.size == (4, 4)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            render_swatch(_palette(), size=0)
