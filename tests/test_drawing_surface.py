"""Tests for the density-aware signature buffer."""

import pytest

from signpad.core.drawing_surface import DrawingSurface

from conftest import pixel


class TestResize:
    """Buffer size follows CSS size times density ratio."""

    @pytest.mark.parametrize("density, ratio", [
        (1.0, 1.0),
        (2.0, 2.0),
        (3.0, 3.0),
        (1.5, 1.5),
        (0.5, 1.0),   # never below native resolution
        (0, 1.0),
        (None, 1.0),
    ])
    def test_density_invariant(self, density, ratio):
        surface = DrawingSurface()
        buffer_size = surface.resize(300, 120, density)

        assert surface.density_ratio == ratio
        assert surface.buffer_width == 300 * ratio
        assert surface.buffer_height == 120 * ratio
        assert buffer_size == (surface.buffer_width, surface.buffer_height)
        assert surface.surface.get_width() == surface.buffer_width
        assert surface.surface.get_height() == surface.buffer_height

    def test_fractional_buffer_size_truncates(self):
        surface = DrawingSurface()

        assert surface.resize(301, 121, 1.5) == (451, 181)

    def test_context_scaled_by_density(self):
        surface = DrawingSurface()
        surface.resize(300, 120, 2.0)

        # One CSS pixel in user space is two device pixels
        assert surface.context.user_to_device(10, 5) == pytest.approx((20, 10))

    def test_resize_discards_content(self):
        surface = DrawingSurface()
        surface.resize(100, 50, 2.0)
        surface.context.rectangle(10, 10, 20, 20)
        surface.context.fill()
        assert surface.has_ink()

        surface.resize(100, 50, 2.0)
        assert not surface.has_ink()

    def test_reinitialize_keeps_sizes(self):
        surface = DrawingSurface()
        surface.resize(200, 80, 2.0)
        surface.context.rectangle(0, 0, 10, 10)
        surface.context.fill()

        assert surface.reinitialize() == (400, 160)
        assert surface.css_width == 200
        assert not surface.has_ink()


class TestContent:

    def test_new_surface_is_not_laid_out(self):
        surface = DrawingSurface()

        assert not surface.is_laid_out
        assert not surface.has_ink()

    def test_drawing_lands_at_device_pixels(self):
        surface = DrawingSurface()
        surface.resize(100, 50, 2.0)
        surface.context.set_source_rgba(0, 0, 0, 1)
        surface.context.rectangle(10, 10, 5, 5)
        surface.context.fill()

        assert pixel(surface.surface, 24, 24)[3] == 255
        assert pixel(surface.surface, 8, 8)[3] == 0

    def test_data_url_is_png(self):
        surface = DrawingSurface()
        surface.resize(20, 10, 1.0)

        assert surface.to_png_bytes().startswith(b"\x89PNG")
        assert surface.to_data_url().startswith("data:image/png;base64,")
