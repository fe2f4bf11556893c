"""Tests for fitting the fixed-width page into the viewport."""

import pytest

from signpad.core.stroke import DocumentSurface
from signpad.core.viewport import ViewportScaleController


@pytest.fixture
def controller():
    return ViewportScaleController(DocumentSurface(794, 1123), margin=20)


class TestApplyScale:
    """Scale factor and layout compensation."""

    def test_narrow_viewport_shrinks_page(self, controller):
        scale = controller.apply_scale(400, 794, 1123)

        assert scale == pytest.approx(380 / 794)
        assert scale == pytest.approx(0.4786, abs=1e-4)
        assert controller.document.current_scale == scale

    def test_narrow_viewport_compensates_flow_height(self, controller):
        scale = controller.apply_scale(400, 794, 1123)

        assert controller.document.margin_compensation == pytest.approx(1123 * (1 - scale))
        assert controller.document.layout_height == pytest.approx(1123 * scale)

    def test_wide_viewport_keeps_natural_size(self, controller):
        assert controller.apply_scale(1280, 794, 1123) == 1.0
        assert controller.document.margin_compensation == 0.0
        assert not controller.document.is_scaled

    def test_exact_fit_is_not_scaled(self, controller):
        # 814 - 20 margin leaves exactly the page width
        assert controller.apply_scale(814, 794, 1123) == 1.0

    def test_defaults_to_document_size(self, controller):
        assert controller.apply_scale(400) == pytest.approx(380 / 794)

    def test_growing_viewport_clears_transform(self, controller):
        controller.apply_scale(400)
        controller.apply_scale(1280)

        assert controller.document.current_scale == 1.0
        assert controller.document.margin_compensation == 0.0

    def test_very_narrow_viewport_follows_formula(self, controller):
        scale = controller.apply_scale(60)

        assert scale == pytest.approx(40 / 794)
        assert controller.document.margin_compensation == pytest.approx(1123 * (1 - 40 / 794))

    @pytest.mark.parametrize("width", [20, 5, 0])
    def test_no_room_keeps_previous_scale(self, controller, width):
        previous = controller.apply_scale(400)
        compensation = controller.document.margin_compensation

        assert controller.apply_scale(width) == previous
        assert controller.document.current_scale == previous
        assert controller.document.margin_compensation == compensation

    def test_no_room_before_any_layout_stays_unscaled(self, controller):
        assert controller.apply_scale(10) == 1.0

    def test_layout_height_uses_given_natural_height(self, controller):
        scale = controller.apply_scale(400, 794, 1000)

        assert controller.document.layout_height == pytest.approx(1000 * scale)

    def test_layout_height_resets_when_page_fits(self, controller):
        controller.apply_scale(400)
        controller.apply_scale(1280)

        assert controller.document.layout_height == 1123


class TestIdempotence:
    """Repeated application must not drift."""

    @pytest.mark.parametrize("width", [320, 400, 600, 813, 1024])
    def test_repeated_calls_give_same_scale(self, controller, width):
        first = controller.apply_scale(width)
        compensation = controller.document.margin_compensation

        for _ in range(5):
            assert controller.apply_scale(width) == first
        assert controller.document.margin_compensation == compensation

    def test_interleaved_widths_converge(self, controller):
        expected = controller.apply_scale(500)
        controller.apply_scale(350)
        controller.apply_scale(900)

        assert controller.apply_scale(500) == expected


def test_to_viewport_applies_current_scale(controller):
    controller.apply_scale(417)  # 397 / 794 = 0.5

    assert controller.to_viewport(100, 40) == pytest.approx((50, 20))
