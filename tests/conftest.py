"""
Shared test fixtures for signpad tests.

Provides a laid-out signature pad, a form, a temporary submission store
and small helpers for building input events and reading pixels.
"""

import pytest

from signpad.core.config import SignpadConfig
from signpad.core.document import DocumentRenderer, PageLayout, create_signature_pad
from signpad.core.form import ApplicationForm
from signpad.core.stroke import EventKind, InputEvent, PointerType, TouchPoint
from signpad.core.submissions import SubmissionStore


@pytest.fixture
def config(tmp_path) -> SignpadConfig:
    """Default config writing into a temporary data directory."""
    return SignpadConfig(data_dir=tmp_path / "data")


@pytest.fixture
def layout() -> PageLayout:
    return PageLayout()


@pytest.fixture
def pad(config, layout):
    """A signature pad laid out on a wide viewport at density 1."""
    pad = create_signature_pad(config, layout)
    pad.on_viewport_resize(1200, 1.0)
    return pad


@pytest.fixture
def form() -> ApplicationForm:
    return ApplicationForm(name="Kim", affiliation="Student Council", privacy_agree=True,
                           date="2024년 3월 5일")


@pytest.fixture
def store(config) -> SubmissionStore:
    return SubmissionStore(str(config.store_path))


@pytest.fixture
def renderer(form, pad, layout) -> DocumentRenderer:
    return DocumentRenderer(form, pad, layout)


def mouse(kind: EventKind, x: float, y: float) -> InputEvent:
    """A mouse event at viewport position (x, y)."""
    return InputEvent(x, y, kind, pointer_type=PointerType.MOUSE)


def touch(kind: EventKind, x: float, y: float) -> InputEvent:
    """A touch event whose first contact is at (x, y)."""
    return InputEvent(0.0, 0.0, kind, pointer_type=PointerType.TOUCH, touches=[TouchPoint(x, y)])


def pixel(surface, x: int, y: int):
    """Return (r, g, b, a) of an ARGB32 image surface pixel."""
    surface.flush()
    data = surface.get_data()
    offset = y * surface.get_stride() + x * 4
    # Native-endian ARGB32, little-endian byte order is B, G, R, A
    b, g, r, a = data[offset], data[offset + 1], data[offset + 2], data[offset + 3]
    return r, g, b, a
