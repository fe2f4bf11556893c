"""Application configuration with environment overrides."""
import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

logger = logging.getLogger(__name__)


@dataclass
class SignpadConfig:
    """Tunable settings for the signature form."""
    # Horizontal breathing room kept around the page (10px each side)
    viewport_margin: float = 20.0
    # A4 at 96 DPI
    page_width: int = 794
    page_height: int = 1123
    stroke_width: float = 2.0
    stroke_color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)  # RGBA
    export_scale: int = 2
    data_dir: Path = field(default_factory=lambda: Path.home() / ".signpad")
    store_filename: str = "submissions.json"
    date_format: str = "{year}년 {month}월 {day}일"
    notify_delay_ms: int = 500

    @property
    def store_path(self) -> Path:
        return self.data_dir / self.store_filename


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def load_config() -> SignpadConfig:
    """Build the configuration, applying SIGNPAD_* environment overrides."""
    config = SignpadConfig()

    data_dir = os.getenv('SIGNPAD_DATA_DIR')
    if data_dir:
        config.data_dir = Path(data_dir).expanduser()

    config.viewport_margin = _env_number('SIGNPAD_VIEWPORT_MARGIN', config.viewport_margin, float)
    config.export_scale = _env_number('SIGNPAD_EXPORT_SCALE', config.export_scale, int)

    logger.debug(f"Loaded config: {config}")
    return config
