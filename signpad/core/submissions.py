"""Local JSON store for submitted applications."""
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .config import SignpadConfig

logger = logging.getLogger(__name__)

STORE_KEY = "council_submissions"


class SubmissionStore:
    """Append-only list of submission records kept in a JSON file."""

    def __init__(self, store_path: Optional[str] = None):
        """Initialize the store.

        Args:
            store_path: Path to the JSON file. If None, uses default.
        """
        if store_path is None:
            store_path = str(SignpadConfig().store_path)

        self.store_path = Path(store_path)
        self.store_path.parent.mkdir(parents=True, exist_ok=True)

        self.submissions: List[Dict] = []
        self.load()

    def load(self):
        """Load submissions from disk."""
        if not self.store_path.exists():
            self.submissions = []
            return

        try:
            with open(self.store_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self.submissions = list(data.get(STORE_KEY, []))
            logger.info(f"Loaded {len(self.submissions)} submissions")
        except (OSError, ValueError, AttributeError) as e:
            logger.error(f"Error loading submissions from {self.store_path}: {e}")
            self.submissions = []

    def save(self) -> bool:
        """Write all submissions to disk.

        Returns:
            True if saved successfully.
        """
        try:
            data = {
                'version': '1.0',
                STORE_KEY: self.submissions
            }
            with open(self.store_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            logger.info("Submissions saved")
            return True
        except (OSError, TypeError) as e:
            logger.error(f"Error saving submissions: {e}")
            return False

    def append(self, record: Dict) -> bool:
        """Store one submission record.

        Returns:
            True if the record was persisted.
        """
        self.submissions.append(record)
        if not self.save():
            self.submissions.pop()
            return False
        return True

    def all(self) -> List[Dict]:
        return list(self.submissions)

    def __len__(self):
        return len(self.submissions)
