"""Application form fields, validation and submission records."""
import logging
import time
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from .config import SignpadConfig
from .signature_pad import SignaturePad
from .submissions import SubmissionStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in all required fields (name, affiliation)."
MISSING_CONSENT_MESSAGE = "You must agree to the collection and use of personal information."


def format_date(day: date, pattern: str = "{year}년 {month}월 {day}일") -> str:
    """Format a date without zero padding."""
    return pattern.format(year=day.year, month=day.month, day=day.day)


def today(pattern: str = "{year}년 {month}월 {day}일") -> str:
    return format_date(date.today(), pattern)


@dataclass
class ApplicationForm:
    """The fields of the application page."""
    name: str = ""
    affiliation: str = ""
    privacy_agree: bool = False
    date: str = field(default_factory=today)

    @property
    def signer_name(self) -> str:
        """Name shown on the signature line, mirrors the name field."""
        return self.name

    def validate(self) -> Optional[str]:
        """Return a blocking message, or None when the form can be submitted."""
        if not self.name.strip() or not self.affiliation.strip():
            return MISSING_FIELDS_MESSAGE
        if not self.privacy_agree:
            return MISSING_CONSENT_MESSAGE
        return None

    def reset(self):
        self.name = ""
        self.affiliation = ""
        self.privacy_agree = False

    def build_submission(self, signature_data: str, timestamp_ms: int = None) -> dict:
        """Build the record appended to the submission store."""
        if timestamp_ms is None:
            timestamp_ms = int(time.time() * 1000)
        return {
            'id': timestamp_ms,
            'name': self.name,
            'affiliation': self.affiliation,
            'date': self.date,
            'signatureData': signature_data
        }


class FormController:
    """Validates the form and persists submissions."""

    def __init__(self, form: ApplicationForm, pad: SignaturePad, store: SubmissionStore,
                 config: Optional[SignpadConfig] = None):
        self.form = form
        self.pad = pad
        self.store = store
        self.config = config or SignpadConfig()

        # User-visible blocking messages
        self.on_message: Optional[Callable[[str], None]] = None
        # Called once a submission has been stored
        self.on_submitted: Optional[Callable[[dict], None]] = None

    def _show(self, message: str):
        if self.on_message:
            self.on_message(message)

    def submit(self) -> Optional[dict]:
        """Validate and store the current form.

        Returns:
            The stored record, or None if validation blocked it or saving failed.
        """
        message = self.form.validate()
        if message:
            logger.info(f"Submission blocked: {message}")
            self._show(message)
            return None

        if not self.pad.has_signature():
            # Not enforced, an empty signature is still accepted
            logger.info("Submitting without any signature strokes")

        record = self.form.build_submission(self.pad.surface.to_data_url())
        if not self.store.append(record):
            self._show("Failed to save the application.")
            return None

        logger.info(f"Submission {record['id']} stored for {record['name']}")
        if self.on_submitted:
            self.on_submitted(record)
        return record

    def reset(self):
        """Clear the fields and the signature for a fresh application."""
        self.form.reset()
        self.form.date = today(self.config.date_format)
        self.pad.clear()
        logger.info("Form reset")
