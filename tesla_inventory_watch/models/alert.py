"""
Alert formatting models.
"""

from dataclasses import dataclass

# Telegram rejects longer sendMessage texts
MAX_MESSAGE_LENGTH = 4096


@dataclass
class FormattedAlert:
    """Formatted alert ready for delivery."""

    title: str
    message: str

    def validate(self) -> bool:
        """Validate formatted alert data."""
        if not isinstance(self.title, str):
            raise ValueError("title must be a string")

        if not self.title.strip():
            raise ValueError("title cannot be empty")

        if not isinstance(self.message, str):
            raise ValueError("message must be a string")

        if not self.message.strip():
            raise ValueError("message cannot be empty")

        if len(self.message) > MAX_MESSAGE_LENGTH:
            raise ValueError(f"message too long (max {MAX_MESSAGE_LENGTH} characters)")

        return True
