"""
Message delivery result models.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

MAX_ERROR_MESSAGE_LENGTH = 500


@dataclass
class DeliveryResult:
    """Result of message delivery attempt."""

    success: bool
    delivery_time: datetime
    error_message: Optional[str]

    @classmethod
    def failure(cls, error_message: str) -> "DeliveryResult":
        """Build a failed result, truncating the error to the allowed length."""
        error_message = error_message or "Unknown delivery error"
        return cls(
            success=False,
            delivery_time=datetime.now(),
            error_message=error_message[:MAX_ERROR_MESSAGE_LENGTH],
        )

    def validate(self) -> bool:
        """Validate delivery result data."""
        if not isinstance(self.success, bool):
            raise ValueError("success must be a boolean")

        if not isinstance(self.delivery_time, datetime):
            raise ValueError("delivery_time must be a datetime object")

        if self.error_message is not None:
            if not isinstance(self.error_message, str):
                raise ValueError("error_message must be a string or None")

            if len(self.error_message) > MAX_ERROR_MESSAGE_LENGTH:
                raise ValueError(
                    f"error_message too long (max {MAX_ERROR_MESSAGE_LENGTH} characters)"
                )

        # Logical validation: if success is False, error_message should be provided
        if not self.success and not self.error_message:
            raise ValueError("error_message should be provided when success is False")

        return True
