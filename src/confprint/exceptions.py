"""Errors raised by the configuration printer."""

from typing import Any, Optional


class InvalidInputKindError(TypeError):
    """Raised when a configuration record is not a structured value.

    Only dataclass instances and pydantic model instances expose the named,
    annotated fields the printer walks over. A record whose fields cannot all
    be read is rejected the same way.
    """

    def __init__(self, record: Any, reason: Optional[str] = None) -> None:
        """Build the error message from the rejected value's type.

        Parameters:
            record: The value that was passed in place of a configuration record.
            reason: Why a structured record could not be read, if it is one.
        """
        self.kind = type(record).__name__
        if reason is None:
            message = (
                f"configuration record must be a dataclass or pydantic model "
                f"instance, got {self.kind}"
            )
        else:
            message = f"configuration record {self.kind} is not readable: {reason}"
        super().__init__(message)
