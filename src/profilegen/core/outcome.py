"""Terminal outcomes and the failure taxonomy of a generation request.

``Success`` and ``Failure`` are the only values that leave
:class:`~profilegen.core.controller.RequestController`. The exception classes
are raised inside the controller to classify a failure and are converted to
``Failure`` before ``generate`` returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

PNG_MIME_TYPE = "image/png"


class FailureKind(str, Enum):
    """Why a generation request ended without an image."""

    TRANSPORT_EXHAUSTED = "transport_exhausted"
    MALFORMED_RESPONSE = "malformed_response"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Success:
    """The API returned a decodable image."""

    image_bytes: bytes = field(repr=False)
    mime_type: str = PNG_MIME_TYPE

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The request ended without an image.

    Attributes:
        kind: Classified failure reason
        reason: User-facing message
    """

    kind: FailureKind
    reason: str

    @property
    def ok(self) -> bool:
        return False


GenerationOutcome = Success | Failure


class GenerationError(Exception):
    """Base class for classified generation failures."""

    kind: FailureKind = FailureKind.UNKNOWN


class TransportExhaustedError(GenerationError):
    """Every attempt failed with a transport error or a non-2xx status."""

    kind = FailureKind.TRANSPORT_EXHAUSTED

    def __init__(self, attempts: int, last_cause: str):
        self.attempts = attempts
        self.last_cause = last_cause
        super().__init__(f"Failed to fetch image after {attempts} attempts: {last_cause}")


class MalformedResponseError(GenerationError):
    """The API answered 2xx but the image payload was missing or unreadable."""

    kind = FailureKind.MALFORMED_RESPONSE
