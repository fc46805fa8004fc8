"""Typed errors raised by the link analysis pipeline and the note store."""

from __future__ import annotations


class LinkAnalysisError(Exception):
    """Base class for every failure a pipeline run can surface."""


class InvalidInput(LinkAnalysisError):
    """Raised when the URL is empty or not an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "URL must be an absolute http(s) URL") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class NetworkError(LinkAnalysisError):
    """Raised when the target URL cannot be reached (DNS, timeout, refused)."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"Could not reach {url}: {message}")


class FetchError(LinkAnalysisError):
    """Raised when the target responds with a non-success HTTP status."""

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to load page (Status: {status_code})")


class InsufficientContent(LinkAnalysisError):
    """Raised when the extracted text is too short to analyze."""

    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Could not extract enough readable text from this link "
            f"({length} characters, need at least {minimum})"
        )


class ModelUnavailable(LinkAnalysisError):
    """Raised when the generative model call fails (network, auth, quota, deadline)."""


class MalformedModelOutput(LinkAnalysisError):
    """Raised when the model reply is not a JSON object.

    The unparsed reply is kept on ``raw_text`` for diagnostics.
    """

    def __init__(self, raw_text: str, message: str = "AI returned invalid data format") -> None:
        self.raw_text = raw_text
        super().__init__(message)


class NoteNotFoundError(KeyError):
    """Raised when a note id does not exist in the store."""

    def __init__(self, note_id: str) -> None:
        self.note_id = note_id
        super().__init__(note_id)

    def __str__(self) -> str:
        return f"Note not found: {self.note_id}"
