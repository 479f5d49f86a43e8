"""Canonical error types for prompt composition and upstream AI calls.

Validation failures are deliberately absent: they are absorbed into a
synthesized fallback reading and only surface through metrics.

Standard error codes:
- MISSING_SECTION: A required prompt section is blank
- INVALID_PARAMS: Template parameters are structurally invalid
- MISSING_API_KEY: No Gemini API key configured
- UPSTREAM_STATUS: Gemini returned a non-2xx status
- MALFORMED_PAYLOAD: Gemini returned a 2xx body that is not JSON
- EMPTY_COMPLETION: Gemini returned no candidate text
"""


class FortuneError(RuntimeError):
    """Base error for the prompt and reading pipeline.

    Attributes:
        code: Error code (e.g., "MISSING_SECTION", "UPSTREAM_STATUS")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class TemplateError(FortuneError):
    """Raised when a prompt cannot be composed from the given sections or params."""


class APIError(FortuneError):
    """Raised when the upstream generative-AI call fails.

    Attributes:
        status_code: HTTP status from upstream, or None when no response was received
    """

    def __init__(self, code: str, details: list[str], status_code: int | None = None):
        self.status_code = status_code
        super().__init__(code, details)
