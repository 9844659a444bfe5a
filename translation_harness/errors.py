"""
Exceptions raised by the translation harness.

Every message says what went wrong and how to fix it.
"""


class HarnessError(Exception):
    """Base exception for all harness errors."""
    pass


class FixtureLoadError(HarnessError):
    """Raised when the sentence fixture cannot be read or is malformed."""

    def __init__(self, path, reason: str = ""):
        message = f"Failed to load test fixture: {path}"
        if reason:
            message += f" Reason: {reason}"
        message += "\nFix: Provide a UTF-8 JSON array of {\"id\": int, \"input\": str, \"type\": str} objects"
        super().__init__(message)
        self.path = path
        self.reason = reason


class SetupError(HarnessError):
    """Raised when the translator page does not show its input control."""

    def __init__(self, url: str, control: str, reason: str = ""):
        message = f"Translator page at '{url}' did not show {control}"
        if reason:
            message += f": {reason}"
        message += "\nFix: Check that the target site is running and the base URL is correct"
        super().__init__(message)
        self.url = url
        self.control = control
        self.reason = reason


class OutputTimeoutError(HarnessError, TimeoutError):
    """Raised when the output region stays empty past the timeout."""

    def __init__(self, timeout_ms: int, region: str = "output region"):
        message = f"{region} stayed empty for {timeout_ms} ms"
        message += "\nFix: Check that the translation service behind the page is responding"
        super().__init__(message)
        self.timeout_ms = timeout_ms
        self.region = region
