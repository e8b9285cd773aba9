"""Provider error types.

Raised by provider clients; the query cache turns them into the
error state of a QueryResult.
"""


class ProviderError(RuntimeError):
    """Base exception for provider failures."""


class TransportError(ProviderError):
    """No response was obtained (connection, DNS, protocol failures)."""


class RequestError(ProviderError):
    """Provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, status_text: str, url: str = ""):
        self.status_code = status_code
        self.status_text = status_text
        self.url = url
        super().__init__(f"ESPN request failed: {status_code} {status_text}".rstrip())
