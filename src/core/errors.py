"""
Core error classes for the relay.
"""


class UpstreamFetchError(Exception):
    """Raised when the outbound call to the upstream API fails at the transport level."""

    def __init__(self, target_url: str, cause: BaseException) -> None:
        self.target_url = target_url
        self.cause = cause
        # Some httpx exceptions stringify to "", fall back to the class name
        super().__init__(str(cause) or type(cause).__name__)
