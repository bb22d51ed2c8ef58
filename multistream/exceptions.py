class MultistreamError(Exception):
    """Base class for errors raised by the stream clients and the aggregator."""


class ClientError(MultistreamError):
    """Raised when a request is missing a parameter or names an unknown platform."""


class UpstreamError(MultistreamError):
    """Raised when a platform API call fails or returns an unusable payload."""


class ConfigurationError(UpstreamError):
    """Raised when the YouTube API key is missing or rejected."""


class RateLimitError(UpstreamError):
    """Raised when a platform API rate limit is hit."""


class NotFoundError(MultistreamError):
    """Raised when a direct lookup finds no matching stream or channel."""
