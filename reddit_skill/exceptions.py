"""Exceptions for failures fetching or reading Reddit listings."""

from typing import Optional


class RedditAPIError(Exception):
    """Base exception for failures talking to Reddit."""

    error_type = "unknown"

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class TransportFailure(RedditAPIError):
    """The connection to Reddit failed before a response arrived."""

    error_type = "transport"


class UpstreamFailure(RedditAPIError):
    """Reddit answered with a status other than 200."""

    error_type = "upstream"


class MalformedListingError(RedditAPIError):
    """Reddit answered 200 but the body is not a usable listing."""

    error_type = "malformed"
