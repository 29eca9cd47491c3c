"""Custom Exceptions."""


class DecodeError(Exception):
    """Response body is not the XML document we expected."""


class TransportError(Exception):
    """The HTTP request could not be completed."""


class UnexpectedStatus(Exception):
    """Raised for a HTTP response outside of the 2xx range."""

    def __init__(self, status_code: int):
        """Keep the status code around for the caller."""
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code
