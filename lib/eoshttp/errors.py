from __future__ import annotations


class EosHttpError(Exception):
    """Base client error."""


class SerializationError(EosHttpError):
    """Request payload could not be encoded as JSON."""


class TransportError(EosHttpError):
    """Request could not be sent or the response could not be received."""


class ConfigError(EosHttpError):
    """Client configuration is missing or invalid."""


class HTTPStatusError(EosHttpError):
    def __init__(self, status_code: int, message: str | None = None, details: str | None = None):
        super().__init__(str(status_code))
        self.status_code = status_code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return str(self.status_code)


def is_not_found_error(err: BaseException | None) -> bool:
    return isinstance(err, HTTPStatusError) and err.status_code == 404
