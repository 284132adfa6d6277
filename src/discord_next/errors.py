from __future__ import annotations
from typing import Any


__all__ = (
    'DecodeError',
    'DiscordNextException',
    'Forbidden',
    'HTTPException',
    'InvalidConfig',
    'InvalidFormat',
    'NotFound',
    'Overflow',
    'ServerError',
    'TransportError',
    'TypeMismatch',
    'Unauthorized',
    'UnrecognizedValue',
)


class DiscordNextException(Exception):
    ...


# ? subclasses ValueError so pydantic reports these as validation errors
class DecodeError(DiscordNextException, ValueError):
    ...


class InvalidFormat(DecodeError):
    ...


class TypeMismatch(DecodeError):
    ...


class UnrecognizedValue(DiscordNextException, ValueError):
    def __init__(self, raw: Any, kind: str | None = None) -> None:  # noqa: ANN401
        self.raw = raw
        self.kind = kind
        super().__init__(
            f'unrecognized {kind} value {raw!r}'
            if kind else
            f'unrecognized value {raw!r}'
        )


class Overflow(DiscordNextException, OverflowError):
    ...


class InvalidConfig(DiscordNextException):
    ...


class TransportError(DiscordNextException):
    ...


class HTTPException(DiscordNextException):
    status_code: int = 0

    def __init__(
        self,
        message: str | None = None,
        code: int | None = None,
        status_code: int | None = None
    ) -> None:
        self.message = message
        self.code = code

        if status_code is not None:
            self.status_code = status_code

        super().__init__(
            f'{self.status_code} (error code: {code}): {message}'
            if code is not None else
            f'{self.status_code}: {message}'
        )


class Unauthorized(HTTPException):
    status_code: int = 401


class Forbidden(HTTPException):
    status_code: int = 403


class NotFound(HTTPException):
    status_code: int = 404


class ServerError(HTTPException):
    status_code: int = 500
