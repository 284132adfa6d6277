from __future__ import annotations
from pydantic import BaseModel, ConfigDict, SecretStr, ValidationError, field_validator
from .version import VERSION, PROJECT_URL
from typing import Any, Literal, Self
from .errors import InvalidConfig
from base64 import b64decode
from binascii import Error
from os import environ


__all__ = (
    'Config',
    'Token',
)


DEFAULT_API_ROOT = 'https://discord.com/api/v10'


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal['Bot', 'Bearer']
    secret: SecretStr

    @classmethod
    def bot(cls, secret: str) -> Token:
        return cls(kind='Bot', secret=secret)

    @classmethod
    def bearer(cls, secret: str) -> Token:
        return cls(kind='Bearer', secret=secret)

    def __repr__(self) -> str:
        return f'Token.{self.kind.lower()}(**********)'

    def __str__(self) -> str:
        return repr(self)

    @property
    def header(self) -> str:
        return f'{self.kind} {self.secret.get_secret_value()}'

    @property
    def application_id(self) -> int | None:
        # ? the first segment of a bot token is the base64 encoded bot id
        if self.kind != 'Bot':
            return None

        try:
            return int(
                b64decode(
                    self.secret.get_secret_value().split('.')[0] + '=='
                ).decode()
            )
        except (Error, UnicodeDecodeError, ValueError):
            return None


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: Token
    name: str = 'DiscordBot'
    url: str = PROJECT_URL
    version: str = VERSION
    api_root: str = DEFAULT_API_ROOT
    timeout: float = 30.0
    logfire_token: str | None = None
    dev: bool = False

    def __init__(self, **data: Any) -> None:  # noqa: ANN401
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidConfig(str(e)) from e

    @field_validator('api_root')
    @classmethod
    def _validate_api_root(cls, value: str) -> str:
        if not value.startswith(('https://', 'http://')):
            raise ValueError('api_root must be an http or https url')

        return value.rstrip('/')

    @field_validator('timeout')
    @classmethod
    def _validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError('timeout must be positive')

        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> Self:  # noqa: ANN401
        if (secret := environ.get('DISCORD_TOKEN')):
            token = Token.bot(secret)
        elif (secret := environ.get('DISCORD_BEARER_TOKEN')):
            token = Token.bearer(secret)
        else:
            raise InvalidConfig(
                'either DISCORD_TOKEN or DISCORD_BEARER_TOKEN must be set')

        data: dict[str, Any] = {
            'token': token,
            'dev': environ.get('DEV', '0') != '0'
        }

        for key, env_key in (
            ('api_root', 'DISCORD_API_ROOT'),
            ('timeout', 'DISCORD_TIMEOUT'),
            ('logfire_token', 'LOGFIRE_TOKEN'),
        ):
            if (value := environ.get(env_key)):
                data[key] = value

        return cls(**(data | overrides))