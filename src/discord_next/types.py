from __future__ import annotations
from pydantic import GetJsonSchemaHandler, GetCoreSchemaHandler
from .errors import InvalidFormat, TypeMismatch, Overflow
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, Self, TypeVar
from pydantic_core import CoreSchema, core_schema
from pydantic.json_schema import JsonSchemaValue
from .utils import U64_MAX, is_decimal


__all__ = (
    'EPOCH',
    'AnyId',
    'Id',
    'Snowflake',
)


EPOCH = 1420070400000
EPOCH_DATETIME = datetime(2015, 1, 1, tzinfo=timezone.utc)
UNIX_EPOCH_DATETIME = datetime(1970, 1, 1, tzinfo=timezone.utc)

WORKER_MASK = 0x3E0000
PROCESS_MASK = 0x1F000
INCREMENT_MASK = 0xFFF

KindT = TypeVar('KindT')


class Snowflake(int):
    __slots__ = ()

    def __new__(cls, value: int | str) -> Self:
        if isinstance(value, str):
            if not is_decimal(value):
                raise InvalidFormat(f'{value!r} is not a decimal integer')

            value = int(value)

        elif isinstance(value, bool) or not isinstance(value, int):
            raise InvalidFormat(
                f'expected a decimal string or integer, got {type(value).__name__}')

        if not 0 <= value <= U64_MAX:
            raise InvalidFormat(f'{value} does not fit in 64 bits')

        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({int(self)})'

    def __str__(self) -> str:
        return int.__repr__(self)

    @classmethod
    def parse(cls, text: str) -> Self:
        if not isinstance(text, str):
            raise InvalidFormat(f'expected a string, got {type(text).__name__}')

        return cls(text)

    @classmethod
    def from_wire(cls, value: Any) -> Self:  # noqa: ANN401
        # ? the api is inconsistent, ids show up as both strings and integers
        if isinstance(value, bool) or not isinstance(value, int | str):
            raise TypeMismatch(
                f'expected a snowflake string or integer, got {type(value).__name__}')

        return cls(value)

    def to_wire(self) -> str:
        return str(self)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Self:
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)

        discord_ms = (dt - UNIX_EPOCH_DATETIME) // timedelta(milliseconds=1) - EPOCH

        if discord_ms < 0:
            raise Overflow(f'{dt.isoformat()} is before the discord epoch')

        if discord_ms << 22 > U64_MAX:
            raise Overflow(f'{dt.isoformat()} does not fit in a snowflake')

        return cls(discord_ms << 22)

    @property
    def timestamp(self) -> datetime:
        return EPOCH_DATETIME + timedelta(milliseconds=int(self) >> 22)

    @property
    def worker_id(self) -> int:
        return (int(self) & WORKER_MASK) >> 17

    @property
    def process_id(self) -> int:
        return (int(self) & PROCESS_MASK) >> 12

    @property
    def increment(self) -> int:
        return int(self) & INCREMENT_MASK

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_wire,
            serialization=core_schema.to_string_ser_schema(
                when_used='json-unless-none'
            )
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'string', 'format': 'snowflake'}


class Id(Snowflake, Generic[KindT]):
    """Snowflake of a single kind of entity.

    The kind is only a label for type checkers, ``Id[Channel](1)`` and
    ``Id[User](1)`` are the same value at runtime.
    """
    __slots__ = ()

    def erase(self) -> AnyId:
        return AnyId(int(self))


class AnyId(Snowflake):
    """Snowflake that may refer to any kind of entity."""
    __slots__ = ()

    def of(self, _kind: type[KindT]) -> Id[KindT]:
        return Id(int(self))
