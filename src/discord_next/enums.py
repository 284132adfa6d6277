"""Wire enums that tolerate values this library does not know about yet.

Discord adds enum values, guild features and permission bits without
warning. Every type here is total: a primitive with no matching member
decodes into an unknown pseudo-member of the same type that keeps the raw
primitive, so re-encoding always yields exactly what the server sent.
Only :meth:`known` surfaces the mismatch, and only when asked.
"""
from __future__ import annotations
from pydantic import GetJsonSchemaHandler, GetCoreSchemaHandler
from .errors import TypeMismatch, UnrecognizedValue
from pydantic_core import CoreSchema, core_schema
from pydantic.json_schema import JsonSchemaValue
from enum import IntEnum, StrEnum, IntFlag, KEEP
from .utils import U64_MAX, is_decimal, is_u64
from typing import Any, Self


__all__ = (
    'BitFlags',
    'IntegerEnum',
    'StringBitFlags',
    'StringEnum',
)


class IntegerEnum(IntEnum):
    """Enum transmitted as an unsigned integer."""

    @classmethod
    def _missing_(cls, value: object) -> Self:
        if not is_u64(value):
            raise TypeMismatch(
                f'{cls.__name__} expected an unsigned 64-bit integer, got {value!r}')

        # ? not cached in _value2member_map_, decoding never mutates the class
        member = int.__new__(cls, value)
        member._name_ = None
        member._value_ = value
        return member

    def __repr__(self) -> str:
        if self._name_ is None:
            return f'<{type(self).__name__}: {self._value_!r}>'

        return super().__repr__()

    @property
    def is_known(self) -> bool:
        return self._name_ is not None

    def known(self) -> Self:
        if self._name_ is None:
            raise UnrecognizedValue(self._value_, type(self).__name__)

        return self

    @classmethod
    def from_wire(cls, value: Any) -> Self:  # noqa: ANN401
        if not is_u64(value):
            raise TypeMismatch(
                f'{cls.__name__} expected an unsigned 64-bit integer, got {type(value).__name__}')

        return cls(value)

    def to_wire(self) -> int:
        return self._value_

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_wire,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_wire,
                return_schema=core_schema.int_schema(),
                when_used='json-unless-none'
            )
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'integer'}


class StringEnum(StrEnum):
    """Enum transmitted as a string."""

    @classmethod
    def _missing_(cls, value: object) -> Self:
        if not isinstance(value, str):
            raise TypeMismatch(
                f'{cls.__name__} expected a string, got {value!r}')

        member = str.__new__(cls, value)
        member._name_ = None
        member._value_ = value
        return member

    def __repr__(self) -> str:
        if self._name_ is None:
            return f'<{type(self).__name__}: {self._value_!r}>'

        return super().__repr__()

    @property
    def is_known(self) -> bool:
        return self._name_ is not None

    def known(self) -> Self:
        if self._name_ is None:
            raise UnrecognizedValue(self._value_, type(self).__name__)

        return self

    @classmethod
    def from_wire(cls, value: Any) -> Self:  # noqa: ANN401
        if not isinstance(value, str):
            raise TypeMismatch(
                f'{cls.__name__} expected a string, got {type(value).__name__}')

        return cls(value)

    def to_wire(self) -> str:
        return self._value_

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_wire,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_wire,
                return_schema=core_schema.str_schema(),
                when_used='json-unless-none'
            )
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'string'}


class _BitFlagsType(type(IntFlag)):
    def __new__(metacls, cls, bases, classdict, **kwds):  # noqa: ANN001, ANN003, ANN204, N804
        enum_class = super().__new__(metacls, cls, bases, classdict, **kwds)

        # ? EnumType puts Flag.__invert__ back on every subclass that does not
        # ? define its own, which would drop unknown bits
        if '__invert__' not in classdict:
            for base in enum_class.__mro__[1:]:
                if isinstance(base, _BitFlagsType):
                    enum_class.__invert__ = base.__dict__['__invert__']
                    break

        return enum_class


class BitFlags(IntFlag, boundary=KEEP, metaclass=_BitFlagsType):
    """Flag set transmitted as an unsigned integer.

    Bits without a named flag are kept as they are. Use :meth:`from_bits`
    to reject them or :meth:`from_bits_truncate` to drop them.
    """

    @classmethod
    def _missing_(cls, value: object) -> Self:
        if not is_u64(value):
            raise TypeMismatch(
                f'{cls.__name__} expected an unsigned 64-bit integer, got {value!r}')

        member = super()._missing_(value)
        # ? composites stay out of _value2member_map_, decoding never mutates the class
        cls._value2member_map_.pop(value, None)
        return member

    def __invert__(self) -> Self:
        # ? complement over the full 64 bits, not just the known flags
        return self.__class__(U64_MAX ^ self._value_)

    @classmethod
    def all(cls) -> Self:
        result = cls(0)
        for flag in cls:
            result |= flag
        return result

    @property
    def unknown_bits(self) -> int:
        return self._value_ & ~self.all()._value_

    @property
    def is_known(self) -> bool:
        return not self.unknown_bits

    def known(self) -> Self:
        if self.unknown_bits:
            raise UnrecognizedValue(self._value_, type(self).__name__)

        return self

    @classmethod
    def from_bits(cls, bits: int) -> Self:
        return cls.from_wire(bits).known()

    @classmethod
    def from_bits_truncate(cls, bits: int) -> Self:
        return cls(cls.from_wire(bits)._value_ & cls.all()._value_)

    @classmethod
    def from_wire(cls, value: Any) -> Self:  # noqa: ANN401
        if not is_u64(value):
            raise TypeMismatch(
                f'{cls.__name__} expected an unsigned 64-bit integer, got {type(value).__name__}')

        return cls(value)

    def to_wire(self) -> int | str:
        return self._value_

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_wire,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_wire,
                return_schema=core_schema.int_schema(),
                when_used='json-unless-none'
            )
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'integer'}


class StringBitFlags(BitFlags):
    """Flag set transmitted as a decimal string, like permissions."""

    @classmethod
    def from_wire(cls, value: Any) -> Self:  # noqa: ANN401
        if isinstance(value, str):
            if not is_decimal(value):
                raise TypeMismatch(
                    f'{cls.__name__} expected a decimal string, got {value!r}')

            value = int(value)

        return super().from_wire(value)

    def to_wire(self) -> str:
        return str(self._value_)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_wire,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_wire,
                return_schema=core_schema.str_schema(),
                when_used='json-unless-none'
            )
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'string', 'format': 'bitfield'}
