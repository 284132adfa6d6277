from __future__ import annotations
from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator
from pydantic_core.core_schema import ValidatorFunctionWrapHandler
from typing import Any, Self


__all__ = (
    'RawBaseModel',
    'RequestModel',
)


class RawBaseModel(BaseModel):
    # ? keep fields discord adds after this release so they survive a re-encode
    model_config = ConfigDict(extra='allow')

    _raw_data: dict = PrivateAttr(default_factory=dict)

    @model_validator(mode='wrap')
    @classmethod
    def _keep_raw(
        cls,
        data: Any,  # noqa: ANN401
        handler: ValidatorFunctionWrapHandler
    ) -> Self:
        self = handler(data)

        if isinstance(data, dict):
            self._raw_data = data.copy()

        return self

    @property
    def _raw(self) -> dict:
        return self._raw_data

    def as_payload(self) -> dict:
        return self.model_dump(mode='json', exclude_unset=True)


class RequestModel(RawBaseModel):
    """Request body.

    Only fields that were explicitly given are sent, so ``None`` clears a
    value and an omitted field is left untouched.
    """
    model_config = ConfigDict(extra='forbid')
