"""
Construction options for every container.

* Frozen models: the read-only flag cannot change after construction.
* camelCase aliases (``readOnly`` ...) are accepted next to snake_case names.
"""

from __future__ import annotations

from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import AliasChoices, BaseModel, Field

T_Options = TypeVar("T_Options", bound="RecordOptions")


class RecordOptions(BaseModel):
    read_only: bool = Field(
        default=False, validation_alias=AliasChoices("read_only", "readOnly")
    )
    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def coerce(
        cls: Type[T_Options], value: Union[T_Options, Mapping[str, Any], None]
    ) -> T_Options:
        """Accept a model, a plain mapping or ``None`` (all defaults)."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, BaseModel):
            value = value.model_dump()
        return cls.model_validate(dict(value))


class CollectionOptions(RecordOptions):
    apply_intake_on_new_entries: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "apply_intake_on_new_entries",
            "applyInTakeOnNewEntries",
            "applyIntakeOnNewEntries",
        ),
    )


class KeyedOptions(RecordOptions):
    apply_definitions_on_new_entries: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "apply_definitions_on_new_entries", "applyDefinitionsOnNewEntries"
        ),
    )
