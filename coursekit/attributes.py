"""
Base classes for the attribute records.

An attribute record is the application level view of one stored entity.
Records are immutable once built: operations that change a record
(sanitizing, merging) return a new one. ``None`` is the only absence
marker; a field given as ``None`` takes its default exactly as if it had
not been given at all.
"""

import json
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from coursekit.exceptions import InvalidParametersError


class EntityAttributes(BaseModel):
    # Serialized names are stored in exported data; keep them stable
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_absent_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def value_of(cls, entity):
        raise NotImplementedError

    def to_entity(self):
        raise NotImplementedError

    def get_invalidity_info(self) -> list[str]:
        raise NotImplementedError

    def is_valid(self) -> bool:
        return not self.get_invalidity_info()

    def sanitize_for_saving(self):
        raise NotImplementedError

    def get_identification_string(self) -> str:
        raise NotImplementedError

    def get_entity_type_as_string(self) -> str:
        raise NotImplementedError

    def get_backup_identifier(self) -> str:
        raise NotImplementedError

    def get_json_string(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json_string(cls, json_string: str):
        return cls.model_validate_json(json_string)

    def get_copy(self):
        return self.model_copy(deep=True)

    def business_equals(self, other: "EntityAttributes | None") -> bool:
        """Compare the parsed JSON forms, ignoring key order."""
        if other is None:
            return False
        return json.loads(self.get_json_string()) == json.loads(other.get_json_string())


T = TypeVar("T", bound=EntityAttributes)


class AttributesBuilder(Generic[T]):
    """
    Immutable builder for attribute records.

    Every ``with_*`` method returns a new builder, so a partially configured
    builder can be reused as a template.
    """

    attributes_class: type[T]

    def __init__(self, **fields):
        self._fields = fields

    def _with(self, **fields):
        return type(self)(**{**self._fields, **fields})

    def build(self) -> T:
        return self.attributes_class(**self._fields)


def require_fields(**fields):
    """Raise InvalidParametersError naming every field that is None."""
    missing = [name for name, value in fields.items() if value is None]
    if missing:
        raise InvalidParametersError(missing)


def add_non_empty_error(error: str, errors: list[str]):
    if error:
        errors.append(error)


def lookup(data: dict, name: str):
    """Find a field in raw input given either its field name or its alias."""
    if name in data:
        return data[name]
    return data.get(to_camel(name))


def set_default(data: dict, name: str, value):
    alias = to_camel(name)
    key = alias if alias in data else name
    if data.get(key) is None:
        data[key] = value
