"""
Field governance policy.

A :class:`FieldPolicy` decides which document fields a filter may
reference (``allow`` / ``deny``) and which it must reference
(``require``).  Policies are immutable and validated once, at
construction, so a single instance can be shared by any number of
conversions.

Entries may be bare field names (``"status"``) or JSON pointers
(``"/status"``); pointers are reduced to their top-level field.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .ast import decode_pointer_segment
from .exceptions import ConfigError, DeniedFieldError, NonallowedFieldError

logger = logging.getLogger(__name__)

_SETTINGS_KEYS = frozenset({"allow", "deny", "require"})


class FieldPolicy(BaseModel):
    """Immutable allow/deny/require rules applied while converting a filter."""

    model_config = ConfigDict(frozen=True)

    allow: frozenset[str] = Field(default_factory=frozenset)
    deny: frozenset[str] = Field(default_factory=frozenset)
    require: tuple[str, ...] = ()

    @field_validator("allow", "deny", "require", mode="before")
    @classmethod
    def normalize_entries(cls, value: Any, info: ValidationInfo) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str) or not isinstance(
            value, list | tuple | set | frozenset
        ):
            raise ConfigError(f'Setting "{info.field_name}" must be a list of fields')
        entries: list[str] = []
        for entry in value:
            if not isinstance(entry, str):
                raise ConfigError(f'Setting "{info.field_name}" must contain strings')
            try:
                entries.append(_field_name(entry))
            except ValueError as exc:
                raise ConfigError(
                    f'Setting "{info.field_name}" has an invalid pointer: {entry!r}'
                ) from exc
        return tuple(entries)

    @model_validator(mode="after")
    def check_exclusive(self) -> FieldPolicy:
        if self.allow and self.deny:
            raise ConfigError('Settings cannot have both "allow" and "deny"')
        return self

    # -- construction --------------------------------------------------------

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> FieldPolicy:
        """Build a policy from a ``{"allow"|"deny"|"require": [...]}`` mapping."""
        if not isinstance(settings, Mapping):
            raise ConfigError("Policy settings must be a mapping")
        unknown = set(settings) - _SETTINGS_KEYS
        if unknown:
            raise ConfigError(
                f"Unknown policy settings: {', '.join(sorted(map(str, unknown)))}"
            )
        return cls(**settings)

    # -- checks --------------------------------------------------------------

    def is_permitted(self, field: str) -> bool:
        return self._rejection(field) is None

    def check(self, field: str) -> None:
        """
        Raise if *field* may not appear in a converted filter.

        Raises:
            DeniedFieldError: The field is on the deny list.
            NonallowedFieldError: An allow list is active and lacks the field.
        """
        error = self._rejection(field)
        if error is not None:
            logger.debug("Field %s rejected: %s", field, error.__name__)
            raise error(field)

    def required_fields(self) -> tuple[str, ...]:
        return self.require

    def _rejection(
        self, field: str
    ) -> type[NonallowedFieldError] | type[DeniedFieldError] | None:
        if self.allow and field not in self.allow:
            return NonallowedFieldError
        if self.deny and field in self.deny:
            return DeniedFieldError
        return None


def _field_name(entry: str) -> str:
    """Reduce a pointer entry to its top-level field; bare names pass through."""
    if not entry.startswith("/"):
        return entry
    return decode_pointer_segment(entry[1:].split("/", 1)[0])


UNRESTRICTED_POLICY = FieldPolicy()
