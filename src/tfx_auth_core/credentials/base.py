"""Credential model shared by every authentication scheme.

A credential is created empty for one resolution call and becomes populated
exactly once, either from its serialized form or from one prompt cycle.

The serialized form is colon-delimited with the kind first, followed by the
variant's fields in prompt order, e.g. ``basic:<username>:<password>``.
Field values containing the delimiter are not supported.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Self

from tfx_auth_core.exceptions import (
    CredentialStateError,
    MalformedCredentialStringError,
    PromptFailureError,
    UnsupportedAuthTypeError,
)
from tfx_auth_core.prompting import InputPrompter, PromptField

DELIMITER = ":"


class AuthKind(Enum):
    """Discriminator of the supported authentication schemes."""

    TOKEN = "token"
    BASIC = "basic"


# Older clients wrote personal access tokens as "pat:<token>"
_AUTH_KIND_ALIASES = {"pat": AuthKind.TOKEN}


def parse_auth_kind(value: str) -> AuthKind:
    """Map a discriminator string to its AuthKind.

    Args:
        value: Discriminator as requested by a caller or read from a store.

    Returns:
        The matching AuthKind.

    Raises:
        UnsupportedAuthTypeError: If no credential variant handles the value.
    """
    normalized = value.strip().lower()
    if normalized in _AUTH_KIND_ALIASES:
        return _AUTH_KIND_ALIASES[normalized]
    try:
        return AuthKind(normalized)
    except ValueError as e:
        raise UnsupportedAuthTypeError(value) from e


@dataclass
class Credentials(ABC):
    """Base class for credential variants."""

    kind: ClassVar[AuthKind]

    populated: bool = field(default=False, kw_only=True)

    @classmethod
    @abstractmethod
    def prompt_fields(cls) -> tuple[PromptField, ...]:
        """Fields this variant collects, in serialization order."""

    @abstractmethod
    def describe(self) -> str:
        """Human readable summary that never includes secrets."""

    def from_string(self, serialized: str) -> Self:
        """Populate this credential from its serialized form.

        Args:
            serialized: Colon-delimited string, kind first.

        Returns:
            This instance, now populated.

        Raises:
            MalformedCredentialStringError: If the kind, the field count or a
                field value does not fit this variant.
            CredentialStateError: If the credential is already populated.
        """
        self._ensure_unpopulated()

        parts = serialized.split(DELIMITER)
        fields = self.prompt_fields()
        expected = len(fields) + 1
        if len(parts) != expected:
            raise MalformedCredentialStringError(
                self.kind.value, f"expected {expected} fields, got {len(parts)}"
            )

        try:
            declared = parse_auth_kind(parts[0])
        except UnsupportedAuthTypeError as e:
            raise MalformedCredentialStringError(
                self.kind.value, f"unknown kind '{parts[0]}'"
            ) from e
        if declared is not self.kind:
            raise MalformedCredentialStringError(
                self.kind.value, f"declared kind is '{declared.value}'"
            )

        values = dict(zip((f.name for f in fields), parts[1:], strict=True))
        empty = [name for name, value in values.items() if not value]
        if empty:
            raise MalformedCredentialStringError(
                self.kind.value, f"empty field(s): {', '.join(empty)}"
            )

        self._assign(values)
        return self

    def to_string(self) -> str:
        """Serialize to the canonical colon-delimited form.

        Raises:
            CredentialStateError: If the credential is not populated.
            MalformedCredentialStringError: If a field value contains the
                delimiter and could not be parsed back.
        """
        if not self.populated:
            raise CredentialStateError(
                f"Cannot serialize unpopulated '{self.kind.value}' credentials"
            )
        fields = self.prompt_fields()
        values = [getattr(self, f.name) or "" for f in fields]
        unrepresentable = [
            f.name for f, value in zip(fields, values, strict=True) if DELIMITER in value
        ]
        if unrepresentable:
            raise MalformedCredentialStringError(
                self.kind.value,
                f"'{DELIMITER}' is not allowed in {', '.join(unrepresentable)}",
            )
        return DELIMITER.join([self.kind.value, *values])

    async def prompt_credentials(self, prompter: InputPrompter) -> Self:
        """Run one prompt cycle and populate this credential.

        Errors raised by the prompter propagate unchanged.

        Raises:
            PromptFailureError: If the prompter returned no value for a
                required field.
            CredentialStateError: If the credential is already populated.
        """
        self._ensure_unpopulated()

        fields = self.prompt_fields()
        collected = await prompter.collect(fields)

        values: dict[str, str] = {}
        for prompt_field in fields:
            value = collected.get(prompt_field.name) or ""
            if prompt_field.required and not value:
                raise PromptFailureError(
                    f"No value collected for '{prompt_field.name}'", prompt_field.name
                )
            values[prompt_field.name] = value

        self._assign(values)
        return self

    def _assign(self, values: dict[str, str]) -> None:
        for name, value in values.items():
            setattr(self, name, value)
        self.populated = True

    def _ensure_unpopulated(self) -> None:
        if self.populated:
            raise CredentialStateError(
                f"'{self.kind.value}' credentials are already populated"
            )
