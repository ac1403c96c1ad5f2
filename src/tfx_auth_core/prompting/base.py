"""Input prompter interface and field descriptors.

This module defines the InputPrompter protocol that collects named fields
from the user, and the PromptField descriptor that each credential variant
uses to describe what it needs.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class FieldKind(Enum):
    """How a field value is read from the user."""

    PLAIN_TEXT = "string"
    MASKED = "password"


@dataclass(frozen=True)
class PromptField:
    """Descriptor of a single value to collect from the user."""

    name: str
    description: str
    arg: str
    kind: FieldKind = FieldKind.PLAIN_TEXT
    required: bool = True

    @property
    def masked(self) -> bool:
        """Whether the value must be read without echo."""
        return self.kind is FieldKind.MASKED


class InputPrompter(Protocol):
    """Interface for interactive field collection."""

    async def collect(self, fields: Sequence[PromptField]) -> dict[str, str]:
        """Collect a value for each field.

        Args:
            fields: Field descriptors, asked in order.

        Returns:
            Mapping of field name to collected value.

        Raises:
            PromptFailureError: When required input cannot be obtained.
        """
        ...
