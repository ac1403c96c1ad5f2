"""Interactive input collection for credential variants."""

from .base import FieldKind, InputPrompter, PromptField
from .console import ConsolePrompter

__all__ = [
    "ConsolePrompter",
    "FieldKind",
    "InputPrompter",
    "PromptField",
]
