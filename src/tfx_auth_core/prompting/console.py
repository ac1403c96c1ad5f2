"""Terminal input prompter.

This module provides the ConsolePrompter class, which takes values passed on
the command line first and asks on the terminal for whatever is missing.
"""

import asyncio
import getpass
from collections.abc import Callable, Mapping, Sequence

import structlog

from tfx_auth_core.exceptions import PromptFailureError

from .base import PromptField

# Get logger for this module
logger = structlog.get_logger(__name__)


class ConsolePrompter:
    """Prompter reading from command-line arguments, then from the terminal."""

    def __init__(
        self,
        arguments: Mapping[str, str | None] | None = None,
        interactive: bool = True,  # noqa: FBT001, FBT002
        input_func: Callable[[str], str] = input,
        getpass_func: Callable[[str], str] = getpass.getpass,
    ) -> None:
        """Initialize the console prompter.

        Args:
            arguments: Values already supplied on the command line, keyed by
                the field's argument alias.
            interactive: If False, missing required fields fail instead of
                being asked for.
            input_func: Reader for plain-text fields.
            getpass_func: Reader for masked fields.
        """
        self._arguments = dict(arguments or {})
        self._interactive = interactive
        self._input = input_func
        self._getpass = getpass_func

    async def collect(self, fields: Sequence[PromptField]) -> dict[str, str]:
        """Collect a value for each field, one prompt at a time."""
        result: dict[str, str] = {}
        for field in fields:
            supplied = self._arguments.get(field.arg)
            if supplied:
                logger.debug("PROMPT_FIELD_FROM_ARGUMENT", field=field.name, arg=field.arg)
                result[field.name] = supplied
                continue

            if not self._interactive:
                if field.required:
                    raise PromptFailureError(
                        f"Missing required input '{field.name}' "
                        f"(pass --{field.arg.replace('_', '-')})",
                        field.name,
                    )
                result[field.name] = ""
                continue

            result[field.name] = await self._ask(field)
        return result

    async def _ask(self, field: PromptField) -> str:
        reader = self._getpass if field.masked else self._input
        prompt = f"Enter {field.description} > "
        try:
            value = await asyncio.to_thread(reader, prompt)
        except (EOFError, KeyboardInterrupt) as e:
            raise PromptFailureError(
                f"Input cancelled while reading '{field.name}'", field.name
            ) from e

        # Secrets are kept byte for byte
        if not field.masked:
            value = value.strip()
        if field.required and not value:
            raise PromptFailureError(f"'{field.name}' is required", field.name)
        return value
