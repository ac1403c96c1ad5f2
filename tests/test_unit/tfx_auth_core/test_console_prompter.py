"""Tests for the console input prompter."""

from unittest.mock import MagicMock

import pytest

from tfx_auth_core.exceptions import PromptFailureError
from tfx_auth_core.prompting import ConsolePrompter, FieldKind, PromptField

USERNAME = PromptField(name="username", description="username", arg="username")
PASSWORD = PromptField(
    name="password", description="password", arg="password", kind=FieldKind.MASKED
)
COMMENT = PromptField(
    name="comment", description="comment", arg="comment", required=False
)


class TestConsolePrompter:
    """Test collecting fields from arguments and the terminal."""

    @pytest.mark.asyncio
    async def test_arguments_answer_prompts(self) -> None:
        """Test that supplied arguments are used without asking."""
        input_func = MagicMock()
        getpass_func = MagicMock()
        prompter = ConsolePrompter(
            arguments={"username": "alice", "password": "secret"},
            input_func=input_func,
            getpass_func=getpass_func,
        )

        result = await prompter.collect([USERNAME, PASSWORD])

        assert result == {"username": "alice", "password": "secret"}
        input_func.assert_not_called()
        getpass_func.assert_not_called()

    @pytest.mark.asyncio
    async def test_masked_fields_use_getpass(self) -> None:
        """Test that plain fields echo and masked fields do not."""
        input_func = MagicMock(return_value="  alice  ")
        getpass_func = MagicMock(return_value=" secret ")
        prompter = ConsolePrompter(input_func=input_func, getpass_func=getpass_func)

        result = await prompter.collect([USERNAME, PASSWORD])

        assert result == {"username": "alice", "password": " secret "}
        input_func.assert_called_once_with("Enter username > ")
        getpass_func.assert_called_once_with("Enter password > ")

    @pytest.mark.asyncio
    async def test_only_missing_fields_are_asked(self) -> None:
        """Test mixing arguments and prompts."""
        getpass_func = MagicMock(return_value="secret")
        prompter = ConsolePrompter(
            arguments={"username": "alice", "password": None},
            input_func=MagicMock(),
            getpass_func=getpass_func,
        )

        result = await prompter.collect([USERNAME, PASSWORD])

        assert result == {"username": "alice", "password": "secret"}
        getpass_func.assert_called_once()

    @pytest.mark.asyncio
    async def test_cancelled_input(self) -> None:
        """Test that an aborted prompt is a prompt failure."""
        prompter = ConsolePrompter(input_func=MagicMock(side_effect=EOFError()))

        with pytest.raises(PromptFailureError) as exc_info:
            await prompter.collect([USERNAME])

        assert exc_info.value.field == "username"
        assert exc_info.value.error_code == "PROMPT_FAILURE"

    @pytest.mark.asyncio
    async def test_empty_required_answer(self) -> None:
        """Test that a blank answer for a required field fails."""
        prompter = ConsolePrompter(input_func=MagicMock(return_value="   "))

        with pytest.raises(PromptFailureError):
            await prompter.collect([USERNAME])

    @pytest.mark.asyncio
    async def test_empty_optional_answer(self) -> None:
        """Test that optional fields may be left blank."""
        prompter = ConsolePrompter(input_func=MagicMock(return_value=""))

        assert await prompter.collect([COMMENT]) == {"comment": ""}

    @pytest.mark.asyncio
    async def test_non_interactive_missing_required(self) -> None:
        """Test that non-interactive mode names the missing flag."""
        input_func = MagicMock()
        prompter = ConsolePrompter(interactive=False, input_func=input_func)

        with pytest.raises(PromptFailureError, match="--password"):
            await prompter.collect([PASSWORD])

        input_func.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_interactive_optional(self) -> None:
        """Test that non-interactive mode leaves optional fields blank."""
        prompter = ConsolePrompter(arguments={"username": "alice"}, interactive=False)

        result = await prompter.collect([USERNAME, COMMENT])

        assert result == {"username": "alice", "comment": ""}
