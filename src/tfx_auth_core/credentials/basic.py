"""Username and password credentials."""

from dataclasses import dataclass, field

from tfx_auth_core.prompting import FieldKind, PromptField

from .base import AuthKind, Credentials

_BASIC_FIELDS = (
    PromptField(name="username", description="username", arg="username"),
    PromptField(
        name="password",
        description="password",
        arg="password",
        kind=FieldKind.MASKED,
    ),
)


@dataclass
class BasicCredentials(Credentials):
    """Credentials for HTTP basic authentication."""

    kind = AuthKind.BASIC

    username: str | None = None
    password: str | None = field(default=None, repr=False)

    @classmethod
    def prompt_fields(cls) -> tuple[PromptField, ...]:
        """Ask for the username, then the password without echo."""
        return _BASIC_FIELDS

    def describe(self) -> str:
        """Summarize the credential by username."""
        return f"username/password for '{self.username}'"
