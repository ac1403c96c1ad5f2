"""Personal access token credentials."""

from dataclasses import dataclass, field

from tfx_auth_core.prompting import FieldKind, PromptField

from .base import AuthKind, Credentials

_TOKEN_FIELDS = (
    PromptField(
        name="token",
        description="personal access token",
        arg="token",
        kind=FieldKind.MASKED,
    ),
)


@dataclass
class TokenCredentials(Credentials):
    """Credentials holding a single opaque token."""

    kind = AuthKind.TOKEN

    token: str | None = field(default=None, repr=False)

    @classmethod
    def prompt_fields(cls) -> tuple[PromptField, ...]:
        """Ask for the token only, without echo."""
        return _TOKEN_FIELDS

    def describe(self) -> str:
        """Summarize the credential without revealing the token."""
        return "personal access token"
