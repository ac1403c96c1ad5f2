"""CLI configuration using environ-config.

This module defines the configuration classes for the command-line commands.
Every option can be given as a flag or as a TFX_APP_* environment variable;
flags win over the environment.
"""

import argparse
import os
from collections.abc import Sequence
from typing import Any, TypeVar

import attr
import environ

from tfx_auth_core.store import CREDENTIAL_STORE_TYPES

ENV_PREFIX = "TFX_APP"

_ConfigT = TypeVar("_ConfigT")


@environ.config
class StoreConfig:
    """Credential store selection, shared by all commands."""

    type: str = environ.var(
        default="file",
        help=f"Credential store to use ({', '.join(CREDENTIAL_STORE_TYPES)})",
    )
    path: str | None = environ.var(
        default=None, help="JSON credential file (when using file)"
    )
    ttl: int | None = environ.var(
        default=None,
        converter=attr.converters.optional(int),
        help="Seconds before a stored credential expires (memory, file, redis)",
    )
    redis_host: str | None = environ.var(default=None, help="Redis host")
    redis_port: int | None = environ.var(
        default=None, converter=attr.converters.optional(int), help="Redis port"
    )
    redis_db: int | None = environ.var(
        default=None, converter=attr.converters.optional(int), help="Redis database"
    )
    redis_password: str | None = environ.var(default=None, help="Redis password")
    env_prefix: str | None = environ.var(
        default=None, help="Variable name prefix (when using environment)"
    )
    aws_region: str | None = environ.var(
        default=None, help="AWS region for Secrets Manager (when using aws)"
    )
    aws_endpoint_url: str | None = environ.var(
        default=None, help="AWS endpoint URL, e.g. LocalStack (when using aws)"
    )
    aws_profile: str | None = environ.var(
        default=None, help="AWS profile (when using aws)"
    )


@environ.config(prefix=ENV_PREFIX)
class LoginConfig:
    """Configuration for the login command."""

    url: str = environ.var(help="Target URL to resolve credentials for")
    auth_type: str = environ.var(
        default="pat", help="Auth type when nothing is cached (pat or basic)"
    )
    token: str | None = environ.var(default=None, help="Personal access token")
    username: str | None = environ.var(default=None, help="Username for basic auth")
    password: str | None = environ.var(default=None, help="Password for basic auth")
    save: bool = environ.bool_var(
        default=False, help="Store the resolved credential for next time"
    )
    no_prompt: bool = environ.bool_var(
        default=False, help="Fail instead of prompting for missing values"
    )
    bypass_cache: bool = environ.bool_var(
        default=False, help="Ignore cached credentials"
    )
    store: StoreConfig = environ.group(StoreConfig)
    log_level: str = environ.var(default="WARNING", help="Log level")
    dev_mode: bool = environ.bool_var(
        default=False, help="Enable development mode logging"
    )


@environ.config(prefix=ENV_PREFIX)
class LogoutConfig:
    """Configuration for the logout command."""

    url: str = environ.var(help="Target URL to forget credentials for")
    store: StoreConfig = environ.group(StoreConfig)
    log_level: str = environ.var(default="WARNING", help="Log level")
    dev_mode: bool = environ.bool_var(
        default=False, help="Enable development mode logging"
    )


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("url", nargs="?", help="Target URL")
    parser.add_argument("--store", dest="STORE_TYPE", choices=CREDENTIAL_STORE_TYPES)
    parser.add_argument("--store-path", dest="STORE_PATH")
    parser.add_argument("--store-ttl", dest="STORE_TTL")
    parser.add_argument("--redis-host", dest="STORE_REDIS_HOST")
    parser.add_argument("--redis-port", dest="STORE_REDIS_PORT")
    parser.add_argument("--redis-db", dest="STORE_REDIS_DB")
    parser.add_argument("--redis-password", dest="STORE_REDIS_PASSWORD")
    parser.add_argument("--env-prefix", dest="STORE_ENV_PREFIX")
    parser.add_argument("--aws-region", dest="STORE_AWS_REGION")
    parser.add_argument("--aws-endpoint-url", dest="STORE_AWS_ENDPOINT_URL")
    parser.add_argument("--aws-profile", dest="STORE_AWS_PROFILE")
    parser.add_argument("--log-level", dest="LOG_LEVEL")
    parser.add_argument("--dev-mode", dest="DEV_MODE", action="store_true", default=None)


def _login_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tfx-auth login", add_help=False)
    _add_common_arguments(parser)
    parser.add_argument("--auth-type", dest="AUTH_TYPE")
    parser.add_argument("--token", dest="TOKEN")
    parser.add_argument("--username", dest="USERNAME")
    parser.add_argument("--password", dest="PASSWORD")
    parser.add_argument("--save", dest="SAVE", action="store_true", default=None)
    parser.add_argument(
        "--no-prompt", dest="NO_PROMPT", action="store_true", default=None
    )
    parser.add_argument(
        "--bypass-cache", dest="BYPASS_CACHE", action="store_true", default=None
    )
    return parser


def _logout_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tfx-auth logout", add_help=False)
    _add_common_arguments(parser)
    return parser


def args_to_config_class(
    config_cls: type[_ConfigT],
    parser: argparse.ArgumentParser,
    args: Sequence[str] | None = None,
) -> _ConfigT:
    """Build a config class from command line arguments over the environment.

    Each parsed flag is mapped to its TFX_APP_* variable name, layered over
    os.environ, and handed to environ-config for conversion.

    Raises:
        environ.MissingEnvValueError: If a required value is given neither
            as an argument nor in the environment.
        ValueError: If an argument cannot be parsed.
    """
    try:
        namespace = parser.parse_args(list(args or []))
    except SystemExit as e:
        raise ValueError(f"Invalid arguments: {' '.join(args or [])}") from e  # noqa: TRY003

    overrides: dict[str, Any] = {}
    for dest, value in vars(namespace).items():
        if value is None:
            continue
        name = "URL" if dest == "url" else dest
        overrides[f"{ENV_PREFIX}_{name}"] = "true" if value is True else str(value)

    return environ.to_config(config_cls, environ={**os.environ, **overrides})


def create_login_config(args: Sequence[str] | None = None) -> LoginConfig:
    """Create a LoginConfig from command line arguments and environment variables.

    Args:
        args: Command line arguments after the command name.

    Returns:
        LoginConfig instance populated from args and environment variables.
    """
    return args_to_config_class(LoginConfig, _login_parser(), args)


def create_logout_config(args: Sequence[str] | None = None) -> LogoutConfig:
    """Create a LogoutConfig from command line arguments and environment variables.

    Args:
        args: Command line arguments after the command name.

    Returns:
        LogoutConfig instance populated from args and environment variables.
    """
    return args_to_config_class(LogoutConfig, _logout_parser(), args)
