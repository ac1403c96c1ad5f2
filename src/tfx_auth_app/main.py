"""Command-line interface and main entry point.

This module provides the ``tfx-auth`` CLI: resolving credentials for a URL
(from the credential store or by prompting), and forgetting stored ones.
"""
# ruff: noqa: T201

import asyncio
import sys

import environ
import structlog

from tfx_auth_app.cli_config import (
    LoginConfig,
    LogoutConfig,
    StoreConfig,
    create_login_config,
    create_logout_config,
)
from tfx_auth_core import __version__
from tfx_auth_core.config import load_resolver_config
from tfx_auth_core.credentials import Credentials
from tfx_auth_core.exceptions import TfxAuthError
from tfx_auth_core.observability import configure_logging, log_bind
from tfx_auth_core.prompting import ConsolePrompter
from tfx_auth_core.resolver import resolve_credentials
from tfx_auth_core.store import CredentialStore, create_credential_store

# Get logger for this module
logger = structlog.get_logger(__name__)

_COMMAND_ERRORS = (TfxAuthError, ValueError, OSError, environ.MissingEnvValueError)


def create_store(store_config: StoreConfig, service_name: str) -> CredentialStore:
    """Create the credential store selected by the CLI configuration."""
    return create_credential_store(
        store_type=store_config.type,
        service_name=service_name,
        file_path=store_config.path,
        default_ttl=store_config.ttl,
        redis_host=store_config.redis_host,
        redis_port=store_config.redis_port,
        redis_db=store_config.redis_db,
        redis_password=store_config.redis_password,
        env_prefix=store_config.env_prefix,
        aws_region=store_config.aws_region,
        aws_endpoint_url=store_config.aws_endpoint_url,
        aws_profile=store_config.aws_profile,
    )


async def login_async(config: LoginConfig) -> Credentials:
    """Resolve credentials for config.url and optionally store them."""
    resolver_config = load_resolver_config()
    scope = resolver_config.account_scope
    store = create_store(config.store, resolver_config.service_name)

    prompter = ConsolePrompter(
        arguments={
            "token": config.token,
            "username": config.username,
            "password": config.password,
        },
        interactive=not config.no_prompt,
    )

    try:
        with log_bind(url=config.url, store_type=config.store.type):
            credentials = await resolve_credentials(
                config.url,
                config.auth_type,
                store=store,
                prompter=prompter,
                scope=scope,
                # The flag can only force a bypass; TFS_BYPASS_CACHE still applies
                bypass_cache=True if config.bypass_cache else None,
            )
            if config.save:
                await store.store_credential(config.url, scope, credentials.to_string())
    finally:
        await store.close()

    return credentials


async def logout_async(config: LogoutConfig) -> bool:
    """Remove the stored credential for config.url."""
    resolver_config = load_resolver_config()
    store = create_store(config.store, resolver_config.service_name)
    try:
        with log_bind(url=config.url, store_type=config.store.type):
            return await store.clear_credential(
                config.url, resolver_config.account_scope
            )
    finally:
        await store.close()


def login_command(args: list[str] | None = None) -> None:
    """Resolve credentials for a URL.

    Cached credentials are used when present; otherwise the user is prompted,
    with --token, --username and --password answering the prompts up front.

    Args:
        args: Command line arguments after the command name.
    """
    try:
        config = create_login_config(args)
        configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)

        credentials = asyncio.run(login_async(config))

        print(f"Resolved {credentials.describe()} for {config.url}")
        if config.save:
            print("Credentials saved.")

    except _COMMAND_ERRORS as e:
        logger.exception("LOGIN_COMMAND_ERROR", error=str(e))
        print(f"Error: {e!s}")
        sys.exit(1)


def logout_command(args: list[str] | None = None) -> None:
    """Forget the stored credential for a URL.

    Args:
        args: Command line arguments after the command name.
    """
    try:
        config = create_logout_config(args)
        configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)

        removed = asyncio.run(logout_async(config))

        if removed:
            print(f"Removed stored credentials for {config.url}")
        else:
            print(f"No stored credentials for {config.url}")

    except _COMMAND_ERRORS as e:
        logger.exception("LOGOUT_COMMAND_ERROR", error=str(e))
        print(f"Error: {e!s}")
        sys.exit(1)


def show_help() -> None:
    """Show help information for the CLI."""
    help_text = """
tfx credential helper

Usage:
    tfx-auth <command> <url> [options]

Commands:
    login <url>        Resolve credentials for a URL (cached or prompted)
    logout <url>       Forget stored credentials for a URL
    --help, -h         Show this help message
    --version, -v      Show version information

Options for login:
    --auth-type <type>        Auth type when nothing is cached (pat, basic)
    --token <token>           Personal access token
    --username <name>         Username for basic auth
    --password <password>     Password for basic auth
    --save                    Store the resolved credentials
    --no-prompt               Fail instead of prompting
    --bypass-cache            Ignore stored credentials (or set TFS_BYPASS_CACHE=1)

Common options:
    --store <type>            Credential store (memory, file, redis, environment, aws)
    --store-path <path>       JSON credential file (file store)
    --store-ttl <seconds>     Expiry of stored credentials
    --redis-host/--redis-port/--redis-db/--redis-password
    --env-prefix <prefix>     Variable prefix (environment store)
    --aws-region/--aws-endpoint-url/--aws-profile
    --log-level <level>       Log level (DEBUG, INFO, WARNING, ERROR)
    --dev-mode                Human readable logs

Examples:
    tfx-auth login https://dev.azure.com/org --save
    tfx-auth login https://tfs.local/tfs --auth-type basic --username alice
    tfx-auth logout https://dev.azure.com/org
"""
    print(help_text)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    arguments = sys.argv[1:] if argv is None else argv
    if not arguments:
        show_help()
        sys.exit(1)

    command, args = arguments[0], arguments[1:]

    if command == "login":
        login_command(args)
    elif command == "logout":
        logout_command(args)
    elif command in ["--help", "-h", "help"]:
        show_help()
        sys.exit(0)
    elif command in ["--version", "-v", "version"]:
        print(f"tfx-auth, version {__version__}")
        sys.exit(0)
    else:
        show_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
