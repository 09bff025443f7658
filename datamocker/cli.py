"""Command line interface for datamocker."""

from __future__ import annotations

import logging
import re
import sys
from datetime import date
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from datamocker.config import MockerConfig, load_config
from datamocker.errors import DataMockerError, InvalidArgumentError
from datamocker.mocker import DataMocker
from datamocker.observability import configure_logging, log_context
from datamocker.providers.base import MockProvider
from datamocker.tables.addresses import COUNTRY_PROFILES
from datamocker.tables.phones import PHONE_PROFILES

logger = logging.getLogger(__name__)

console = Console()

INTEGER = re.compile(r"-?(0|[1-9]\d*)")
DECIMAL = re.compile(r"-?\d+\.\d+")
ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_value(raw: str) -> Any:
    """Turn a command line token into the Python value it spells.

    Integers, floats, ``true``/``false``, ``none`` and ISO dates are
    recognised. Anything else stays a string.
    """
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered == "none":
        return None
    # leading zeros and "+" signs are kept as text, e.g. phone numbers
    if INTEGER.fullmatch(raw):
        return int(raw)
    if DECIMAL.fullmatch(raw):
        return float(raw)
    if ISO_DATE.fullmatch(raw):
        try:
            return date.fromisoformat(raw)
        except ValueError:
            raise click.BadParameter(f"Invalid date: {raw}", param_hint="ARGS") from None
    return raw


def split_arguments(tokens: tuple[str, ...]) -> tuple[list[Any], dict[str, Any]]:
    """Split ``a 1 key=value`` into positional and keyword arguments."""
    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for token in tokens:
        key, sep, value = token.partition("=")
        if sep and key.isidentifier():
            kwargs[key] = parse_value(value)
        elif kwargs:
            raise click.BadParameter(
                f"Positional argument {token!r} follows keyword arguments", param_hint="ARGS"
            )
        else:
            args.append(parse_value(token))
    return args, kwargs


def list_operations(provider: Any) -> list[str]:
    if isinstance(provider, MockProvider):
        return provider.operations()
    return sorted(
        name
        for name in dir(provider)
        if not name.startswith("_") and callable(getattr(provider, name))
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.option("--seed", "-s", type=int, default=None, help="Seed for reproducible output")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    config: str | None,
    seed: int | None,
    json_logs: bool,
) -> None:
    """datamocker - plausible mock data for tests and demos."""
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError
        raise click.ClickException(f"Invalid configuration: {e}") from e

    updates: dict[str, Any] = {}
    if seed is not None:
        updates["seed"] = seed
    if verbose:
        updates["log_level"] = "DEBUG"
    if json_logs:
        updates["json_logs"] = True
    if updates:
        config_obj = config_obj.model_copy(update=updates)

    configure_logging(level=config_obj.log_level, json_format=config_obj.json_logs)

    ctx.obj["config"] = config_obj
    ctx.obj["verbose"] = verbose


def _mocker(ctx: click.Context) -> DataMocker:
    if "mocker" not in ctx.obj:
        config: MockerConfig = ctx.obj["config"]
        ctx.obj["mocker"] = DataMocker(config)
    return ctx.obj["mocker"]


@cli.command()
@click.argument("category")
@click.argument("operation")
@click.argument("args", nargs=-1)
@click.pass_context
def generate(
    ctx: click.Context,
    category: str,
    operation: str,
    args: tuple[str, ...],
) -> None:
    """Generate one value: CATEGORY OPERATION [ARGS]...

    ARGS are positional values or key=value pairs, for example:

        datamocker generate number even 1 100

        datamocker generate name name region=nigerian name_format=title_first_last
    """
    mocker = _mocker(ctx)
    positional, keywords = split_arguments(args)

    try:
        provider = mocker.provider(category)
        if operation not in list_operations(provider):
            raise InvalidArgumentError(
                f"Unknown operation '{operation}' for {category}. "
                f"Available: {', '.join(list_operations(provider))}",
                category=category,
                operation=operation,
            )
        with log_context(category=category, operation=operation):
            logger.debug("Calling %s.%s with %r %r", category, operation, positional, keywords)
            value = getattr(provider, operation)(*positional, **keywords)
    except DataMockerError as e:
        click.echo(e.format_verbose() if ctx.obj["verbose"] else str(e), err=True)
        sys.exit(1)
    except TypeError as e:
        click.echo(f"Invalid arguments for {category}.{operation}: {e}", err=True)
        sys.exit(2)

    click.echo(value)


@cli.command()
@click.pass_context
def providers(ctx: click.Context) -> None:
    """List registered providers and their operations."""
    mocker = _mocker(ctx)

    table = Table(title="Providers")
    table.add_column("Key", style="cyan")
    table.add_column("Class")
    table.add_column("Operations", style="dim")

    for key in mocker.registry.keys():
        provider = mocker.provider(key)
        table.add_row(key, type(provider).__name__, ", ".join(list_operations(provider)))

    console.print(table)


@cli.command()
def countries() -> None:
    """List country codes supported by the address and phone providers."""
    table = Table(title="Supported countries")
    table.add_column("Code", style="cyan")
    table.add_column("Address")
    table.add_column("Phone prefix")
    table.add_column("Local digits", justify="right")

    for code in sorted(set(COUNTRY_PROFILES) | set(PHONE_PROFILES)):
        phone = PHONE_PROFILES.get(code)
        table.add_row(
            code,
            "yes" if code in COUNTRY_PROFILES else "-",
            phone.international_prefix if phone else "-",
            str(phone.number_length) if phone else "-",
        )

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
