"""CLI — resolve, check, list, who, validate."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.table import Table

from routegate.config import Config
from routegate.core.errors import RegistryError
from routegate.core.resolver import RouteResolver
from routegate.core.validation import find_registry_problems
from routegate.models.route import ResolvedRoute
from routegate.models.user import User
from routegate.storage.loader import RegistryFileError, load_registry, load_users

logger = logging.getLogger(__name__)


def _registry_path(config: Config, registry: str | None) -> Path:
    return Path(registry).expanduser() if registry else config.registry_path


def _build_resolver(config: Config, registry: str | None) -> RouteResolver:
    path = _registry_path(config, registry)
    try:
        return RouteResolver(load_registry(path), strict=config.strict)
    except (RegistryError, RegistryFileError) as e:
        logger.error("Could not resolve registry %s: %s", path, e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _print_routes(routes: list[ResolvedRoute], *, as_json: bool, title: str) -> None:
    if as_json:
        click.echo(json.dumps([route.to_response() for route in routes], indent=2))
        return

    table = Table(title=title)
    table.add_column("Path", style="cyan")
    table.add_column("Access", style="magenta", justify="right")
    for route in routes:
        table.add_row(route.absolute_path, str(route.access))
    Console().print(table)


@click.group()
@click.version_option(package_name="routegate")
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False), default=None, help="Config file"
)
@click.option("--strict", is_flag=True, help="Validate the registry before resolving")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, strict: bool) -> None:
    """Routegate — route paths and access levels."""
    try:
        config = Config.load(Path(config_path) if config_path else None)
        logging.basicConfig(level=config.log_level.upper())
    except (ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if strict:
        config.strict = True
    ctx.obj = config


@main.command()
@click.argument("registry", type=click.Path(), required=False)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_obj
def resolve(config: Config, registry: str | None, as_json: bool) -> None:
    """Show every route's absolute path and access level."""
    resolver = _build_resolver(config, registry)
    _print_routes(
        list(resolver.routes),
        as_json=as_json or config.output_format == "json",
        title="Resolved Routes",
    )


@main.command()
@click.argument("path")
@click.option("--level", type=int, required=True, help="User access level")
@click.option("--user", "name", default="cli-user", help="User name")
@click.option("--registry", "-r", type=click.Path(), default=None, help="Registry file")
@click.pass_obj
def check(config: Config, path: str, level: int, name: str, registry: str | None) -> None:
    """Check whether a user may access PATH."""
    resolver = _build_resolver(config, registry)
    user = User(name=name, level=level)

    if resolver.has_access(user, path):
        click.echo(f"granted: {user.name} (level {user.level}) may access {path}")
        return
    click.echo(f"denied: {user.name} (level {user.level}) may not access {path}")
    sys.exit(1)


@main.command(name="list")
@click.option("--level", type=int, required=True, help="User access level")
@click.option("--user", "name", default="cli-user", help="User name")
@click.option("--registry", "-r", type=click.Path(), default=None, help="Registry file")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_obj
def list_paths(config: Config, level: int, name: str, registry: str | None, as_json: bool) -> None:
    """List the routes a user may access."""
    resolver = _build_resolver(config, registry)
    user = User(name=name, level=level)
    _print_routes(
        resolver.accessible_paths(user),
        as_json=as_json or config.output_format == "json",
        title=f"Routes for {user.name} (level {user.level})",
    )


@main.command()
@click.argument("users_file", type=click.Path())
@click.argument("path")
@click.option("--registry", "-r", type=click.Path(), default=None, help="Registry file")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_obj
def who(
    config: Config, users_file: str, path: str, registry: str | None, as_json: bool
) -> None:
    """Show which users from USERS_FILE may access PATH."""
    resolver = _build_resolver(config, registry)
    try:
        users = load_users(Path(users_file).expanduser())
    except RegistryFileError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json or config.output_format == "json":
        report = [
            {**user.to_response(), "granted": resolver.has_access(user, path)} for user in users
        ]
        click.echo(json.dumps(report, indent=2))
        return

    table = Table(title=f"Access to {path} (requires {resolver.access_for(path)})")
    table.add_column("User", style="cyan")
    table.add_column("Level", style="magenta", justify="right")
    table.add_column("Access")
    for user in users:
        granted = resolver.has_access(user, path)
        status = "[green]granted[/green]" if granted else "[red]denied[/red]"
        table.add_row(user.name, str(user.level), status)
    Console().print(table)


@main.command()
@click.argument("registry", type=click.Path(), required=False)
@click.pass_obj
def validate(config: Config, registry: str | None) -> None:
    """Report duplicate paths, missing parents and cycles."""
    path = _registry_path(config, registry)
    try:
        routes = load_registry(path)
    except RegistryFileError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    problems = find_registry_problems(routes)
    if not problems:
        click.echo(f"OK: {len(routes)} route(s) in {path}")
        return

    for problem in problems:
        click.echo(f"{problem.kind}: {problem.message}", err=True)
    sys.exit(1)


if __name__ == "__main__":
    main()
