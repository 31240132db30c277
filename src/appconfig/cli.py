"""
appconfig CLI: appconfig check | serve | example-env
"""
from pathlib import Path

import click

from appconfig import __version__
from appconfig.config.env_file import read_environment, render_example_env
from appconfig.config.loader import load_config
from appconfig.config.settings import load_runtime_settings
from appconfig.core.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="appconfig")
def cli() -> None:
    """appconfig: validated environment configuration."""
    pass


@cli.command()
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Dotenv file merged into the process environment (default: APP_ENV_FILE or .env)",
)
def check(env_file: Path | None) -> None:
    """Validate the current configuration and print a summary."""
    try:
        if env_file is None:
            env_file = Path(load_runtime_settings().env_file)
        config = load_config(read_environment(env_file))
    except ConfigurationError as e:
        click.echo("Configuration validation failed:", err=True)
        for issue in e.errors:
            source = f" ({issue['variable']})" if issue["variable"] else ""
            click.echo(f"  - {issue['field']}{source}: {issue['message']}", err=True)
        click.echo(f"\nFix the values in {env_file or 'the APP_* variables'} or the process environment.", err=True)
        raise SystemExit(1)

    click.echo("Configuration is valid")
    click.echo("")
    click.echo("Configuration Summary:")
    click.echo(f"  Environment: {config.env.value}")
    click.echo(f"  Port: {config.port}")
    click.echo(
        f"  Database: {config.database.username}@{config.database.host}:"
        f"{config.database.port}/{config.database.database}"
    )


@cli.command()
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Dotenv file merged into the process environment (default: APP_ENV_FILE or .env)",
)
@click.option("--host", default=None, help="Host to bind to (default: APP_HOST)")
def serve(env_file: Path | None, host: str | None) -> None:
    """Validate configuration and start the web application."""
    from appconfig.lifecycle import run

    run(env_file=env_file, host=host)


@cli.command("example-env")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the template to this file instead of stdout",
)
@click.option("--force", is_flag=True, help="Overwrite an existing output file")
def example_env(output: Path | None, force: bool) -> None:
    """Print or write an example .env file."""
    template = render_example_env()
    if output is None:
        click.echo(template, nl=False)
        return

    if output.exists() and not force:
        click.echo(f"{output} already exists; use --force to overwrite", err=True)
        raise SystemExit(1)

    output.write_text(template)
    click.echo(f"Generated {output}")
    click.echo(f"   Copy to .env and fill in your values: cp {output} .env")


if __name__ == "__main__":
    cli()
