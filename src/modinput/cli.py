# src/modinput/cli.py
"""modinput Command Line Interface.

Runs registered modular inputs without writing a launcher script:

    modinput run heartbeat --scheme
    modinput run heartbeat --validate-arguments < items.xml
    modinput run mypackage.inputs:MyInput < input.xml
"""

from pathlib import Path

import typer
from pydantic import ValidationError

from modinput import __version__
from modinput.contracts.errors import PluginLoadError
from modinput.core.config import HarnessSettings, load_settings
from modinput.core.logging import configure_logging, get_logger
from modinput.harness.script import Script
from modinput.plugins.manager import PluginManager

app = typer.Typer(
    name="modinput",
    help="modinput: run modular inputs under the host protocol.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"modinput version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """modinput: run modular inputs under the host protocol."""
    pass


def _build_manager() -> PluginManager:
    manager = PluginManager()
    manager.register_builtin_plugins()
    manager.load_entrypoints()
    return manager


def _load_cli_settings(settings: str | None) -> HarnessSettings:
    try:
        return load_settings(Path(settings) if settings is not None else None)
    except FileNotFoundError:
        typer.echo(f"Error: Settings file not found: {settings}", err=True)
        raise typer.Exit(1) from None
    except ValidationError as e:
        typer.echo("Configuration errors:", err=True)
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        raise typer.Exit(1) from None


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def run(
    ctx: typer.Context,
    plugin: str = typer.Argument(
        ...,
        help="Registered input name, or 'package.module:ClassName'.",
    ),
    settings: str | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to a harness settings file.",
    ),
) -> None:
    """Run a modular input.

    Remaining arguments are passed to the input unchanged, so
    '--scheme' and '--validate-arguments' select those modes.
    """
    harness_settings = _load_cli_settings(settings)
    configure_logging(harness_settings.log_level)
    logger = get_logger()

    try:
        modular_input = _build_manager().resolve(plugin)
    except (PluginLoadError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    logger.debug("Resolved modular input", reference=plugin, input=modular_input.name)
    exit_code = Script(modular_input, settings=harness_settings).run(list(ctx.args))
    raise typer.Exit(exit_code)


# Plugins subcommand group
plugins_app = typer.Typer(help="Plugin management commands.")
app.add_typer(plugins_app, name="plugins")


@plugins_app.command("list")
def plugins_list() -> None:
    """List available modular inputs."""
    configure_logging()
    logger = get_logger()

    try:
        manager = _build_manager()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    specs = manager.get_specs()
    if not specs:
        typer.echo("  (none available)")
        return

    typer.echo("\nINPUTS:")
    for spec in specs:
        input_cls = manager.get_input_by_name(spec.name)
        description = spec.class_name
        if input_cls is not None:
            # Fall back to the class reference when the scheme cannot be built
            try:
                scheme = input_cls().get_scheme()
            except Exception as e:
                logger.warning(
                    "Cannot read input scheme", input=spec.name, error=str(e)
                )
                scheme = None
            if scheme is not None:
                description = scheme.title
        typer.echo(f"  {spec.name:12} - {description} (v{spec.version})")
    typer.echo()  # Final newline


if __name__ == "__main__":
    app()
