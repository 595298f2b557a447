"""Configuration commands."""

from pathlib import Path

import click

from ledgrid.models import DEFAULT_CONFIG_PATH, AppConfig


@click.group()
@click.option(
    '--path',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file to use (default: ~/.ledgrid/config.json)'
)
@click.pass_context
def config(ctx, config_path: Path | None):
    """Show or reset LED grid settings."""
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path or DEFAULT_CONFIG_PATH


@config.command()
@click.pass_context
def show(ctx):
    """Display the current configuration."""
    path: Path = ctx.obj['config_path']
    config_obj = AppConfig.load_or_default(path)

    click.echo(f"Config file: {path}")
    click.echo(f"  lit_color:    {config_obj.lit_color.to_hex()}")
    click.echo(f"  unlit_color:  {config_obj.unlit_color.to_hex()}")
    click.echo(f"  show_indices: {config_obj.show_indices}")


@config.command()
@click.pass_context
def path(ctx):
    """Print the config file location."""
    click.echo(str(ctx.obj['config_path']))


@config.command()
@click.confirmation_option(prompt='Reset all settings to defaults?')
@click.pass_context
def reset(ctx):
    """Reset the configuration to defaults."""
    path: Path = ctx.obj['config_path']
    AppConfig().save(path)
    click.echo(f"Configuration reset: {path}")
