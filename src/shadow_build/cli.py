"""Command-line interface for shadow-build."""

import sys

import click

from shadow_build.builder import ShadowBuilder
from shadow_build.config import ShadowConfig
from shadow_build.env import EnvironmentSnapshot
from shadow_build.ci import detect as detect_ci
from shadow_build.utils.console import (
    _rich_success, _rich_error, _rich_info, _rich_warning, _rich_echo,
    _create_facts_table, _get_console
)
from shadow_build.version import get_version


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    _rich_echo(f"shadow-build version {get_version()}", color="cyan", bold=True)
    ctx.exit()


def _load_config(src_dir, config_file, output, exclude):
    return ShadowConfig.from_shadow_yml(
        src_dir,
        config_file=config_file,
        output_file=output,
        exclude=list(exclude) if exclude else None,
    )


@click.group(help="shadow-build: record build provenance as generated constants")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
def cli():
    """Main entry point for the shadow-build CLI."""


@cli.command(help="Generate the constants file for SRC_DIR into OUT_DIR")
@click.argument('src_dir', default=".", type=click.Path(file_okay=False))
@click.argument('out_dir', envvar='OUT_DIR', default=".", type=click.Path(file_okay=False))
@click.option('--config', 'config_file', type=click.Path(dir_okay=False),
              help="Configuration file (defaults to SRC_DIR/shadow.yml)")
@click.option('--output', '-o', help="Generated file name (default: shadow.rs)")
@click.option('--exclude', '-x', multiple=True, help="Constant to leave out; repeatable")
@click.option('--quiet', '-q', is_flag=True, help="Only report failures")
def build(src_dir, out_dir, config_file, output, exclude, quiet):
    """Collect facts and write the generated file."""
    config = _load_config(src_dir, config_file, output, exclude)
    builder = ShadowBuilder(src_dir, env=EnvironmentSnapshot.capture(), config=config)
    result = builder.build(out_dir)

    for warning in result.warnings:
        _rich_warning(warning, symbol="warning")

    if not result.success:
        for error in result.errors:
            _rich_error(error, symbol="error")
        sys.exit(1)

    if not quiet:
        _rich_success(f"shadow build success: {result.output_path}", symbol="success")
        _rich_info(f"{len(result.store)} constants written (ci: {result.ci})")


@cli.command(help="Print the detected CI platform")
def detect():
    """Detect the CI platform from the current environment."""
    platform = detect_ci(EnvironmentSnapshot.capture())
    click.echo(str(platform))


@cli.command(help="Show the facts that would be generated, without writing")
@click.argument('src_dir', default=".", type=click.Path(file_okay=False))
@click.option('--config', 'config_file', type=click.Path(dir_okay=False),
              help="Configuration file (defaults to SRC_DIR/shadow.yml)")
@click.option('--exclude', '-x', multiple=True, help="Constant to leave out; repeatable")
def show(src_dir, config_file, exclude):
    """Display collected facts as a table."""
    config = _load_config(src_dir, config_file, None, exclude)
    builder = ShadowBuilder(src_dir, env=EnvironmentSnapshot.capture(), config=config)
    store = builder.collect()

    for warning in config.warnings:
        _rich_warning(warning, symbol="warning")

    console = _get_console()
    if console:
        console.print(_create_facts_table(store, title=f"Build facts (ci: {builder.ci})"))
    else:
        for name, val in store.items():
            click.echo(f"{name.upper()} = {val.rendered!r}")


def main():
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
