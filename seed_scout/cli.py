# === FILE: seed_scout/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for SeedScout.

Commands:
  discover    Discover product URLs for all (or filtered) vendors and update the store
  vendors     List configured vendor domains
  config      Show the effective configuration

Global options:
  --config PATH       YAML/JSON config (default: configs/default.yaml, else built-in defaults)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only if omitted)
  --log-format FORMAT Logging format string

discover options:
  --vendor TEXT       Only vendors whose domain contains TEXT
  --output PATH       Result store (overrides output_path from the config)
  --html PATH         Also write an HTML summary

Also:
  --version, -v       Show the SeedScout version

Example:
  seed-scout discover --vendor rareseeds
"""
import asyncio
import sys
from pathlib import Path

import click

from seed_scout import __version__
from seed_scout.config import load_config
from seed_scout.engine import Engine
from seed_scout.errors import SeedScoutError, VendorFilterError
from seed_scout.logger import DEFAULT_FORMAT, configure
from seed_scout.report.store import ResultStore
from seed_scout.report.summary import render_html, render_table

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def run_discovery(engine: Engine, vendors, store: ResultStore):
    return asyncio.run(engine.run(vendors, store))


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SeedScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON config file (default: configs/default.yaml if present).'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """SeedScout: product URL discovery for seed vendors."""
    configure(level=log_level, log_file=log_file, log_format=log_format)
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('discover', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--vendor', '-V', 'vendor_filter',
    default=None,
    help='Only vendors whose domain contains this substring'
)
@click.option(
    '--output', '-o', 'output_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Result store path (overrides output_path from the config)'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Also write an HTML summary to this file'
)
@click.pass_context
def discover(ctx, vendor_filter, output_path, html_output):
    """Discover product URLs and merge them into the result store."""
    cfg = ctx.obj['config']
    try:
        vendors = cfg.select_vendors(vendor_filter)
    except VendorFilterError as e:
        print_error(str(e))

    store = ResultStore(output_path or cfg.output_path)
    store.load()

    engine = Engine(cfg)
    try:
        results = run_discovery(engine, vendors, store)
    except SeedScoutError as e:
        print_error(f'Discovery aborted: {e}')

    click.echo(render_table(results))
    click.echo(f'\nOutput: {store.path}')

    if html_output:
        try:
            saved_html = render_html(results, html_output)
            click.echo(f'HTML summary: {saved_html}')
        except Exception as e:
            print_error(f'Failed to write HTML summary: {e}')


@cli.command('vendors', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def list_vendors(ctx):
    """List configured vendor domains."""
    for vendor in ctx.obj['config'].vendors:
        click.echo(vendor)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
