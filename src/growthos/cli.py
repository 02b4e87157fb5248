"""Command-line interface for growthos."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from growthos import __version__
from growthos.config import get_default_config
from growthos.project import init_project
from growthos.report import render_summary, share_message
from growthos.scanner import audit_repo
from growthos.schemas import export, load_config

CONTEXT_SETTINGS = {
    'help_option_names': ['-h', '--help'],
    'max_content_width': 120
}

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.pass_context
def cli(ctx, verbose: bool):
    """Growth in a Box - Analytics, A/B tests & referrals for indie hackers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

@cli.command()
@click.argument('repo', type=str)
@click.option('--output', '-o', type=str, help='Save audit report under this name')
@click.option('--share', is_flag=True, help='Generate shareable score for social media')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='growthos.yaml to read API and scoring settings from')
def audit(repo: str, output: Optional[str], share: bool, config_path: Optional[str]):
    """🔍 Scan GitHub repo (owner/repo) for missing growth events."""
    click.secho('🔍 Scanning repo for growth opportunities...', fg='blue')

    try:
        cfg = load_config(config_path) if config_path else get_default_config()
        score = audit_repo(repo, output=output, config=cfg)
    except Exception as e:
        click.secho(f'❌ Audit failed: {e}', fg='red', err=True)
        sys.exit(1)

    summary = render_summary(score)
    click.secho(summary[0], fg='green')
    click.secho(summary[1], fg='yellow')
    for line in summary[2:]:
        click.secho(line, fg='red')

    if share:
        click.secho(f'\n🚀 Shareable: "{share_message(score)}"', fg='cyan')

    click.secho('\n💡 Fix these issues with: npx growthos init', fg='blue')
    click.secho('   Get full analytics + A/B tests + referrals in <30min', fg='bright_black')

@cli.command()
@click.option('--key', '-k', type=str, help='PostHog API key')
@click.option('--skip-setup', is_flag=True, help='Skip interactive setup')
@click.option('--overwrite', is_flag=True, help='Replace an existing growthos.yaml')
@click.option('--path', type=click.Path(file_okay=False), default='.', show_default=True,
              help='Project directory to initialize')
def init(key: Optional[str], skip_setup: bool, overwrite: bool, path: str):
    """🚀 Initialize GrowthOS in your project."""
    click.secho('🚀 Initializing GrowthOS...', fg='blue')

    try:
        config_path = init_project(path, key=key, skip_setup=skip_setup, overwrite=overwrite)
    except Exception as e:
        click.secho(f'❌ Init failed: {e}', fg='red', err=True)
        sys.exit(1)

    click.echo(f"Configuration saved to {config_path}")
    click.secho('\n✅ GrowthOS ready! Check your dashboard in <5min', fg='green')

@cli.command(name='schemas')
@click.option('--output', '-o', type=click.Path(file_okay=False), default='schemas', show_default=True,
              help='Directory to write the JSON schemas to')
def schemas_command(output: str):
    """Write JSON schemas for growthos.yaml and audit reports."""
    for path in export(Path(output)):
        click.echo(f"Schema saved to {path}")

if __name__ == '__main__':
    cli()
