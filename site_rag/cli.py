# === FILE: site_rag/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for SiteRAG.

Commands:
  ingest    Crawl the configured site and fill the vector index
  ask       Answer a question from the indexed content
  config    Show the loaded configuration

Common options:
  --config PATH       Path to the YAML/JSON config (default: configs/default.yaml)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout if omitted)
  --log-format FORMAT Logging format string

ingest options:
  --limit INT         Stop after this many pages (overrides max_pages)
  --json PATH         Save the ingestion report as JSON
  --pretty            Indent JSON output

Example:
  site-rag --config configs/default.yaml ingest --json reports/ingest.json
  site-rag ask "what is cohort about?"
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from site_rag import __version__
from site_rag.config import load_config, load_credentials
from site_rag.engine import ask_question, ingest_site
from site_rag.logger import DEFAULT_FORMAT, init_logging
from site_rag.report.json_report import render_json
from site_rag.retrieval import AnswerStatus

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteRAG, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default='configs/default.yaml',
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Path to the YAML/JSON configuration file.'
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
    help='Log file (stdout if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """SiteRAG: ingest a website into a vector index and ask questions about it."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('ingest', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=1),
    default=None,
    help='Stop after this many pages (overrides max_pages)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the ingestion report as JSON'
)
@click.option(
    '--pretty', is_flag=True,
    help='Indent JSON output (2 spaces)'
)
@click.pass_context
def ingest(ctx, limit, json_output, pretty):
    """Crawl the site and write every page into the index."""
    cfg = ctx.obj['config']
    if limit is not None:
        cfg = cfg.model_copy(update={'max_pages': limit})
    click.echo(f'Ingesting {cfg.seed_url}')
    try:
        report = asyncio.run(ingest_site(cfg, load_credentials()))
    except Exception as e:
        print_error(f'Ingestion failed: {e}')

    if json_output:
        try:
            saved = render_json(report, json_output, pretty=pretty)
        except OSError as e:
            print_error(f'Failed to save JSON report: {e}')
        click.echo(f'JSON report: {saved}')
        return

    if pretty:
        click.echo(json.dumps(report.as_dict(), ensure_ascii=False, indent=2))
        return
    click.echo(f'Ingested {len(report.pages)} page(s), {report.records} record(s) in {report.duration:.2f} s')


@cli.command('ask', context_settings=CONTEXT_SETTINGS)
@click.argument('question')
@click.pass_context
def ask(ctx, question):
    """Answer QUESTION from the indexed content."""
    cfg = ctx.obj['config']
    try:
        answer = asyncio.run(ask_question(cfg, load_credentials(), question))
    except Exception as e:
        print_error(f'Question failed: {e}')

    if answer.status is AnswerStatus.ERROR:
        print_error(answer.text)
    click.echo(answer.text)
    if answer.sources:
        click.echo(f"Sources: {', '.join(answer.sources)}")


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the current configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
