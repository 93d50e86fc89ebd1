"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from brander.config import Config, load_config
from brander.core.pipeline import Brander
from brander.doc.registry import get_document_registry
from brander.errors import ConfigError
from brander.logging import setup_logging
from brander.task.registry import get_task_registry


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _config(path: Optional[Path], overrides: dict = None) -> Config:
    """Load config with standard CLI error handling."""
    try:
        return load_config(path, overrides=overrides)
    except ConfigError as e:
        _fail(str(e))


def generate_cmd(
    config: Annotated[Optional[Path], typer.Option("--config", "-c", help="Configuration file (default: .branderrc*)")] = None,
    skip_assets: Annotated[bool, typer.Option("--skip-assets", help="Do not run asset tasks")] = False,
    skip_docs: Annotated[bool, typer.Option("--skip-docs", help="Do not generate documentation")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log warnings and errors")] = False,
    title: Annotated[Optional[str], typer.Option("--title", help="Override the configured title")] = None,
    repository: Annotated[Optional[str], typer.Option("--repository", help="Override the repository URL")] = None,
    ):
    """Run asset tasks, then render every configured document."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING if quiet else None)
    cfg = _config(config, overrides={"title": title, "repository": repository})
    try:
        Brander(cfg).generate(skip_assets=skip_assets, skip_docs=skip_docs)
    except ConfigError as e:
        _fail(str(e))
    except Exception as e:
        _fail("Generation failed", e)


def providers_cmd():
    """List the registered document types and asset tasks."""
    for provider in sorted(get_document_registry().get_all(), key=lambda p: p.get_type()):
        typer.echo(f"doc   {provider.get_type()}")
    for task in get_task_registry().get_all():
        typer.echo(f"task  {task.get_type()}: {task.name}")
