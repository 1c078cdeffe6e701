# gittouch/cli.py — CLI оболочка поверх TouchRunner
from __future__ import annotations

import click

from gittouch import __version__
from gittouch.core.errors import GitTouchError
from gittouch.core.settings import load_settings
from gittouch.core.workflow import TouchRunner
from gittouch.utils import json_logger as log


@click.command(context_settings={"help_option_names": ["-?", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="git-touch", message="%(prog)s %(version)s")
@click.argument("filename")
@click.pass_context
def main(ctx: click.Context, filename: str):
    """Create and track changes to files with a single command."""
    if not filename:
        raise click.UsageError("FILENAME must not be empty", ctx=ctx)
    try:
        settings = load_settings()
        log.configure(settings.log_level, settings.log_file)
        TouchRunner(settings).run(filename)
    except GitTouchError as e:
        click.echo(str(e), err=True)
        ctx.exit(e.code)


if __name__ == "__main__":
    main()
