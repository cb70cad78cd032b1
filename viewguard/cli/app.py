"""Main Typer application — registers the demo commands.

Entry point: ``viewguard`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer

from viewguard.cli.commands.demos import all_cmd, builder_mutation_cmd, unmodifiable_view_cmd
from viewguard.config import config

app = typer.Typer(
    name="viewguard",
    help="Viewguard: read-only views vs. defensive copies, demonstrated.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def _configure_logging() -> None:
    """Read-only views and builder snapshots, demonstrated."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
app.command(
    name="unmodifiable-view", help="A read-only view reflects changes to its backing list."
)(unmodifiable_view_cmd)
app.command(
    name="builder-mutation", help="A built Person is unaffected by later builder changes."
)(builder_mutation_cmd)
app.command(name="all", help="Run both demonstrations.")(all_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
