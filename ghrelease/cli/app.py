from __future__ import annotations

import typer

from ghrelease.cli.commands.publish_cmd import publish


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)

# A single command: typer runs it directly, flags need no subcommand name.
app.command()(publish)


def main() -> None:
    app()
