"""Main CLI entry point for TopicTalk"""

import typer

from topictalk.__version__ import __version__
from topictalk.cli.commands import ask as ask_module
from topictalk.cli.commands import chat as chat_module

app = typer.Typer(
    name="topictalk",
    help="TopicTalk - rule-based dialogue over a topic graph",
    add_completion=False,
)

# Register subcommands
app.add_typer(chat_module.app, name="chat", help="Start an interactive conversation")
app.command(name="ask", help="Answer one or more utterances and exit")(ask_module.ask)


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"TopicTalk version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """TopicTalk - rule-based dialogue over a topic graph"""
    pass


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
