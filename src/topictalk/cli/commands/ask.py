"""One-shot ask command."""

from pathlib import Path

import typer

from topictalk.core.errors import TopicTalkError
from topictalk.framework import TopicTalk
from topictalk.observability.logging import setup_logging


def ask(
    utterances: list[str] = typer.Argument(..., help="Utterances, answered in order"),
    config: Path = typer.Option(
        "topictalk.yaml", "--config", "-c", help="Path to topictalk.yaml or config directory"
    ),
    graph: Path | None = typer.Option(
        None, "--graph", "-g", help="Graph file (overrides graph.path in config)"
    ),
    machine: bool = typer.Option(
        False, "--machine", "-m", help="Emit ID:<index>:Speak:<line>:<novelty> replies"
    ),
) -> None:
    """Answer each utterance in turn within one conversation."""
    try:
        talk = TopicTalk.from_config(config, graph_path=graph)
    except (FileNotFoundError, TopicTalkError) as e:
        typer.echo(f"Fatal error: {e}", err=True)
        raise typer.Exit(1)

    setup_logging(talk.config.logging.level, talk.config.logging.file)
    for utterance in utterances:
        typer.echo(talk.respond(utterance, machine_readable=machine))
    talk.save()
