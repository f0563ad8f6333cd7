"""Chat command for interactive sessions."""

from pathlib import Path

import typer

app = typer.Typer(help="Start an interactive conversation")


@app.callback(invoke_without_command=True)
def run_chat(
    config: Path = typer.Option(
        "topictalk.yaml", "--config", "-c", help="Path to topictalk.yaml or config directory"
    ),
    graph: Path | None = typer.Option(
        None, "--graph", "-g", help="Graph file (overrides graph.path in config)"
    ),
    machine: bool = typer.Option(
        False, "--machine", "-m", help="Emit ID:<index>:Speak:<line>:<novelty> replies"
    ),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    ctx: typer.Context = typer.Option(None, hidden=True),  # Inject context
) -> None:
    """Start interactive chat session."""
    if ctx and ctx.invoked_subcommand:
        return

    from topictalk.cli.chat_runner import ChatConfig, run_chat_session

    chat_config = ChatConfig(
        config_path=config,
        graph_path=graph,
        machine_readable=machine,
        debug=debug,
    )

    try:
        run_chat_session(chat_config)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        typer.echo(f"Fatal error: {e}", err=True)
        raise typer.Exit(1)
