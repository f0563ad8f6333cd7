"""Interactive chat runner for TopicTalk CLI."""

import logging
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from topictalk.core.errors import TopicTalkError
from topictalk.framework import TopicTalk
from topictalk.observability.logging import setup_logging

BANNER_ART = r"""
  _              _      _        _ _
 | |_ ___  _ __ (_) ___| |_ __ _| | | __
 | __/ _ \| '_ \| |/ __| __/ _` | | |/ /
 | || (_) | |_) | | (__| || (_| | |   <
  \__\___/| .__/|_|\___|\__\__,_|_|_|\_\
          |_|
"""


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    config_path: Path
    graph_path: Path | None = None
    machine_readable: bool = False
    debug: bool = False


class ChatRunner:
    """Interactive chat session runner.

    Empty input is forwarded to the session: it asks TopicTalk to move on to
    a fresh topic.
    """

    def __init__(self, config: ChatConfig):
        self.config = config
        self.console = Console()
        self.talk: TopicTalk | None = None
        self._running = False

    def setup(self) -> None:
        """Load config and graph.

        Raises:
            TopicTalkError: If config or graph is invalid
        """
        try:
            self.talk = TopicTalk.from_config(
                self.config.config_path, graph_path=self.config.graph_path
            )
        except (FileNotFoundError, TopicTalkError) as e:
            self.console.print(f"[red]Invalid setup: {e}[/]")
            raise

        level = "DEBUG" if self.config.debug else self.talk.config.logging.level
        setup_logging(level, self.talk.config.logging.file)

    def start(self) -> None:
        """Start the interactive session."""
        if self.talk is None:
            self.setup()
        assert self.talk is not None

        self.console.print(BANNER_ART, style="bold magenta")
        self.console.print(
            f"Talking about [green]{len(self.talk.graph)}[/] topics, "
            f"starting at [green]{self.talk.graph.root.name}[/]."
        )
        self.console.print("Press Enter to let me pick a topic. Type 'exit' or 'quit' to end.\n")

        self._running = True
        while self._running:
            try:
                user_input = Prompt.ask("[bold green]You[/]", default="", show_default=False)

                if self._is_exit_command(user_input):
                    self.console.print("\n[yellow]Goodbye![/]")
                    break

                reply = self.talk.respond(user_input, machine_readable=self.config.machine_readable)
                self.console.print(f"[bold magenta]TopicTalk > [/]{escape(reply)}\n")

            except KeyboardInterrupt:
                self.console.print("\n[yellow]Goodbye![/]")
                break
            except Exception as e:
                if self.config.debug:
                    self.console.print_exception()
                else:
                    self.console.print(f"[red]Error: {e}[/]")

    def _is_exit_command(self, user_input: str) -> bool:
        """Check if input is an exit command."""
        return user_input.strip().lower() in ("quit", "exit", "q", "/quit", "/exit")

    def cleanup(self) -> None:
        """Persist discussion counts and release the session."""
        self._running = False
        if self.talk is not None:
            if self.talk.save():
                logging.getLogger(__name__).info("Saved discussion counts")
            self.talk = None

    def __enter__(self) -> "ChatRunner":
        self.setup()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cleanup()


def run_chat_session(config: ChatConfig) -> None:
    """Run an interactive chat session.

    Args:
        config: Chat configuration
    """
    with ChatRunner(config) as runner:
        runner.start()
