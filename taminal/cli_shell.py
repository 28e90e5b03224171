from __future__ import annotations

import argparse
import logging
import os
import signal
import sys
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from taminal.config.settings import configure_logging
from taminal.container import container
from taminal.entities.Outcome import CommandOutcome, DisplayAction
from taminal.exceptions import ConfigurationError
from taminal.use_cases.shell.engine import ShellEngine
from taminal.utils.paths import split_partial

logger = logging.getLogger(__name__)


def render_outcome(console: Console, err_console: Console, outcome: CommandOutcome) -> None:
    if outcome.display_action is DisplayAction.CLEAR:
        console.clear()
    for line in outcome.output_lines:
        # Text() so file names like "[x]" are not read as markup
        console.print(Text(line))
    for failure in outcome.errors:
        err_console.print(Text(failure.message, style="red"))
    if outcome.exit_code != 0 and not outcome.errors:
        err_console.print(
            Text(f"Command exited with status: {outcome.exit_code}", style="yellow")
        )


def _install_sigint_handler(engine: ShellEngine) -> None:
    """
    Keep Ctrl+C from killing the shell while a child runs.

    On POSIX the child shares the terminal's foreground process group, so the
    terminal has already delivered SIGINT to it and the shell only has to
    survive. On Windows the child runs in its own process group, which does
    not see the console's Ctrl+C, so it is forwarded. At the prompt Ctrl+C
    cancels the line.
    """

    def _sigint_handler(signum, frame):  # type: ignore[no-untyped-def]
        if engine.has_running_child():
            if os.name == "nt":
                engine.interrupt()
            else:
                logger.debug("SIGINT while a child runs; delivered by the terminal")
            return
        raise KeyboardInterrupt

    try:
        signal.signal(signal.SIGINT, _sigint_handler)
    except ValueError as e:
        # signal.signal only works from the main thread
        logger.warning(f"SIGINT handling unavailable: {e}")


def _install_completer(engine: ShellEngine) -> None:
    try:
        import readline
    except ImportError:
        logger.info("readline not available; cd completion disabled")
        return

    cache: dict[str, list[str]] = {}

    def _complete(text: str, state: int) -> Optional[str]:
        if not readline.get_line_buffer().lstrip().startswith("cd "):
            return None
        if state == 0:
            directory_part, _ = split_partial(text)
            cache[text] = [f"{directory_part}{name}/" for name in engine.complete(text)]
        candidates = cache.get(text, [])
        return candidates[state] if state < len(candidates) else None

    readline.set_completer_delims(" \t\n")
    readline.set_completer(_complete)
    readline.parse_and_bind("tab: complete")


def run_loop(engine: ShellEngine, console: Console, err_console: Console) -> int:
    """Prompt, submit and render until the session terminates."""
    while not engine.is_terminated():
        try:
            line = console.input(f"[cyan]{escape(engine.get_prompt_text())}>[/cyan] ")
        except EOFError:
            console.print()
            engine.end_of_input()
            break
        except KeyboardInterrupt:
            console.print()
            continue

        try:
            outcome = engine.submit(line)
        except KeyboardInterrupt:
            console.print()
            err_console.print("[yellow]Interrupted.[/yellow]")
            continue

        if outcome is not None:
            render_outcome(console, err_console, outcome)

    console.print("Goodbye!")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="taminal",
        description="Simple interactive shell with built-in file commands.",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Start in this directory (default: current)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (NO_COLOR is honoured too)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override TAMINAL_LOG_LEVEL (e.g. DEBUG, INFO)",
    )
    args = parser.parse_args(argv)

    try:
        settings = container.get_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    configure_logging((args.log_level or settings.log_level).upper())

    color = settings.color_enabled and not args.no_color
    console = Console(no_color=not color, highlight=False, soft_wrap=True)
    err_console = Console(stderr=True, no_color=not color, highlight=False, soft_wrap=True)

    try:
        engine = container.create_shell_engine(args.cwd)
    except NotADirectoryError as e:
        err_console.print(Text(f"taminal: {e}", style="red"))
        return 2

    console.print(
        Panel(
            "Taminal - Type 'exit' or 'quit' to exit\n"
            "Tip: Type 'help' to see available commands",
            title="Taminal",
            border_style="cyan",
            box=box.ROUNDED,
        )
    )

    _install_sigint_handler(engine)
    _install_completer(engine)
    return run_loop(engine, console, err_console)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
