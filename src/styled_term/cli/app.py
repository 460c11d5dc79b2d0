"""Typer CLI application: color swatches and a styled prompt."""

from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.table import Table
    from rich.text import Text
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


class OnInterrupt(str, Enum):
    """What the prompt command does when the user presses Ctrl-C."""
    EXIT = "exit"
    ABORT = "abort"
    CONTINUE = "continue"


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install styled-term[cli]")

    app = typer.Typer(
        name="styled-term",
        help="Preview ANSI color quantization and read styled input.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def swatch(
        colors: Annotated[list[str], typer.Argument(help="Color names or expressions (red, orange, #336699, rgb(10,20,30))")],
    ) -> None:
        """Show the escape codes each color quantizes to in every mode."""
        from styled_term.core.color import AnsiColorMode, color_code
        from styled_term.core.constants import FOREGROUND_PREFIX
        from styled_term.core.style import StyleData, ansi_color, wrap

        table = Table(title="ANSI color codes")
        table.add_column("Color", style="bold")
        for mode in AnsiColorMode:
            table.add_column(mode.value)
            table.add_column("")

        failed = False
        for name in colors:
            row = [name]
            for mode in AnsiColorMode:
                code = color_code(name, mode)
                if code is None:
                    row.extend(["-", ""])
                    continue
                sample = wrap(StyleData(color=ansi_color(FOREGROUND_PREFIX, name, mode)), "████")
                row.extend([code, Text.from_ansi(sample)])
            if all(cell == "-" for cell in row[1::2]):
                failed = True
            table.add_row(*row)

        console.print(table)
        if failed:
            console.print("[red]Some colors could not be resolved[/]")
            raise typer.Exit(1)

    @app.command()
    def prompt(
        message: Annotated[str, typer.Argument(help="Prompt text")] = "> ",
        prompt_color: Annotated[Optional[str], typer.Option("--prompt-color", help="Prompt text color")] = None,
        prompt_bgcolor: Annotated[Optional[str], typer.Option("--prompt-bgcolor", help="Prompt background color")] = None,
        input_color: Annotated[Optional[str], typer.Option("--input-color", help="Input text color")] = None,
        input_bgcolor: Annotated[Optional[str], typer.Option("--input-bgcolor", help="Input background color")] = None,
        bold: Annotated[bool, typer.Option("--bold", "-b", help="Bold prompt text")] = False,
        mode: Annotated[Optional[str], typer.Option("--mode", "-m", help="ANSI color mode: standard, indexed or rgb")] = None,
        mask: Annotated[bool, typer.Option("--mask", help="Echo * instead of the typed characters")] = False,
        config: Annotated[Optional[Path], typer.Option("--config", "-c", help="TOML file with style properties")] = None,
        on_interrupt: Annotated[OnInterrupt, typer.Option("--on-interrupt", help="Ctrl-C behavior")] = OnInterrupt.EXIT,
    ) -> None:
        """Read one line of input with styled prompt and input text."""
        from styled_term.config.properties import TerminalProperties
        from styled_term.term.terminal import StyledTerminal

        term = StyledTerminal()
        props = TerminalProperties(term)
        if config is not None:
            props.load(config)
        if mode is not None:
            props.set("ansi.color.mode", mode)
        overrides = {
            "prompt.color": prompt_color,
            "prompt.bgcolor": prompt_bgcolor,
            "input.color": input_color,
            "input.bgcolor": input_bgcolor,
        }
        props.update({key: value for key, value in overrides.items() if value is not None})
        if bold:
            props.set("prompt.bold", True)

        if on_interrupt is not OnInterrupt.EXIT:
            def handle_interrupt(t: StyledTerminal) -> None:
                t.print("^C\n")

            term.register_user_interrupt_handler(handle_interrupt, on_interrupt is OnInterrupt.ABORT)

        term.raw_print(message)
        line = term.read(masking=mask)
        term.println()
        if not mask:
            console.print(f"You entered: [bold]{line!r}[/]")
        else:
            console.print(f"Read {len(line)} characters")

    return app
