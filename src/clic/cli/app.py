"""Typer CLI application exercising geometry, key capture and drawing."""

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from clic.core.color import Color
from clic.core.errors import ClicError, NoControllingTerminal
from clic.core.input import KeyDecoder, key_name
from clic.core.terminal import get_screen_size
from clic.render.screen import Screen
from clic.utils.logging import setup_logging

QUIT_KEY = ord("q")


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="clic",
        help="Terminal drawing primitives: size queries, key capture, boxes and colors.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def configure(
        log_level: Annotated[Optional[str], typer.Option("--log-level", "-l", help="Log level (default from CLIC_LOG_LEVEL)")] = None,
    ) -> None:
        """Configure logging before any command runs."""
        try:
            setup_logging(log_level)
        except ValueError as exc:
            console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(2)

    @app.command()
    def size() -> None:
        """Print the terminal size as WIDTHxHEIGHT."""
        try:
            screen_size = get_screen_size()
        except NoControllingTerminal as exc:
            console.print(f"[red]No controlling terminal:[/] {escape(str(exc))}")
            raise typer.Exit(1)
        print(f"{screen_size.width}x{screen_size.height}")

    @app.command()
    def keys(
        count: Annotated[Optional[int], typer.Option("--count", "-n", min=1, help="Stop after N keys")] = None,
    ) -> None:
        """Show the code and name of each key pressed ([bold]q[/] quits)."""
        try:
            decoder = KeyDecoder()
        except NoControllingTerminal as exc:
            console.print(f"[red]No controlling terminal:[/] {escape(str(exc))}")
            raise typer.Exit(1)
        except ValueError as exc:
            console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(2)

        console.print("[dim]Press keys, q to quit[/]")
        captured = 0
        while count is None or captured < count:
            try:
                code = decoder.capture()
            except ClicError as exc:
                console.print(f"[red]Key capture failed:[/] {escape(str(exc))}")
                raise typer.Exit(1)
            captured += 1
            console.print(f"{code:>5}  [bold]{escape(key_name(code))}[/]")
            if code == QUIT_KEY:
                break

    @app.command()
    def box(
        width: Annotated[int, typer.Argument(min=0, help="Interior width in columns")],
        height: Annotated[int, typer.Argument(min=0, help="Interior height in lines")],
        color: Annotated[Optional[str], typer.Option("--color", "-c", help="Border color name (e.g. orange)")] = None,
    ) -> None:
        """Draw a box at the cursor position."""
        screen = Screen()
        if color:
            try:
                screen.set_fg(Color.from_name(color))
            except ValueError as exc:
                console.print(f"[red]{escape(str(exc))}[/]")
                raise typer.Exit(1)
        screen.print_box(width, height)
        if color:
            screen.reset_color()
        screen.break_line()

    @app.command()
    def palette() -> None:
        """Show every palette color as a background swatch."""
        screen = Screen()
        for entry in Color:
            screen.set_bg(entry)
            screen.print_hblock_line(4)
            screen.reset_color()
            screen.write(f" {entry.value:>3} {entry.name.lower()}")
            screen.break_line()

    return app
