"""Doğa Hotel CLI - Main entry point."""

import typer

from doga_cli import rooms, slider
from doga_cli.upload import upload_image

app = typer.Typer(
    help="Doğa Hotel - manage the hotel website from the terminal",
    no_args_is_help=True,
)

app.add_typer(rooms.app, name="rooms", help="Room listings")
app.add_typer(slider.app, name="slider", help="Hero slider")
app.command(name="upload")(upload_image)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
