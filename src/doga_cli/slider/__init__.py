import typer

from doga_cli.slider.list import list_slides

app = typer.Typer()

app.command(name="list")(list_slides)
