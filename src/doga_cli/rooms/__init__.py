import typer

from doga_cli.rooms.list import list_rooms
from doga_cli.rooms.seed import import_rooms
from doga_cli.rooms.show import show_room

app = typer.Typer()

app.command(name="list")(list_rooms)
app.command(name="show")(show_room)
app.command(name="import")(import_rooms)
