import httpx
import typer
from rich.table import Table

from doga_cli.utils import ApiError, console, fail, get_client, unwrap


def list_rooms(
    lang: str = typer.Option("tr", "--lang", "-l", help="Language of room names (tr or en)"),
    include_inactive: bool = typer.Option(False, "--all", "-a", help="Include inactive rooms"),
) -> None:
    """List rooms in display order."""
    params = {"lang": lang, "includeInactive": str(include_inactive).lower()}
    try:
        with get_client() as client:
            rooms = unwrap(client.get("/api/public-rooms", params=params))["data"]
    except (httpx.HTTPError, ApiError) as e:
        fail(e)
        return

    table = Table(title="Rooms")
    table.add_column("#", style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="green")
    table.add_column("Type")
    table.add_column("Capacity", justify="right")
    table.add_column("Price", style="magenta")
    for room in rooms:
        table.add_row(
            str(room["order"]),
            room["id"],
            room.get("name") or room["nameTR"],
            room.get("type") or "",
            str(room["capacity"]),
            room.get("price") or room["priceTR"],
        )
    console.print(table)
