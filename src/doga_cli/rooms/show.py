import httpx
import typer

from doga_cli.utils import ApiError, console, fail, get_client, unwrap


def show_room(
    room_id: str = typer.Argument(..., help="Room id or legacy slug such as standard-room"),
    lang: str = typer.Option("tr", "--lang", "-l", help="Language (tr or en)"),
) -> None:
    """Show one room."""
    try:
        with get_client() as client:
            room = unwrap(client.get(f"/api/public-rooms/{room_id}", params={"lang": lang}))["data"]
    except (httpx.HTTPError, ApiError) as e:
        fail(e)
        return

    console.print(f"[bold green]{room['name']}[/bold green] ({room['id']})")
    console.print(f"Type: {room.get('type') or '-'}")
    console.print(f"Capacity: {room['capacity']}  Size: {room['size']} m²  Price: {room['price']}")
    console.print(room["description"])
    for feature in room["features"]:
        console.print(f"  • {feature}")
    console.print(f"Gallery: {len(room['gallery'])} images")
