import httpx
import typer

from doga_cli.utils import ApiError, console, fail, get_client, login, unwrap


def import_rooms(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Replace all rooms with the four standard hotel rooms."""
    if not yes:
        typer.confirm("This deletes every room and room gallery. Continue?", abort=True)

    try:
        with get_client() as client:
            login(client)
            created = unwrap(client.post("/api/admin/import-rooms"))["data"]
    except (httpx.HTTPError, ApiError) as e:
        fail(e)
        return

    for room in created:
        console.print(f"[green]Imported[/green] {room['nameEN']} ({room['id']})")
