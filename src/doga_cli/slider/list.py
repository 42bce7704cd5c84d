import httpx
import typer
from rich.table import Table

from doga_cli.utils import ApiError, console, fail, get_client, unwrap


def list_slides(
    lang: str = typer.Option("tr", "--lang", "-l", help="Language of titles (tr or en)"),
) -> None:
    """List the active hero slides."""
    try:
        with get_client() as client:
            slides = unwrap(client.get("/api/slider"))["data"]
    except (httpx.HTTPError, ApiError) as e:
        fail(e)
        return

    title_key = "titleTR" if lang == "tr" else "titleEN"
    table = Table(title="Slider")
    table.add_column("Order", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Media")
    for slide in slides:
        media = slide["videoUrl"] or slide["image"]
        table.add_row(str(slide["order"]), slide[title_key] or slide["titleTR"] or slide["titleEN"], media)
    console.print(table)
