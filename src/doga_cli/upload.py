import mimetypes
import os
from typing import Optional

import httpx
import typer

from doga_cli.utils import ApiError, console, fail, get_client, login, unwrap


def upload_image(
    file_path: str = typer.Argument(..., help="Path to an image file"),
    room_id: Optional[str] = typer.Option(None, "--room-id", "-r", help="Room the image belongs to"),
) -> None:
    """Upload a room image to the media bucket and print its URL."""
    if not os.path.exists(file_path):
        print(f"error: file not found: {file_path}", file=typer.get_text_stream("stderr"))
        raise typer.Exit(1)

    content_type = mimetypes.guess_type(file_path)[0] or "application/octet-stream"
    try:
        with get_client() as client, open(file_path, "rb") as f:
            login(client)
            body = unwrap(
                client.post(
                    "/api/upload",
                    files={"file": (os.path.basename(file_path), f, content_type)},
                    data={"roomId": room_id} if room_id else None,
                )
            )
    except (httpx.HTTPError, ApiError) as e:
        fail(e)
        return

    console.print(body["url"])
