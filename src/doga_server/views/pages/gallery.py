from htpy import Node, div, h1, h2

from doga_server.i18n import t
from doga_server.models.gallery import GalleryItem
from doga_server.views.components.media import render_media_item
from doga_server.views.layout import render_page


def render_gallery_page(*, lang: str, items: list[GalleryItem]) -> Node:
    images = [item for item in items if item.media_type == "image"]
    videos = [item for item in items if item.media_type == "video"]

    def grid(section_items: list[GalleryItem]) -> Node:
        return div(class_="media-grid")[
            [
                render_media_item(image_url=item.image_url, video_url=item.video_url, caption=item.title(lang))
                for item in section_items
            ]
        ]

    content = div[
        h1[t(lang, "gallery")],
        div[h2[t(lang, "photos")], grid(images)] if images else None,
        div[h2[t(lang, "videos")], grid(videos)] if videos else None,
    ]
    return render_page(lang=lang, title_text=t(lang, "gallery"), content=content, path="/gallery")
