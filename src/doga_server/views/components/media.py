from htpy import Node, a, div, figcaption, figure, img, source, video


def render_image_grid(*, urls: list[str], alt: str) -> Node:
    return div(class_="media-grid")[
        [a(href=url, target="_blank")[img(src=url, alt=alt, loading="lazy")] for url in urls]
    ]


def render_media_item(*, image_url: str, video_url: str, caption: str) -> Node:
    if video_url:
        media: Node = video(controls=True, preload="metadata", poster=image_url or None)[source(src=video_url)]
    else:
        media = img(src=image_url, alt=caption, loading="lazy")
    return figure(class_="media-item")[media, figcaption[caption] if caption else None]
