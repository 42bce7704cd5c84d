from htpy import Node, a, div, h2, img, p, section, source, video

from doga_server.models.slider import SliderItem


def render_slide(*, item: SliderItem, lang: str, position: int) -> Node:
    media: Node
    if item.video_url:
        media = video(autoplay=True, muted=True, loop=True, playsinline=True, poster=item.image_url)[
            source(src=item.video_url)
        ]
    else:
        media = img(src=item.image_url, alt=item.title(lang), loading="eager" if position == 0 else "lazy")

    button_text = item.button_text(lang)
    return div(class_="slide", data_position=str(position))[
        media,
        div(class_="slide-caption")[
            h2[item.title(lang)],
            p(class_="slide-subtitle")[item.subtitle(lang)] if item.subtitle(lang) else None,
            a(href=item.button_url, class_="button")[button_text] if button_text and item.button_url else None,
        ],
    ]


def render_hero_slider(*, items: list[SliderItem], lang: str) -> Node:
    if not items:
        return None
    return section(class_="hero-slider")[[render_slide(item=item, lang=lang, position=i) for i, item in enumerate(items)]]
