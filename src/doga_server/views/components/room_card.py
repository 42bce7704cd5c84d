from htpy import Node, a, div, h3, img, li, p, span, ul

from doga_server.i18n import bed_info, t
from doga_server.models.rooms import Room


def _snip(text: str, max_chars: int = 140) -> str:
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1].rstrip() + "…"


def render_room_card(*, room: Room, lang: str, href: str) -> Node:
    features = room.features(lang)
    return div(class_="card room-card")[
        a(href=href)[
            img(src=room.main_image_url, alt=room.name(lang), loading="lazy") if room.main_image_url else None,
        ],
        div(class_="card-body")[
            h3[a(href=href)[room.name(lang)]],
            p(class_="card-text")[_snip(room.description(lang))],
            div(class_="room-facts")[
                span[f"{t(lang, 'capacity')}: {room.capacity} {t(lang, 'persons')}"],
                span[f"{t(lang, 'size')}: {room.size} m²"],
                span[bed_info(room.capacity, lang)],
            ],
            ul(class_="feature-list")[[li[feature] for feature in features[:4]]] if features else None,
            div(class_="card-footer")[
                span(class_="price")[room.price(lang)],
                a(href=href, class_="button")[t(lang, "view_details")],
            ],
        ],
    ]
