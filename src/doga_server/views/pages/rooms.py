from htpy import (
    Node,
    a,
    button,
    div,
    form,
    h1,
    h2,
    img,
    input as input_,
    li,
    option,
    p,
    select,
    span,
    ul,
)

from doga_server.i18n import bed_info, t
from doga_server.models.rooms import Room
from doga_server.views.components.media import render_image_grid
from doga_server.views.components.room_card import render_room_card
from doga_server.views.layout import render_page


def render_rooms_page(
    *,
    lang: str,
    rooms: list[Room],
    room_types: list[str],
    room_hrefs: dict[str, str],
    selected_type: str | None,
    query: str,
) -> Node:
    filters = form(action=f"/{lang}/rooms", method="get", class_="room-filters")[
        select(name="type")[
            option(value="", selected=not selected_type)[t(lang, "all_types")],
            [option(value=room_type, selected=room_type == selected_type)[room_type.title()] for room_type in room_types],
        ],
        input_(type="search", name="q", value=query, placeholder=t(lang, "search_placeholder")),
        button(type="submit")[t(lang, "search")],
    ]

    listing: Node
    if rooms:
        listing = div(class_="card-grid")[
            [render_room_card(room=room, lang=lang, href=room_hrefs[room.id]) for room in rooms]
        ]
    else:
        listing = p(class_="empty")[t(lang, "no_rooms")]

    return render_page(
        lang=lang,
        title_text=t(lang, "rooms"),
        content=div[h1[t(lang, "our_rooms")], filters, listing],
        path="/rooms",
    )


def render_room_detail_page(*, lang: str, room: Room, gallery: list[str], path: str) -> Node:
    features = room.features(lang)
    content = div(class_="room-detail")[
        a(href=f"/{lang}/rooms", class_="back-link")[f"← {t(lang, 'back_to_rooms')}"],
        h1[room.name(lang)],
        img(src=room.main_image_url, alt=room.name(lang), class_="hero-image") if room.main_image_url else None,
        div(class_="room-facts")[
            span[f"{t(lang, 'capacity')}: {room.capacity} {t(lang, 'persons')}"],
            span[f"{t(lang, 'size')}: {room.size} m²"],
            span[f"{t(lang, 'bed')}: {bed_info(room.capacity, lang)}"],
            span(class_="price")[f"{t(lang, 'price')}: {room.price(lang)}"],
        ],
        p(class_="room-description")[room.description(lang)],
        div[h2[t(lang, "features")], ul(class_="feature-list")[[li[feature] for feature in features]]]
        if features
        else None,
        div[h2[t(lang, "photos")], render_image_grid(urls=gallery, alt=room.name(lang))] if gallery else None,
    ]
    return render_page(lang=lang, title_text=room.name(lang), content=content, path=path)
