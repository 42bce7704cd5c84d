from htpy import Node, a, div, h2, h3, p, section

from doga_server.i18n import t
from doga_server.models.rooms import Room
from doga_server.models.services import Service
from doga_server.models.slider import SliderItem
from doga_server.views.components.room_card import render_room_card
from doga_server.views.components.slider import render_hero_slider
from doga_server.views.layout import render_page


def render_home_page(
    *,
    lang: str,
    slides: list[SliderItem],
    rooms: list[Room],
    services: list[Service],
    room_hrefs: dict[str, str],
) -> Node:
    content = div[
        render_hero_slider(items=slides, lang=lang),
        section(class_="featured-rooms")[
            h2[t(lang, "our_rooms")],
            div(class_="card-grid")[
                [render_room_card(room=room, lang=lang, href=room_hrefs[room.id]) for room in rooms]
            ],
            a(href=f"/{lang}/rooms", class_="button")[t(lang, "all_rooms")],
        ],
        section(class_="services-teaser")[
            h2[t(lang, "our_services")],
            div(class_="card-grid")[
                [
                    div(class_="card")[
                        h3[a(href=f"/{lang}/services/{service.id}")[service.title(lang)]],
                        p(class_="card-text")[service.description(lang)],
                    ]
                    for service in services
                ]
            ],
        ]
        if services
        else None,
    ]
    return render_page(lang=lang, title_text=t(lang, "home"), content=content)
