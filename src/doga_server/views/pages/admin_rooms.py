from htpy import Node, a, button, div, form, h2, table, tbody, td, th, thead, tr

from doga_server.i18n import t
from doga_server.models.room_types import RoomType
from doga_server.models.rooms import Room
from doga_server.views.components.fields import (
    checkbox_field,
    number_field,
    select_field,
    text_field,
    textarea_field,
)
from doga_server.views.components.tabs import section_tabs
from doga_server.views.layout import render_admin_page


def render_admin_rooms_page(*, lang: str, rooms: list[Room]) -> Node:
    rows = [
        tr[
            td[str(room.order_number)],
            td[a(href=f"/{lang}/admin/rooms/{room.id}/edit")[room.name(lang)]],
            td[room.type or ""],
            td[room.price(lang)],
            td[t(lang, "active") if room.active else t(lang, "inactive")],
        ]
        for room in rooms
    ]
    content = div[
        section_tabs(lang, "rooms", count=len(rooms)),
        h2[t(lang, "rooms")],
        table(class_="admin-table")[
            thead[tr[th["#"], th[t(lang, "rooms")], th["Type"], th[t(lang, "price")], th[""]]],
            tbody[rows],
        ],
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "rooms"), content=content)


def render_room_form_page(
    *,
    lang: str,
    room: Room | None,
    gallery: list[str],
    room_types: list[RoomType],
) -> Node:
    action = f"/{lang}/admin/rooms/{room.id}" if room is not None else f"/{lang}/admin/rooms"
    type_options = [("", "-")] + [(room_type.id, room_type.name(lang)) for room_type in room_types]

    content = div[
        section_tabs(lang, "rooms", editing_id=room.id if room is not None else None),
        h2[room.name(lang) if room is not None else t(lang, "create")],
        form(action=action, method="post", class_="admin-form")[
            text_field(name="name_tr", label_text="Name (TR)", value=room.name_tr if room else "", required=True),
            text_field(name="name_en", label_text="Name (EN)", value=room.name_en if room else "", required=True),
            textarea_field(name="description_tr", label_text="Description (TR)", value=room.description_tr if room else ""),
            textarea_field(name="description_en", label_text="Description (EN)", value=room.description_en if room else ""),
            text_field(name="main_image_url", label_text="Image URL", value=room.main_image_url if room else ""),
            text_field(name="price_tr", label_text="Price (TR)", value=room.price_tr if room else ""),
            text_field(name="price_en", label_text="Price (EN)", value=room.price_en if room else ""),
            number_field(name="capacity", label_text=t(lang, "capacity"), value=room.capacity if room else 2, min_value=1),
            number_field(name="size", label_text=f"{t(lang, 'size')} (m²)", value=room.size if room else 0),
            textarea_field(
                name="features_tr",
                label_text="Features (TR, one per line)",
                value="\n".join(room.features_tr) if room else "",
            ),
            textarea_field(
                name="features_en",
                label_text="Features (EN, one per line)",
                value="\n".join(room.features_en) if room else "",
            ),
            text_field(name="type", label_text="Type", value=(room.type or "") if room else ""),
            select_field(
                name="room_type_id",
                label_text="Room type",
                options=type_options,
                selected=room.room_type_id if room else "",
            ),
            number_field(name="order_number", label_text="Order", value=room.order_number if room else 0),
            textarea_field(name="gallery", label_text="Gallery (one URL per line)", value="\n".join(gallery), rows=6),
            checkbox_field(name="active", label_text=t(lang, "active"), checked=room.active if room else True),
            button(type="submit")[t(lang, "save")],
        ],
        form(action=f"/{lang}/admin/rooms/{room.id}/delete", method="post", class_="inline-form")[
            button(type="submit", class_="danger")[t(lang, "delete")]
        ]
        if room is not None
        else None,
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "rooms"), content=content)
