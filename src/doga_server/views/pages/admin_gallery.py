from htpy import Node, a, button, div, form, h2, table, tbody, td, th, thead, tr

from doga_server.i18n import t
from doga_server.models.gallery import MEDIA_TYPES, GalleryItem
from doga_server.views.components.fields import checkbox_field, number_field, select_field, text_field
from doga_server.views.components.tabs import section_tabs
from doga_server.views.layout import render_admin_page


def render_admin_gallery_page(*, lang: str, items: list[GalleryItem]) -> Node:
    rows = [
        tr[
            td[str(item.order_number)],
            td[item.media_type],
            td[a(href=f"/{lang}/admin/gallery/{item.id}/edit")[item.title(lang) or item.image_url or item.video_url]],
            td[t(lang, "active") if item.active else t(lang, "inactive")],
        ]
        for item in items
    ]
    content = div[
        section_tabs(lang, "gallery", count=len(items)),
        h2[t(lang, "gallery")],
        table(class_="admin-table")[thead[tr[th["#"], th["Type"], th["Title"], th[""]]], tbody[rows]],
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "gallery"), content=content)


def render_gallery_form_page(*, lang: str, item: GalleryItem | None) -> Node:
    action = f"/{lang}/admin/gallery/{item.id}" if item is not None else f"/{lang}/admin/gallery"
    content = div[
        section_tabs(lang, "gallery", editing_id=item.id if item is not None else None),
        h2[(item.title(lang) or item.id) if item is not None else t(lang, "create")],
        form(action=action, method="post", class_="admin-form")[
            text_field(name="title_tr", label_text="Title (TR)", value=item.title_tr if item else ""),
            text_field(name="title_en", label_text="Title (EN)", value=item.title_en if item else ""),
            select_field(
                name="type",
                label_text="Type",
                options=[(media_type, media_type) for media_type in MEDIA_TYPES],
                selected=item.media_type if item else "image",
            ),
            text_field(name="image_url", label_text="Image URL", value=item.image_url if item else ""),
            text_field(name="video_url", label_text="Video URL", value=item.video_url if item else ""),
            number_field(name="order", label_text="Order", value=item.order_number if item else 0),
            checkbox_field(name="active", label_text=t(lang, "active"), checked=item.active if item else True),
            button(type="submit")[t(lang, "save")],
        ],
        form(action=f"/{lang}/admin/gallery/{item.id}/delete", method="post", class_="inline-form")[
            button(type="submit", class_="danger")[t(lang, "delete")]
        ]
        if item is not None
        else None,
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "gallery"), content=content)
