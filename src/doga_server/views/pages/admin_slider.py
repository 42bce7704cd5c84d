from htpy import Node, a, button, div, form, h2, img, table, tbody, td, th, thead, tr

from doga_server.i18n import t
from doga_server.models.slider import SliderItem
from doga_server.views.components.fields import checkbox_field, number_field, text_field, textarea_field
from doga_server.views.components.tabs import section_tabs
from doga_server.views.layout import render_admin_page


def render_admin_slider_page(*, lang: str, slides: list[SliderItem]) -> Node:
    rows = [
        tr[
            td[str(item.order_number)],
            td[img(src=item.image_url, alt="", class_="thumb")],
            td[a(href=f"/{lang}/admin/slider/{item.id}/edit")[item.title(lang) or item.id]],
            td[t(lang, "active") if item.active else t(lang, "inactive")],
        ]
        for item in slides
    ]
    content = div[
        section_tabs(lang, "slider", count=len(slides)),
        h2[t(lang, "slider")],
        table(class_="admin-table")[thead[tr[th["#"], th[""], th["Title"], th[""]]], tbody[rows]],
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "slider"), content=content)


def render_slider_form_page(*, lang: str, item: SliderItem | None) -> Node:
    action = f"/{lang}/admin/slider/{item.id}" if item is not None else f"/{lang}/admin/slider"
    content = div[
        section_tabs(lang, "slider", editing_id=item.id if item is not None else None),
        h2[(item.title(lang) or item.id) if item is not None else t(lang, "create")],
        form(action=action, method="post", class_="admin-form")[
            text_field(name="title_tr", label_text="Title (TR)", value=item.title_tr if item else ""),
            text_field(name="title_en", label_text="Title (EN)", value=item.title_en if item else ""),
            text_field(name="subtitle_tr", label_text="Subtitle (TR)", value=item.subtitle_tr if item else ""),
            text_field(name="subtitle_en", label_text="Subtitle (EN)", value=item.subtitle_en if item else ""),
            textarea_field(name="description_tr", label_text="Description (TR)", value=item.description_tr if item else ""),
            textarea_field(name="description_en", label_text="Description (EN)", value=item.description_en if item else ""),
            text_field(name="image", label_text="Image URL", value=item.image_url if item else "", required=True),
            text_field(name="video_url", label_text="Video URL", value=item.video_url if item else ""),
            text_field(name="button_text_tr", label_text="Button text (TR)", value=item.button_text_tr if item else ""),
            text_field(name="button_text_en", label_text="Button text (EN)", value=item.button_text_en if item else ""),
            text_field(name="button_url", label_text="Button URL", value=item.button_url if item else ""),
            number_field(name="order", label_text="Order", value=item.order_number if item else 0),
            checkbox_field(name="active", label_text=t(lang, "active"), checked=item.active if item else True),
            button(type="submit")[t(lang, "save")],
        ],
        form(action=f"/{lang}/admin/slider/{item.id}/delete", method="post", class_="inline-form")[
            button(type="submit", class_="danger")[t(lang, "delete")]
        ]
        if item is not None
        else None,
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "slider"), content=content)
