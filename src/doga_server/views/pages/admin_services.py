from htpy import Node, a, button, div, form, h2, table, tbody, td, th, thead, tr

from doga_server.i18n import t
from doga_server.models.services import Service
from doga_server.views.components.fields import checkbox_field, number_field, text_field, textarea_field
from doga_server.views.components.tabs import section_tabs
from doga_server.views.layout import render_admin_page


def render_admin_services_page(*, lang: str, services: list[Service]) -> Node:
    rows = [
        tr[
            td[str(service.order_number)],
            td[a(href=f"/{lang}/admin/services/{service.id}/edit")[service.title(lang)]],
            td[t(lang, "active") if service.active else t(lang, "inactive")],
        ]
        for service in services
    ]
    content = div[
        section_tabs(lang, "services", count=len(services)),
        h2[t(lang, "services")],
        table(class_="admin-table")[thead[tr[th["#"], th["Title"], th[""]]], tbody[rows]],
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "services"), content=content)


def render_service_form_page(*, lang: str, service: Service | None, images: list[str]) -> Node:
    action = f"/{lang}/admin/services/{service.id}" if service is not None else f"/{lang}/admin/services"
    content = div[
        section_tabs(lang, "services", editing_id=service.id if service is not None else None),
        h2[service.title(lang) if service is not None else t(lang, "create")],
        form(action=action, method="post", class_="admin-form")[
            text_field(name="title_tr", label_text="Title (TR)", value=service.title_tr if service else "", required=True),
            text_field(name="title_en", label_text="Title (EN)", value=service.title_en if service else "", required=True),
            textarea_field(
                name="description_tr", label_text="Description (TR)", value=service.description_tr if service else ""
            ),
            textarea_field(
                name="description_en", label_text="Description (EN)", value=service.description_en if service else ""
            ),
            text_field(name="image", label_text="Image URL", value=service.main_image_url if service else ""),
            text_field(name="icon", label_text="Icon", value=service.icon if service else ""),
            number_field(name="order", label_text="Order", value=service.order_number if service else 0),
            textarea_field(name="images", label_text="Gallery (one URL per line)", value="\n".join(images), rows=6),
            checkbox_field(name="active", label_text=t(lang, "active"), checked=service.active if service else True),
            button(type="submit")[t(lang, "save")],
        ],
        form(action=f"/{lang}/admin/services/{service.id}/delete", method="post", class_="inline-form")[
            button(type="submit", class_="danger")[t(lang, "delete")]
        ]
        if service is not None
        else None,
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "services"), content=content)
