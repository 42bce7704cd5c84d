from htpy import Node, a, button, div, form, h1, h2, p, span

from doga_server.i18n import t
from doga_server.views.components.fields import text_field
from doga_server.views.layout import render_admin_page


def render_login_page(*, lang: str, error: str | None = None) -> Node:
    content = div(class_="login-box")[
        h1[t(lang, "login")],
        p(class_="form-error")[error] if error else None,
        form(action=f"/{lang}/admin/login", method="post")[
            text_field(name="username", label_text=t(lang, "username"), required=True),
            text_field(name="password", label_text=t(lang, "password"), required=True, type_="password"),
            button(type="submit")[t(lang, "login")],
        ],
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "login"), content=content, logged_in=False)


def render_dashboard_page(*, lang: str, username: str, counts: dict[str, int]) -> Node:
    sections = [
        ("rooms", f"/{lang}/admin/rooms"),
        ("slider", f"/{lang}/admin/slider"),
        ("services", f"/{lang}/admin/services"),
        ("gallery", f"/{lang}/admin/gallery"),
    ]
    content = div[
        h1[t(lang, "admin")],
        p[username],
        div(class_="card-grid")[
            [
                a(href=href, class_="card dashboard-card")[
                    h2[t(lang, key)],
                    span(class_="count")[str(counts.get(key, 0))],
                ]
                for key, href in sections
            ]
        ],
        form(action=f"/{lang}/admin/import-rooms", method="post", class_="inline-form")[
            button(type="submit", class_="danger")[t(lang, "import_rooms")]
        ],
    ]
    return render_admin_page(lang=lang, title_text=t(lang, "admin"), content=content)
