from htpy import Node, a, body, button, div, footer, form, head, header, html, link, main, meta, nav, p, title

from doga_server.i18n import other_language, t

SITE_NAME = "Doğa Hotel Ölüdeniz"


def render_page(*, lang: str, title_text: str, content: Node, path: str = "") -> Node:
    """Public page shell. ``path`` is the page path without the language prefix."""
    switch_lang = other_language(lang)
    return html(lang=lang)[
        head[
            meta(charset="utf-8"),
            title[f"{title_text} | {SITE_NAME}"],
            meta(name="viewport", content="width=device-width, initial-scale=1"),
            link(rel="stylesheet", href="/static/app.css"),
        ],
        body[
            header(class_="site-header")[
                a(href=f"/{lang}", class_="brand")[SITE_NAME],
                nav(class_="site-nav")[
                    a(href=f"/{lang}")[t(lang, "home")],
                    a(href=f"/{lang}/rooms")[t(lang, "rooms")],
                    a(href=f"/{lang}/services")[t(lang, "services")],
                    a(href=f"/{lang}/gallery")[t(lang, "gallery")],
                    a(href=f"/{switch_lang}{path}", class_="lang-switch", hreflang=switch_lang)[switch_lang.upper()],
                ],
            ],
            main(class_="site-main")[content],
            footer(class_="site-footer")[p[f"© {SITE_NAME}"]],
        ],
    ]


def render_admin_page(*, lang: str, title_text: str, content: Node, logged_in: bool = True) -> Node:
    return html(lang=lang)[
        head[
            meta(charset="utf-8"),
            title[f"{title_text} | {t(lang, 'admin')}"],
            meta(name="viewport", content="width=device-width, initial-scale=1"),
            meta(name="robots", content="noindex"),
            link(rel="stylesheet", href="/static/app.css"),
        ],
        body(class_="admin")[
            header(class_="site-header")[
                a(href=f"/{lang}/admin", class_="brand")[f"{SITE_NAME} · {t(lang, 'admin')}"],
                nav(class_="site-nav")[
                    a(href=f"/{lang}/admin/rooms")[t(lang, "rooms")],
                    a(href=f"/{lang}/admin/slider")[t(lang, "slider")],
                    a(href=f"/{lang}/admin/services")[t(lang, "services")],
                    a(href=f"/{lang}/admin/gallery")[t(lang, "gallery")],
                    a(href=f"/{lang}")[t(lang, "home")],
                    form(action=f"/{lang}/admin/logout", method="post", class_="inline-form")[
                        button(type="submit")[t(lang, "logout")]
                    ],
                ]
                if logged_in
                else None,
            ],
            main(class_="site-main")[div(class_="admin-content")[content]],
        ],
    ]
