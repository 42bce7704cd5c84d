from htpy import Node, a, div, h1, p

from doga_server.i18n import t
from doga_server.views.layout import render_page


def render_error_page(*, lang: str, status_code: int, heading: str, message: str = "") -> Node:
    content = div(class_="error-page")[
        h1[heading],
        p[message] if message else None,
        p[a(href=f"/{lang}")[t(lang, "home")]],
    ]
    return render_page(lang=lang, title_text=f"{status_code} {heading}", content=content)
