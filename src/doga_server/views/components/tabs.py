from dataclasses import dataclass

from htpy import Node, a, nav, span

from doga_server.i18n import t


@dataclass(frozen=True)
class Tab:
    label: str
    href: str
    active: bool
    count: int | None = None


def render_tabs(*, tabs: list[Tab]) -> Node:
    return nav(class_="tabs")[
        [
            a(href=tab.href, class_=("tab tab-active" if tab.active else "tab"))[
                tab.label,
                span(class_="tab-badge")[str(tab.count)] if tab.count is not None else None,
            ]
            for tab in tabs
        ]
    ]


def section_tabs(lang: str, section: str, *, count: int | None = None, editing_id: str | None = None) -> Node:
    """Tabs for an admin section such as ``rooms``: list, create and, while editing, edit.

    The create tab is active when neither a count (list page) nor an id is given.
    """
    base = f"/{lang}/admin/{section}"
    listing = count is not None
    tabs = [
        Tab(label=t(lang, section), href=base, active=listing, count=count),
        Tab(label=t(lang, "create"), href=f"{base}/create", active=not listing and editing_id is None),
    ]
    if editing_id is not None:
        tabs.append(Tab(label=t(lang, "edit"), href=f"{base}/{editing_id}/edit", active=True))
    return render_tabs(tabs=tabs)
