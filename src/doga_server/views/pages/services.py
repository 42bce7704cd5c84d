from htpy import Node, a, div, h1, h2, h3, img, p

from doga_server.i18n import t
from doga_server.models.services import Service
from doga_server.views.components.media import render_image_grid
from doga_server.views.layout import render_page


def render_services_page(*, lang: str, services: list[Service]) -> Node:
    cards = [
        div(class_="card service-card")[
            img(src=service.main_image_url, alt=service.title(lang), loading="lazy") if service.main_image_url else None,
            div(class_="card-body")[
                h3[a(href=f"/{lang}/services/{service.id}")[service.title(lang)]],
                p(class_="card-text")[service.description(lang)],
            ],
        ]
        for service in services
    ]
    return render_page(
        lang=lang,
        title_text=t(lang, "services"),
        content=div[h1[t(lang, "our_services")], div(class_="card-grid")[cards]],
        path="/services",
    )


def render_service_detail_page(*, lang: str, service: Service, images: list[str]) -> Node:
    content = div(class_="service-detail")[
        a(href=f"/{lang}/services", class_="back-link")[f"← {t(lang, 'services')}"],
        h1[service.title(lang)],
        img(src=service.main_image_url, alt=service.title(lang), class_="hero-image") if service.main_image_url else None,
        p[service.description(lang)],
        div[h2[t(lang, "photos")], render_image_grid(urls=images, alt=service.title(lang))] if images else None,
    ]
    return render_page(lang=lang, title_text=service.title(lang), content=content, path=f"/services/{service.id}")
