from htpy import Node, div, input as input_, label, option, select, textarea


def text_field(*, name: str, label_text: str, value: str = "", required: bool = False, type_: str = "text") -> Node:
    return div(class_="field")[
        label(for_=name)[label_text],
        input_(type=type_, id=name, name=name, value=value, required=required),
    ]


def number_field(*, name: str, label_text: str, value: int, min_value: int = 0) -> Node:
    return div(class_="field")[
        label(for_=name)[label_text],
        input_(type="number", id=name, name=name, value=str(value), min=str(min_value)),
    ]


def textarea_field(*, name: str, label_text: str, value: str = "", rows: int = 4) -> Node:
    return div(class_="field")[
        label(for_=name)[label_text],
        textarea(id=name, name=name, rows=str(rows))[value],
    ]


def checkbox_field(*, name: str, label_text: str, checked: bool) -> Node:
    return div(class_="field field-checkbox")[
        label[input_(type="checkbox", name=name, value="true", checked=checked), f" {label_text}"],
    ]


def select_field(*, name: str, label_text: str, options: list[tuple[str, str]], selected: str | None) -> Node:
    return div(class_="field")[
        label(for_=name)[label_text],
        select(id=name, name=name)[
            [option(value=value, selected=value == selected)[text] for value, text in options]
        ],
    ]
