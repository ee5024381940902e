"""
Design-system widgets.

Widgets are Jinja macros (``templates/ui/``); the class composition behind
them lives here so it can be tested without rendering. ``variants`` is a
small class-variance builder: a base class list plus named variant groups,
each mapping an option to its classes.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional


def cx(*classes: Any) -> str:
    """Join truthy class names, flattening lists and dicts of ``{class: flag}``."""
    out: List[str] = []
    for item in classes:
        if not item:
            continue
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, Mapping):
            out.extend(name for name, flag in item.items() if flag)
        elif isinstance(item, Iterable):
            out.append(cx(*item))
    return " ".join(part for part in out if part)


class variants:
    def __init__(self, base: str, groups: Dict[str, Dict[str, str]], defaults: Dict[str, str]):
        self.base = base
        self.groups = groups
        self.defaults = defaults

    def __call__(self, class_name: Optional[str] = None, **options: Optional[str]) -> str:
        parts = [self.base]
        for group, choices in self.groups.items():
            choice = options.get(group) or self.defaults[group]
            if choice not in choices:
                raise ValueError(f"Unknown {group} {choice!r}; expected one of {sorted(choices)}")
            parts.append(choices[choice])
        return cx(parts, class_name)


_BUTTON_COLOURS = {
    ("primary", "filled"): "bg-primary-600 text-white hover:bg-primary-700",
    ("primary", "outlined"): "border border-primary-600 text-primary-700 hover:bg-primary-50",
    ("primary", "gradient"): "bg-gradient-to-r from-primary-500 to-primary-700 text-white",
    ("primary", "text"): "text-primary-700 hover:bg-primary-50",
    ("secondary", "filled"): "bg-secondary-600 text-white hover:bg-secondary-700",
    ("secondary", "outlined"): "border border-secondary-600 text-secondary-700 hover:bg-secondary-50",
    ("secondary", "gradient"): "bg-gradient-to-r from-secondary-500 to-secondary-700 text-white",
    ("secondary", "text"): "text-secondary-700 hover:bg-secondary-50",
}

_button_shape = variants(
    "button inline-flex items-center justify-center rounded font-medium",
    {
        "intent": {"primary": "button-primary", "secondary": "button-secondary"},
        "variant": {
            "filled": "button-filled",
            "outlined": "button-outlined",
            "gradient": "button-gradient",
            "text": "button-text",
        },
        "size": {"sm": "px-2 py-1 text-sm", "md": "px-4 py-2", "lg": "px-6 py-3 text-lg"},
    },
    {"intent": "primary", "variant": "filled", "size": "md"},
)


def button_classes(intent: str = "primary", variant: str = "filled", size: str = "md", class_name: Optional[str] = None) -> str:
    shape = _button_shape(intent=intent, variant=variant, size=size)
    return cx(shape, _BUTTON_COLOURS[(intent, variant)], class_name)


alert_classes = variants(
    "alert rounded border px-4 py-3 mb-3",
    {
        "intent": {
            "primary": "alert-primary border-primary-300 bg-primary-50 text-primary-900",
            "secondary": "alert-secondary border-secondary-300 bg-secondary-50 text-secondary-900",
            "success": "alert-success border-green-300 bg-green-50 text-green-900",
            "info": "alert-info border-sky-300 bg-sky-50 text-sky-900",
            "warning": "alert-warning border-amber-300 bg-amber-50 text-amber-900",
            "danger": "alert-danger border-red-300 bg-red-50 text-red-900",
        },
    },
    {"intent": "primary"},
)

ALERT_INTENTS = tuple(alert_classes.groups["intent"])
BUTTON_INTENTS = tuple(_button_shape.groups["intent"])
BUTTON_VARIANTS = tuple(_button_shape.groups["variant"])
BUTTON_SIZES = tuple(_button_shape.groups["size"])


def card_classes(class_name: Optional[str] = None) -> str:
    return cx("card rounded-lg border bg-white p-4 shadow dark:bg-gray-800", class_name)


def section_classes(class_name: Optional[str] = None) -> str:
    return cx("section", class_name)


def container_classes(class_name: Optional[str] = None) -> str:
    return cx("container mx-auto px-4", class_name)


def has_errors(name: str, errors: Optional[Mapping[str, List[str]]]) -> bool:
    return bool(errors and errors.get(name))


def get_error_text(name: str, errors: Optional[Mapping[str, List[str]]]) -> Optional[str]:
    """First message for ``name``; inputs show one message at a time."""
    if not has_errors(name, errors):
        return None
    return errors[name][0]


def input_classes(error: bool = False, class_name: Optional[str] = None) -> str:
    return cx(
        "input block w-full rounded border px-3 py-2",
        {"border-red-500 input-error": error, "border-gray-300": not error},
        class_name,
    )


def register(env) -> None:
    """Expose the widget helpers as Jinja globals."""
    env.globals.update(
        cx=cx,
        button_classes=button_classes,
        alert_classes=alert_classes,
        card_classes=card_classes,
        section_classes=section_classes,
        container_classes=container_classes,
        input_classes=input_classes,
        has_errors=has_errors,
        get_error_text=get_error_text,
    )
