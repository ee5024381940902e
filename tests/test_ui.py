import pytest

from notes_web import ui


def test_cx_flattens_and_filters():
    assert ui.cx("a", None, ["b", "", ["c"]], {"d": True, "e": False}) == "a b c d"


def test_button_defaults():
    classes = ui.button_classes()
    assert "button-primary" in classes
    assert "button-filled" in classes
    assert "px-4 py-2" in classes


def test_button_variants_and_extra_class():
    classes = ui.button_classes("secondary", "outlined", "lg", class_name="w-full")
    assert "button-secondary" in classes
    assert "button-outlined" in classes
    assert "text-lg" in classes
    assert classes.endswith("w-full")


def test_unknown_variant_raises():
    with pytest.raises(ValueError):
        ui.button_classes(variant="sparkly")
    with pytest.raises(ValueError):
        ui.alert_classes(intent="catastrophe")


@pytest.mark.parametrize("intent", ["primary", "secondary", "success", "info", "warning", "danger"])
def test_alert_intents(intent):
    assert f"alert-{intent}" in ui.alert_classes(intent=intent)


def test_error_helpers():
    errors = {"title": ["Title is required.", "another"]}
    assert ui.has_errors("title", errors)
    assert not ui.has_errors("body", errors)
    assert not ui.has_errors("title", None)
    assert ui.get_error_text("title", errors) == "Title is required."
    assert ui.get_error_text("body", errors) is None


def test_input_classes_reflect_error_state():
    assert "input-error" in ui.input_classes(error=True)
    assert "input-error" not in ui.input_classes(error=False)
