"""Presenter Naming — fallback chain for deriving a presenter name."""

from crudkit.core.presenter_naming import (
    derive_class_name, is_collection, presenter_name_for,
)


class Widget:
    @classmethod
    def model_name(cls):
        return "Gadget"


class Plain:
    pass


def test_context_takes_precedence():
    assert derive_class_name(Widget(), "User") == "User"


def test_payload_model_name():
    assert derive_class_name(Widget()) == "Gadget"


def test_first_element_model_name():
    assert derive_class_name([Widget(), Plain()]) == "Gadget"


def test_first_element_type_name():
    assert derive_class_name((Plain(), Widget())) == "Plain"


def test_empty_collection_falls_to_runtime_type():
    assert derive_class_name([]) == "list"


def test_strings_are_not_collections():
    assert not is_collection("abc")
    assert derive_class_name("abc") == "str"


def test_presenter_name_suffix():
    assert presenter_name_for("User") == "UserEntity"
