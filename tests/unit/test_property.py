"""Unit tests for Property entity."""

from proplist.domain.entities import Property


def test_property_defaults_to_empty_value() -> None:
    """Property built with only a key has an empty value."""
    prop = Property("name")
    assert prop.key == "name"
    assert prop.value == ""


def test_property_value_mutable_in_place() -> None:
    """Assigning value changes the entry itself."""
    prop = Property("env", "prod")
    prop.value = "staging"
    assert prop.value == "staging"


def test_property_equality_by_key_and_value() -> None:
    """Properties compare equal by key and value."""
    assert Property("a", "1") == Property("a", "1")
    assert Property("a", "1") != Property("a", "2")


def test_property_str() -> None:
    """str(Property) renders key=value."""
    assert str(Property("env", "prod")) == "env=prod"
