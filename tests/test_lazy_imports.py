"""Tests for signpost.__init__: lazy imports cover all public names."""

import pytest

import signpost


@pytest.mark.parametrize("name", signpost.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(signpost, name)
    assert obj is not None, f"signpost.{name} resolved to None"


def test_top_level_names_are_canonical() -> None:
    from signpost.routing.table import RouteTable

    assert signpost.RouteTable is RouteTable


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        signpost.__getattr__("ThisDoesNotExist")
