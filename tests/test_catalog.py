"""Tests for the bean and machine catalog."""

import pytest

from brew_advisor import DEFAULT_CATALOG, Catalog, CoffeeBean
from brew_advisor.exceptions import NotFoundError


def test_find_known_bean():
    bean = DEFAULT_CATALOG.find_bean("1")
    assert bean is not None
    assert bean.brand == "Dark Roast"
    assert bean.roast_level == "dark"
    assert bean.flavor_profile == ("bold", "smoky", "rich")


def test_find_known_machine():
    machine = DEFAULT_CATALOG.find_machine("3")
    assert machine is not None
    assert machine.type == "espresso"
    assert machine.model == "Barista Express"


def test_find_unknown_returns_none():
    assert DEFAULT_CATALOG.find_bean("99") is None
    assert DEFAULT_CATALOG.find_machine("99") is None


def test_get_unknown_raises_not_found():
    with pytest.raises(NotFoundError):
        DEFAULT_CATALOG.get_bean("99")
    with pytest.raises(NotFoundError):
        DEFAULT_CATALOG.get_machine("")


def test_lookup_is_exact_match():
    assert DEFAULT_CATALOG.find_bean(" 1") is None
    assert DEFAULT_CATALOG.find_machine("01") is None


def test_default_catalog_size():
    assert len(DEFAULT_CATALOG.beans) == 4
    assert len(DEFAULT_CATALOG.machines) == 9


def test_custom_catalog():
    bean = CoffeeBean(id="x", brand="Test", origin="Kenya", roast_level="medium")
    catalog = Catalog(beans=[bean], machines=[])
    assert catalog.get_bean("x") is bean
    assert catalog.find_machine("1") is None
