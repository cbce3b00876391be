"""Tests for catalog data and demo configuration."""
import pytest
from pydantic import ValidationError

from specchat.catalog import (
    DEFAULT_DEMO,
    DEMOS,
    GALAXY_S24_ULTRA,
    Product,
    get_demo,
    get_product,
)


class TestProducts:
    def test_galaxy_specs(self):
        titles = [spec.title for spec in GALAXY_S24_ULTRA.specs]

        assert titles == [
            "Display",
            "Processor & Memory",
            "Camera System",
            "Battery & Charging",
            "Build & Design",
            "Software & AI Features",
        ]
        assert all(spec.detail_text for spec in GALAXY_S24_ULTRA.specs)

    def test_get_product(self):
        assert get_product("galaxy-s24-ultra") is GALAXY_S24_ULTRA

    def test_unknown_product(self):
        with pytest.raises(KeyError, match="Unknown product"):
            get_product("pixel")

    def test_discount_bounds(self):
        with pytest.raises(ValidationError):
            Product(key="x", name="X", current_price=1, original_price=2, discount=150)


class TestDemos:
    def test_default_demo_exists(self):
        assert DEFAULT_DEMO in DEMOS

    def test_demo_points_to_known_product(self):
        for demo in DEMOS.values():
            assert get_product(demo.product)

    def test_mobile_shop_demo(self):
        demo = get_demo("mobileShop")

        assert demo.title == "Mobile E-Shop Chat"
        assert demo.theme_color == "#3B82F6"
        assert demo.greeting.startswith("Welcome to our mobile shop!")

    def test_invalid_demo(self):
        with pytest.raises(KeyError, match="Invalid demo selected"):
            get_demo("laptopShop")
