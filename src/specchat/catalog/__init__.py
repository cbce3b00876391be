"""Product catalog and demo configuration.

Supplies the specification metadata the trigger surface turns into
explanation requests.
"""

from .demos import DEFAULT_DEMO, DEMOS, get_demo
from .models import DemoConfig, Product
from .products import GALAXY_S24_ULTRA, PRODUCTS, get_product

__all__ = [
    "DEFAULT_DEMO",
    "DEMOS",
    "DemoConfig",
    "GALAXY_S24_ULTRA",
    "PRODUCTS",
    "Product",
    "get_demo",
    "get_product",
]
