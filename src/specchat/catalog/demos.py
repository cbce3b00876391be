"""Demo chat configurations, keyed by demo identifier."""

from ..config import DEFAULT_GREETING
from .models import DemoConfig

DEMOS: dict[str, DemoConfig] = {
    "mobileShop": DemoConfig(
        title="Mobile E-Shop Chat",
        theme_color="#3B82F6",
        greeting=DEFAULT_GREETING,
        product="galaxy-s24-ultra",
    ),
}

DEFAULT_DEMO = "mobileShop"


def get_demo(name: str) -> DemoConfig:
    """Look up a demo configuration.

    Raises:
        KeyError: If the demo is not defined
    """
    try:
        return DEMOS[name]
    except KeyError:
        raise KeyError(
            f"Invalid demo selected: {name}. Available demos: {', '.join(sorted(DEMOS))}"
        ) from None
