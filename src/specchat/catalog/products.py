"""Products available in the demo storefront."""

from ..prompts import Subject
from .models import Product

GALAXY_S24_ULTRA = Product(
    key="galaxy-s24-ultra",
    name="Samsung Galaxy S24 Ultra - 256GB AI Smartphone",
    current_price=1299.99,
    original_price=1499.99,
    discount=13,
    rating=4.8,
    reviews=152,
    image="/samsung-s24-ultra.jpg",
    specs=(
        Subject(
            title="Display",
            detail_text=(
                "6.8-inch Dynamic AMOLED 2X display with QHD+ resolution "
                "(3120 x 1440 pixels), 120Hz refresh rate, and 2600 nits peak brightness."
            ),
        ),
        Subject(
            title="Processor & Memory",
            detail_text=(
                "Powered by Qualcomm Snapdragon 8 Gen 3 with 12GB of RAM and "
                "256GB internal storage (UFS 4.0)."
            ),
        ),
        Subject(
            title="Camera System",
            detail_text=(
                "Quad rear cameras featuring a 200MP wide sensor, 50MP periscope "
                "telephoto (5x optical zoom), 10MP telephoto (3x optical zoom), and "
                "12MP ultra-wide; 12MP front selfie camera with advanced video "
                "capabilities (8K, 4K, Full HD)."
            ),
        ),
        Subject(
            title="Battery & Charging",
            detail_text=(
                "Non-removable 5000mAh Li-Ion battery with support for 45W wired "
                "fast charging and 15W wireless charging for extended usage."
            ),
        ),
        Subject(
            title="Build & Design",
            detail_text=(
                "Features a premium titanium frame with Corning Gorilla Armor glass "
                "on both front and back, and is rated IP68 for dust and water "
                "resistance (up to 1.5m for 30 minutes)."
            ),
        ),
        Subject(
            title="Software & AI Features",
            detail_text=(
                "Runs Android 14 with One UI 6.1 and includes advanced Galaxy AI "
                "functionalities such as Circle to Search, Chat Assist, and "
                "real-time translation tools."
            ),
        ),
    ),
)

PRODUCTS: dict[str, Product] = {
    GALAXY_S24_ULTRA.key: GALAXY_S24_ULTRA,
}


def get_product(key: str) -> Product:
    """Look up a product by key.

    Raises:
        KeyError: If no product has that key
    """
    try:
        return PRODUCTS[key]
    except KeyError:
        raise KeyError(
            f"Unknown product: {key}. Available products: {', '.join(sorted(PRODUCTS))}"
        ) from None
