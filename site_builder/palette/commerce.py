"""Palette — e-commerce et widgets d'intégration."""
from .base import PaletteItem


def _store_widget(block_type: str, label: str, title: str) -> PaletteItem:
    # Widgets branchés sur un catalogue externe : simple encart côté moteur
    return PaletteItem(
        type=block_type, label=label, category="ecommerce",
        description=f"{label} (connected to the store catalogue)",
        default_props={"title": title, "message": "Connect your store to display this section."},
    )


ECOMMERCE_PALETTE = [
    PaletteItem(
        type="product-card", label="Product Cards", category="ecommerce",
        description="Grid of product cards",
        default_props={
            "columns": 3, "buttonText": "Add to cart",
            "products": [
                {"name": "Classic Tee", "price": "$29", "imageUrl": "", "badge": "New", "link": "#"},
                {"name": "Canvas Tote", "price": "$19", "imageUrl": "", "badge": "", "link": "#"},
            ],
        },
    ),
    PaletteItem(
        type="product-detail", label="Product Detail", category="ecommerce",
        description="Single product with description",
        default_props={
            "name": "Product name", "price": "$49", "description": "<p>Describe your product.</p>",
            "imageUrl": "", "buttonText": "Add to cart", "link": "#",
        },
    ),
    _store_widget("product-carousel", "Product Carousel", "Featured products"),
    _store_widget("quick-view", "Quick View", "Quick view"),
    _store_widget("wishlist-grid", "Wishlist", "Your wishlist"),
    _store_widget("cart", "Cart", "Your cart"),
    _store_widget("product-filter", "Product Filter", "Filter products"),
    _store_widget("checkout", "Checkout", "Checkout"),
]

WIDGETS_PALETTE = [
    PaletteItem(
        type="whatsapp-button", label="WhatsApp Button", category="widgets",
        description="Floating WhatsApp chat button",
        default_props={"phone": "", "message": "Hello!", "position": "right"},
    ),
    PaletteItem(
        type="floating-cta", label="Floating CTA", category="widgets",
        description="Floating call-to-action button",
        default_props={"text": "Book now", "link": "#", "color": ""},
    ),
    PaletteItem(
        type="scroll-to-top", label="Scroll to Top", category="widgets",
        description="Back-to-top button",
        default_props={"position": "right"},
    ),
    PaletteItem(
        type="facebook-pixel", label="Facebook Pixel", category="widgets",
        description="Meta pixel tracking snippet",
        default_props={"pixelId": ""},
    ),
    PaletteItem(
        type="google-analytics", label="Google Analytics", category="widgets",
        description="gtag.js tracking snippet",
        default_props={"trackingId": ""},
    ),
    PaletteItem(
        type="loading-screen", label="Loading Screen", category="widgets",
        description="Splash shown while the page loads",
        default_props={"text": "Loading..."},
    ),
    PaletteItem(
        type="user-profile", label="User Profile", category="widgets",
        description="Signed-in visitor profile",
        default_props={"message": "User profile requires authentication."},
    ),
]
