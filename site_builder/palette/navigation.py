"""Palette — navigation (barres, menus, pied de page, fil d'Ariane…)."""
from .base import PaletteItem

_NAV_LINKS = [
    {"label": "Home", "href": "/"},
    {"label": "About", "href": "#about"},
    {"label": "Contact", "href": "#contact"},
]

NAVIGATION_PALETTE = [
    PaletteItem(
        type="navbar", label="Navbar", category="navigation",
        description="Top navigation bar with logo and links",
        default_props={
            "logo": "MySite", "logoUrl": "", "links": _NAV_LINKS,
            "ctaText": "Get Started", "ctaLink": "#", "sticky": True,
            "variant": "default", "bgColor": "",
        },
    ),
    PaletteItem(
        type="mega-menu", label="Mega Menu", category="navigation",
        description="Navigation with grouped dropdown panels",
        default_props={
            "logo": "MySite", "logoUrl": "", "sticky": True, "variant": "default", "bgColor": "",
            "ctaText": "", "ctaLink": "#",
            "links": [
                {"label": "Products", "href": "#", "children": [
                    {"label": "Analytics", "href": "#", "description": "Track every visit"},
                    {"label": "Automation", "href": "#", "description": "Save hours every week"},
                ]},
                {"label": "Pricing", "href": "#pricing"},
            ],
        },
    ),
    PaletteItem(
        type="footer", label="Footer", category="navigation",
        description="Site footer with links and social icons",
        default_props={
            "companyName": "MySite", "description": "Building better websites, one block at a time.",
            "links": [{"label": "Privacy", "href": "/privacy"}, {"label": "Terms", "href": "/terms"}],
            "socialLinks": [{"platform": "twitter", "url": "https://twitter.com"}],
            "copyright": "© 2025 MySite. All rights reserved.", "bgColor": "",
        },
    ),
    PaletteItem(
        type="breadcrumb", label="Breadcrumb", category="navigation",
        description="Path to the current page",
        default_props={
            "items": [{"label": "Home", "href": "/"}, {"label": "Current page", "href": ""}],
            "separator": "/",
        },
    ),
    PaletteItem(
        type="pagination", label="Pagination", category="navigation",
        description="Page number navigation",
        default_props={"currentPage": 1, "totalPages": 5},
    ),
    PaletteItem(
        type="language-switcher", label="Language Switcher", category="navigation",
        description="Switch between site languages",
        default_props={
            "languages": [{"code": "en", "label": "English"}, {"code": "fr", "label": "Français"}],
            "currentLanguage": "en", "variant": "dropdown",
        },
    ),
    PaletteItem(
        type="floating-header", label="Floating Header", category="navigation",
        description="Slim promotional header that stays on top",
        default_props={"text": "Limited offer: 20% off this week", "ctaText": "Shop now", "ctaLink": "#", "bgColor": ""},
    ),
    PaletteItem(
        type="announcement-bar", label="Announcement Bar", category="navigation",
        description="Thin bar for announcements",
        default_props={"text": "Free shipping on orders over $50", "link": "", "dismissible": True, "bgColor": ""},
    ),
    PaletteItem(
        type="banner", label="Banner", category="navigation",
        description="Full-width message banner",
        default_props={"text": "We are open on weekends!", "link": "", "dismissible": False, "bgColor": ""},
    ),
]
