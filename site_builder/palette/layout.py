"""Palette — hero et mise en page (sections, colonnes, espaceurs)."""
from .base import PaletteItem

HERO_PALETTE = [
    PaletteItem(
        type="hero", label="Hero", category="hero",
        description="Large header with heading and call to action",
        default_props={
            "heading": "Build Something Amazing",
            "subheading": "Create beautiful websites without writing code.",
            "ctaText": "Get Started", "ctaLink": "#",
            "secondaryCtaText": "", "secondaryCtaLink": "#",
            "backgroundImage": "", "variant": "centered", "height": "large",
            "overlayOpacity": 50, "alignment": "center",
            "headingColor": "", "textColor": "", "bgColor": "",
        },
    ),
    PaletteItem(
        type="carousel", label="Hero Carousel", category="hero",
        description="Rotating hero slides",
        default_props={
            "slides": [
                {"heading": "Welcome", "subheading": "Discover what we do best.", "backgroundImage": "",
                 "buttons": [{"text": "Learn more", "link": "#"}]},
                {"heading": "Built for growth", "subheading": "Scale without limits.", "backgroundImage": "",
                 "buttons": []},
            ],
            "height": "large", "autoPlayInterval": 5, "showDots": True, "showArrows": True,
        },
    ),
    PaletteItem(
        type="parallax", label="Parallax", category="hero",
        description="Fixed background image with overlay text",
        default_props={"imageUrl": "", "heading": "Scroll into the story", "subheading": "", "height": 400, "overlayOpacity": 40},
    ),
]

LAYOUT_PALETTE = [
    PaletteItem(
        type="section", label="Section", category="layout",
        description="Container for nested blocks",
        default_props={"bgColor": "", "padding": 64, "maxWidth": 1200, "anchorId": ""},
    ),
    PaletteItem(
        type="columns", label="Columns", category="layout",
        description="Side-by-side nested blocks",
        default_props={"columns": 2, "gap": 24},
    ),
    PaletteItem(
        type="spacer", label="Spacer", category="layout",
        description="Vertical whitespace",
        default_props={"height": 48},
    ),
    PaletteItem(
        type="divider", label="Divider", category="layout",
        description="Horizontal rule",
        default_props={"color": "#e2e8f0", "thickness": 1, "bgColor": ""},
    ),
    PaletteItem(
        type="sticky", label="Sticky Container", category="layout",
        description="Keeps nested blocks pinned while scrolling",
        default_props={"offset": 0},
    ),
]
