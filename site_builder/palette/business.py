"""Palette — blocs métier (services, tarifs, témoignages, statistiques…)."""
from .base import PaletteItem

BUSINESS_PALETTE = [
    PaletteItem(
        type="about", label="About Section", category="business",
        description="Company or personal about",
        default_props={"title": "About Us", "description": "We are a passionate team dedicated to building great products.", "imageUrl": "", "bgColor": ""},
    ),
    PaletteItem(
        type="features", label="Features Grid", category="business",
        description="Icon-driven feature cards",
        default_props={
            "title": "Our Features", "subtitle": "", "columns": 3, "bgColor": "",
            "features": [
                {"icon": "Zap", "title": "Fast", "description": "Lightning-fast performance"},
                {"icon": "Lock", "title": "Secure", "description": "Enterprise-grade security"},
                {"icon": "Smartphone", "title": "Responsive", "description": "Works on all devices"},
            ],
        },
    ),
    PaletteItem(
        type="service-card", label="Service Cards", category="business",
        description="Card grid with icons and pricing",
        default_props={
            "title": "Our Services", "subtitle": "Everything you need to grow your business",
            "variant": "grid", "columns": 3, "showPricing": True, "showLinks": True,
            "services": [
                {"icon": "Palette", "title": "UI/UX Design", "description": "Interfaces that convert visitors into customers.", "price": "From $499", "linkText": "Learn More", "linkUrl": "#"},
                {"icon": "Code", "title": "Web Development", "description": "Fast, scalable web applications.", "price": "From $999", "linkText": "Learn More", "linkUrl": "#"},
                {"icon": "TrendingUp", "title": "Digital Marketing", "description": "Campaigns that deliver real results.", "price": "From $299", "linkText": "Learn More", "linkUrl": "#"},
            ],
        },
    ),
    PaletteItem(
        type="pricing", label="Pricing Table", category="business",
        description="Plans with features and call to action",
        default_props={
            "title": "Simple Pricing", "subtitle": "", "bgColor": "",
            "plans": [
                {"name": "Basic", "price": "$9", "period": "/month", "features": ["1 website", "Email support"], "ctaText": "Choose Basic", "ctaLink": "#", "highlighted": False},
                {"name": "Pro", "price": "$29", "period": "/month", "features": ["10 websites", "Priority support", "Custom domain"], "ctaText": "Choose Pro", "ctaLink": "#", "highlighted": True},
            ],
        },
    ),
    PaletteItem(
        type="testimonials", label="Testimonials", category="business",
        description="Customer quotes",
        default_props={
            "title": "What Our Clients Say",
            "testimonials": [
                {"name": "Jane Cooper", "role": "CEO, Acme", "text": "This changed how we work.", "avatar": ""},
                {"name": "Wade Warren", "role": "Designer", "text": "Beautiful and simple.", "avatar": ""},
            ],
        },
    ),
    PaletteItem(
        type="reviews", label="Reviews", category="business",
        description="Star ratings with review text",
        default_props={
            "title": "Customer Reviews", "showAverage": True,
            "reviews": [
                {"author": "Alex", "rating": 5, "text": "Excellent service.", "date": "2025-01-10"},
                {"author": "Sam", "rating": 4, "text": "Very good experience.", "date": "2025-02-02"},
            ],
        },
    ),
    PaletteItem(
        type="stats", label="Stats", category="business",
        description="Key numbers",
        default_props={
            "stats": [{"value": "10k+", "label": "Customers"}, {"value": "99.9%", "label": "Uptime"}, {"value": "24/7", "label": "Support"}],
            "bgColor": "",
        },
    ),
    PaletteItem(
        type="animated-stats", label="Animated Stats", category="business",
        description="Numbers that count up on scroll",
        default_props={
            "stats": [{"value": "250", "label": "Projects", "suffix": "+"}, {"value": "98", "label": "Satisfaction", "suffix": "%"}],
            "bgColor": "",
        },
    ),
    PaletteItem(
        type="cta-banner", label="CTA Banner", category="business",
        description="Call-to-action strip",
        default_props={
            "heading": "Ready to get started?", "subheading": "Join thousands of happy customers.",
            "ctaText": "Start now", "ctaLink": "#", "secondaryCtaText": "", "secondaryCtaLink": "#", "bgColor": "",
        },
    ),
    PaletteItem(
        type="logo-cloud", label="Logo Cloud", category="business",
        description="Client or partner logos",
        default_props={"title": "Trusted by", "logos": [{"name": "Acme", "imageUrl": ""}, {"name": "Globex", "imageUrl": ""}]},
    ),
    PaletteItem(
        type="team-grid", label="Team", category="business",
        description="Team member cards",
        default_props={"title": "Meet the Team", "members": [{"name": "Jane Doe", "role": "Founder", "imageUrl": "", "bio": ""}]},
    ),
    PaletteItem(
        type="trust-badges", label="Trust Badges", category="business",
        description="Guarantees and certifications",
        default_props={"badges": [{"icon": "Shield", "label": "Secure checkout"}, {"icon": "Truck", "label": "Free shipping"}]},
    ),
    PaletteItem(
        type="countdown", label="Countdown", category="business",
        description="Timer to a target date",
        default_props={"title": "Launching soon", "targetDate": "2026-12-31T00:00:00", "expiredText": "We're live!"},
    ),
    PaletteItem(
        type="progress", label="Progress Bars", category="business",
        description="Skill or goal progress",
        default_props={"items": [{"label": "Design", "value": 90}, {"label": "Development", "value": 75}], "color": ""},
    ),
    PaletteItem(
        type="rating", label="Rating", category="business",
        description="Star rating",
        default_props={"value": 5, "max": 5, "color": "", "label": ""},
    ),
    PaletteItem(
        type="blog-grid", label="Blog Grid", category="business",
        description="Latest articles",
        default_props={
            "title": "Latest Posts", "columns": 3,
            "posts": [{"title": "Hello world", "excerpt": "Our first post.", "imageUrl": "", "date": "2025-01-01", "link": "#"}],
        },
    ),
    PaletteItem(
        type="tags-cloud", label="Tags", category="business",
        description="Topic tags",
        default_props={"title": "Tags", "tags": ["design", "development", "marketing"]},
    ),
    PaletteItem(
        type="comments", label="Comments", category="business",
        description="Visitor comments",
        default_props={"title": "Comments", "comments": [], "emptyText": "No comments yet."},
    ),
]
