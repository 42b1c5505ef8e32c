"""Palette — boutons, formulaires, popups."""
from .base import PaletteItem

INTERACTIVE_PALETTE = [
    PaletteItem(
        type="button", label="Button", category="interactive",
        description="Clickable action button",
        default_props={"text": "Click Me", "link": "#", "variant": "primary", "size": "md", "fullWidth": False, "color": "", "textColor": ""},
    ),
    PaletteItem(
        type="button-group", label="Button Group", category="interactive",
        description="Row of action buttons",
        default_props={
            "buttons": [{"text": "Primary", "link": "#", "variant": "primary"}, {"text": "Secondary", "link": "#", "variant": "outline"}],
            "alignment": "center",
        },
    ),
    PaletteItem(
        type="social-links", label="Social Links", category="interactive",
        description="Social network icons",
        default_props={
            "links": [{"platform": "facebook", "url": "https://facebook.com"}, {"platform": "instagram", "url": "https://instagram.com"}],
            "alignment": "center",
        },
    ),
    PaletteItem(
        type="contact-form", label="Contact Form", category="interactive",
        description="Contact form with webhook or email",
        default_props={
            "title": "Contact Us", "subtitle": "We'd love to hear from you",
            "fields": ["name", "email", "phone", "message"], "submitText": "Send Message",
            "emailTo": "", "webhookUrl": "", "variant": "default",
        },
    ),
    PaletteItem(
        type="newsletter", label="Newsletter", category="interactive",
        description="Email signup",
        default_props={
            "title": "Subscribe to our newsletter", "subtitle": "Get product updates once a month.",
            "placeholder": "Enter your email", "buttonText": "Subscribe", "bgColor": "",
        },
    ),
    PaletteItem(
        type="form", label="Form Builder", category="interactive",
        description="Custom configurable form",
        default_props={
            "title": "Registration Form", "subtitle": "Fill in your details below", "submitText": "Submit", "webhookUrl": "",
            "fields": [
                {"label": "Full Name", "type": "text", "placeholder": "John Doe", "required": True},
                {"label": "Email", "type": "email", "placeholder": "john@example.com", "required": True},
                {"label": "Message", "type": "textarea", "placeholder": "Your message...", "required": False},
                {"label": "Plan", "type": "select", "options": ["Basic", "Pro", "Enterprise"]},
                {"label": "I agree to the terms", "type": "checkbox", "required": True},
            ],
        },
    ),
    PaletteItem(
        type="login-form", label="Login Form", category="interactive",
        description="Sign-in form",
        default_props={"title": "Sign in", "submitText": "Sign in", "showRemember": True},
    ),
    PaletteItem(
        type="signup-form", label="Signup Form", category="interactive",
        description="Account creation form",
        default_props={"title": "Create your account", "submitText": "Sign up", "showRemember": False},
    ),
    PaletteItem(
        type="search-bar", label="Search Bar", category="interactive",
        description="Site search input",
        default_props={"placeholder": "Search...", "buttonText": "Search"},
    ),
    PaletteItem(
        type="popup", label="Popup", category="interactive",
        description="Modal shown after a delay",
        default_props={"title": "Special offer", "text": "Get 10% off your first order.", "ctaText": "Claim offer", "ctaLink": "#", "trigger": "delay", "delay": 3},
    ),
    PaletteItem(
        type="cookie-consent", label="Cookie Consent", category="interactive",
        description="Cookie banner",
        default_props={"text": "We use cookies to improve your experience.", "acceptText": "Accept", "declineText": "Decline", "policyLink": ""},
    ),
]
