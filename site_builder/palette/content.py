"""Palette — texte et contenu."""
from .base import PaletteItem

CONTENT_PALETTE = [
    PaletteItem(
        type="heading", label="Heading", category="content",
        description="Section heading",
        default_props={"text": "Section Heading", "level": 2, "alignment": "left", "color": ""},
    ),
    PaletteItem(
        type="paragraph", label="Paragraph", category="content",
        description="Body text",
        default_props={"text": "Write your content here. Click to edit.", "alignment": "left"},
    ),
    PaletteItem(
        type="rich-text", label="Rich Text", category="content",
        description="Formatted text with links and lists",
        default_props={"content": "<p>Rich <strong>formatted</strong> text with <a href=\"https://example.com\">links</a>.</p>"},
    ),
    PaletteItem(
        type="blockquote", label="Quote", category="content",
        description="Highlighted quotation",
        default_props={"quote": "Design is not just what it looks like. Design is how it works.", "author": "Steve Jobs", "source": ""},
    ),
    PaletteItem(
        type="code-block", label="Code Block", category="content",
        description="Preformatted code snippet",
        default_props={"code": "console.log('Hello, world!');", "language": "javascript"},
    ),
    PaletteItem(
        type="list", label="List", category="content",
        description="Bulleted or numbered list",
        default_props={"items": ["First item", "Second item", "Third item"], "ordered": False},
    ),
    PaletteItem(
        type="callout", label="Callout", category="content",
        description="Info, warning or success message box",
        default_props={"title": "Note", "text": "Important information for your visitors.", "variant": "info"},
    ),
    PaletteItem(
        type="icon-text", label="Icon + Text", category="content",
        description="Icon with a short title and text",
        default_props={"icon": "Star", "title": "Feature", "text": "Describe the feature in a sentence.", "alignment": "left"},
    ),
    PaletteItem(
        type="custom-html", label="Custom HTML", category="content",
        description="Free-form markup (sanitized)",
        default_props={"html": "<div><p>Custom HTML block</p></div>"},
    ),
    PaletteItem(
        type="tabs", label="Tabs", category="content",
        description="Tabbed content panels",
        default_props={
            "tabs": [{"label": "Tab 1", "content": "Content for tab 1"}, {"label": "Tab 2", "content": "Content for tab 2"}],
            "activeTab": 0,
        },
    ),
    PaletteItem(
        type="faq", label="FAQ", category="content",
        description="Questions and answers",
        default_props={
            "title": "Frequently Asked Questions", "subtitle": "",
            "items": [
                {"question": "How does it work?", "answer": "Pick a template, edit the blocks, publish."},
                {"question": "Can I cancel anytime?", "answer": "Yes, there is no commitment."},
            ],
            "variant": "accordion", "bgColor": "",
        },
    ),
    PaletteItem(
        type="timeline", label="Timeline", category="content",
        description="Chronological milestones",
        default_props={
            "title": "Our Journey",
            "items": [
                {"date": "2020", "title": "Founded", "description": "Started in a garage with a big idea."},
                {"date": "2023", "title": "Growth", "description": "Reached 10,000 customers."},
            ],
        },
    ),
    PaletteItem(
        type="comparison-table", label="Comparison Table", category="content",
        description="Feature comparison grid",
        default_props={
            "title": "Compare Plans",
            "columns": ["Feature", "Basic", "Pro"],
            "rows": [["Storage", "10 GB", "100 GB"], ["Support", "Email", "24/7"]],
            "highlightColumn": 2,
        },
    ),
    PaletteItem(
        type="marquee", label="Marquee", category="content",
        description="Scrolling ticker of short items",
        default_props={"items": ["Fast", "Secure", "Reliable"], "speed": "normal", "bgColor": ""},
    ),
]
