"""Palette — images, vidéos, audio, carte."""
from .base import PaletteItem

_IMAGES = [{"src": "", "alt": "Image 1"}, {"src": "", "alt": "Image 2"}, {"src": "", "alt": "Image 3"}]

MEDIA_PALETTE = [
    PaletteItem(
        type="image", label="Image", category="media",
        description="Single image with optional caption",
        default_props={"src": "", "alt": "", "caption": "", "width": "100%", "link": ""},
    ),
    PaletteItem(
        type="image-text", label="Image + Text", category="media",
        description="Image beside a text column",
        default_props={
            "imageUrl": "", "title": "Tell your story", "text": "Pair an image with a short paragraph.",
            "imagePosition": "left", "ctaText": "", "ctaLink": "#",
        },
    ),
    PaletteItem(
        type="image-gallery", label="Image Gallery", category="media",
        description="Grid of images",
        default_props={"images": _IMAGES, "columns": 3, "gap": 16},
    ),
    PaletteItem(
        type="gallery-masonry", label="Masonry Gallery", category="media",
        description="Pinterest-style gallery",
        default_props={"images": _IMAGES, "columns": 3, "gap": 16},
    ),
    PaletteItem(
        type="lightbox-gallery", label="Lightbox Gallery", category="media",
        description="Gallery that opens images full screen",
        default_props={"images": _IMAGES, "columns": 3, "gap": 16},
    ),
    PaletteItem(
        type="video-embed", label="Video", category="media",
        description="YouTube or Vimeo embed",
        default_props={"url": "", "title": "Video", "aspectRatio": "16/9", "autoplay": False},
    ),
    PaletteItem(
        type="background-video", label="Background Video", category="media",
        description="Looping video behind a heading",
        default_props={"videoUrl": "", "heading": "Watch us work", "subheading": "", "overlayOpacity": 50, "height": 500},
    ),
    PaletteItem(
        type="audio-player", label="Audio Player", category="media",
        description="Embedded audio track",
        default_props={"src": "", "title": "Audio track"},
    ),
    PaletteItem(
        type="before-after", label="Before / After", category="media",
        description="Two images compared side by side",
        default_props={"beforeImage": "", "afterImage": "", "beforeLabel": "Before", "afterLabel": "After"},
    ),
    PaletteItem(
        type="map", label="Map", category="media",
        description="Location with link to a map provider",
        default_props={"address": "New York, NY", "zoom": 14, "height": 400},
    ),
    PaletteItem(
        type="avatar", label="Avatar", category="media",
        description="Round profile picture",
        default_props={"src": "", "name": "Jane Doe", "size": 64},
    ),
]
