"""
Style Catalog - Supported visual styles, durations and aspect ratios.

Single source of truth for style handling. PromptBuilder reads the prompt
fragments; collaborators enumerate options for their pickers.

Usage:
    from dreamcinema.video.style_catalog import styles, estimated_generation_time_ms

    grouped = styles()
    eta_ms = estimated_generation_time_ms(6, "ghibli")
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from dreamcinema.core.constants import DEFAULT_STYLE


@dataclass(frozen=True)
class StyleDefinition:
    id: str
    display_name: str
    description: str
    category: str
    prompt_fragment: str
    time_multiplier: float = 1.0

    def to_option(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.display_name, "description": self.description}


@dataclass(frozen=True)
class DurationOption:
    seconds: int
    label: str
    description: str

    def to_option(self) -> Dict[str, object]:
        return {"seconds": self.seconds, "label": self.label, "description": self.description}


@dataclass(frozen=True)
class AspectRatioOption:
    id: str
    name: str
    description: str

    def to_option(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "description": self.description}


# =============================================================================
# STYLE DEFINITIONS (Canonical)
# =============================================================================

STYLE_CATEGORIES: Tuple[str, ...] = (
    "realistic", "anime", "artistic", "digital", "fantasy", "experimental", "vintage",
)

STYLES: Tuple[StyleDefinition, ...] = (
    # Realistic
    StyleDefinition(
        "realistic", "Realistic", "Photorealistic with lifelike details", "realistic",
        "photorealistic cinematic style with professional lighting, detailed textures, and lifelike movement",
        1.2,
    ),
    StyleDefinition(
        "cinematic", "Cinematic", "Movie-quality production style", "realistic",
        "cinematic film style with dramatic lighting, professional camera work, and movie-quality production",
        1.3,
    ),
    StyleDefinition(
        "documentary", "Documentary", "Natural, authentic atmosphere", "realistic",
        "documentary style with natural lighting, authentic atmosphere, and realistic human behavior",
    ),
    # Anime & animation
    StyleDefinition(
        "anime", "Anime", "Japanese anime with vibrant colors", "anime",
        "Japanese anime style with vibrant colors, expressive characters, dynamic action sequences, "
        "and traditional anime aesthetics",
        1.1,
    ),
    StyleDefinition(
        "ghibli", "Studio Ghibli", "Miyazaki-inspired whimsical style", "anime",
        "Studio Ghibli style with hand-drawn animation, whimsical characters, magical atmosphere, "
        "and Miyazaki-inspired visuals",
        1.4,
    ),
    StyleDefinition(
        "manga", "Manga", "Japanese comic book aesthetics", "anime",
        "manga-inspired animation with bold lines, dramatic expressions, and Japanese comic book aesthetics",
    ),
    # Artistic
    StyleDefinition(
        "watercolor", "Watercolor", "Soft, flowing watercolor painting", "artistic",
        "soft watercolor painting style with flowing, dreamy transitions, ethereal atmosphere, "
        "and artistic brush strokes",
        1.0,
    ),
    StyleDefinition(
        "claymation", "Claymation", "Stop-motion clay animation", "artistic",
        "charming stop-motion claymation style with tactile textures, handcrafted appearance, "
        "and clay-like characters",
        1.5,
    ),
    StyleDefinition(
        "hand-drawn", "Hand-drawn", "Traditional 2D animation", "artistic",
        "traditional hand-drawn animation style with organic lines, sketchy details, artistic flair, "
        "and 2D animation",
    ),
    # Digital
    StyleDefinition(
        "cyberpunk", "Cyberpunk", "Neon-lit futuristic aesthetic", "digital",
        "neon-lit cyberpunk aesthetic with glowing elements, digital effects, futuristic atmosphere, "
        "and sci-fi visuals",
        1.1,
    ),
    StyleDefinition(
        "pixel-art", "Pixel Art", "8-bit retro gaming style", "digital",
        "8-bit pixel art style with retro gaming aesthetics, blocky characters, and nostalgic video game visuals",
    ),
    StyleDefinition(
        "digital-art", "Digital Art", "Modern digital illustration", "digital",
        "modern digital art style with clean lines, vibrant colors, and contemporary illustration techniques",
    ),
    # Fantasy & sci-fi
    StyleDefinition(
        "fantasy", "Fantasy", "Magical and mystical elements", "fantasy",
        "fantasy art style with magical elements, mystical creatures, enchanted environments, "
        "and otherworldly atmosphere",
    ),
    StyleDefinition(
        "sci-fi", "Sci-Fi", "Futuristic science fiction", "fantasy",
        "science fiction style with futuristic technology, space environments, advanced machinery, "
        "and alien landscapes",
    ),
    StyleDefinition(
        "steampunk", "Steampunk", "Victorian-era machinery", "fantasy",
        "steampunk aesthetic with Victorian-era machinery, brass and copper elements, and retro-futuristic design",
    ),
    # Abstract & experimental
    StyleDefinition(
        "abstract", "Abstract", "Geometric and experimental", "experimental",
        "abstract art style with geometric shapes, flowing forms, experimental visuals, "
        "and non-representational imagery",
        0.9,
    ),
    StyleDefinition(
        "surreal", "Surreal", "Dreamlike and impossible", "experimental",
        "surreal art style with dreamlike imagery, impossible scenarios, and Salvador Dali-inspired visuals",
    ),
    StyleDefinition(
        "minimalist", "Minimalist", "Clean and simple forms", "experimental",
        "minimalist style with clean lines, simple forms, limited color palette, and elegant simplicity",
        0.8,
    ),
    # Vintage & retro
    StyleDefinition(
        "vintage", "Vintage", "Aged film aesthetics", "vintage",
        "vintage film style with aged aesthetics, retro color grading, and classic cinematography",
    ),
    StyleDefinition(
        "film-noir", "Film Noir", "Classic black and white", "vintage",
        "film noir style with dramatic shadows, high contrast lighting, and classic black and white cinematography",
    ),
    StyleDefinition(
        "80s-retro", "80s Retro", "Neon synthwave style", "vintage",
        "1980s retro style with neon colors, synthwave aesthetics, and nostalgic 80s visuals",
    ),
)

_STYLES_BY_ID: Dict[str, StyleDefinition] = {style.id: style for style in STYLES}

DURATIONS: Tuple[DurationOption, ...] = (
    DurationOption(3, "3 seconds", "Quick preview"),
    DurationOption(5, "5 seconds", "Short clip"),
    DurationOption(6, "6 seconds", "Standard (recommended)"),
    DurationOption(8, "8 seconds", "Extended clip"),
    DurationOption(10, "10 seconds", "Long form"),
)

ASPECT_RATIOS: Tuple[AspectRatioOption, ...] = (
    AspectRatioOption("16:9", "Landscape", "16:9 - Perfect for YouTube, desktop"),
    AspectRatioOption("9:16", "Portrait", "9:16 - Perfect for TikTok, Instagram Stories"),
    AspectRatioOption("1:1", "Square", "1:1 - Perfect for Instagram posts"),
    AspectRatioOption("4:3", "Classic", "4:3 - Traditional video format"),
    AspectRatioOption("21:9", "Ultrawide", "21:9 - Cinematic widescreen"),
)

BASE_GENERATION_TIME_MS = 45000
PER_SECOND_GENERATION_TIME_MS = 5000


# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def styles() -> Dict[str, List[Dict[str, str]]]:
    """Styles grouped by category, in catalog order."""
    grouped: Dict[str, List[Dict[str, str]]] = {category: [] for category in STYLE_CATEGORIES}
    for style in STYLES:
        grouped[style.category].append(style.to_option())
    return grouped


def durations() -> List[Dict[str, object]]:
    return [option.to_option() for option in DURATIONS]


def aspect_ratios() -> List[Dict[str, str]]:
    return [option.to_option() for option in ASPECT_RATIOS]


def is_known_style(style_id: str) -> bool:
    return style_id in _STYLES_BY_ID


def is_known_aspect_ratio(aspect_ratio: str) -> bool:
    return any(option.id == aspect_ratio for option in ASPECT_RATIOS)


def get_style(style_id: str) -> StyleDefinition:
    """Look up a style, falling back to the default (realistic) entry."""
    return _STYLES_BY_ID.get(style_id, _STYLES_BY_ID[DEFAULT_STYLE])


def estimated_generation_time_ms(duration_seconds: int, style_id: str) -> int:
    """
    Rough provider turnaround estimate.

    base 45s + duration * 5s * style multiplier (1.0 for unknown styles),
    rounded half up to whole milliseconds.
    """
    style = _STYLES_BY_ID.get(style_id)
    multiplier = style.time_multiplier if style else 1.0
    estimate = BASE_GENERATION_TIME_MS + duration_seconds * PER_SECOND_GENERATION_TIME_MS * multiplier
    return int(math.floor(estimate + 0.5))
