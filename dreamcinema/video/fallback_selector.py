"""
Fallback Selector - curated video library keyed by style and emotional tone.

Used when the generation provider is unavailable or fails. Total lookup:
unknown styles use the watercolor row, unknown tones the peaceful column.
"""

from typing import Dict, List

from dreamcinema.core.constants import EmotionalTone
from dreamcinema.core.logging_config import get_logger

logger = get_logger("video.fallback_selector")

_CALM_CLIP = "https://videos.pexels.com/video-files/3571264/3571264-uhd_2560_1440_30fps.mp4"
_NIGHT_CLIP = "https://videos.pexels.com/video-files/3045163/3045163-uhd_2560_1440_30fps.mp4"
_SUNLIT_CLIP = "https://videos.pexels.com/video-files/2795405/2795405-uhd_2560_1440_30fps.mp4"

FALLBACK_STYLE = "watercolor"
FALLBACK_TONE = EmotionalTone.PEACEFUL.value

VIDEO_LIBRARY: Dict[str, Dict[str, str]] = {
    # Realistic styles
    "realistic": {
        "peaceful": _CALM_CLIP,
        "mysterious": _NIGHT_CLIP,
        "joyful": _SUNLIT_CLIP,
        "dramatic": _CALM_CLIP,
    },
    "cinematic": {
        "peaceful": _SUNLIT_CLIP,
        "mysterious": _NIGHT_CLIP,
        "joyful": _SUNLIT_CLIP,
        "dramatic": _CALM_CLIP,
    },
    # Anime styles
    "anime": {
        "peaceful": _SUNLIT_CLIP,
        "mysterious": _NIGHT_CLIP,
        "joyful": _SUNLIT_CLIP,
        "dramatic": _CALM_CLIP,
    },
    "ghibli": {
        "peaceful": _SUNLIT_CLIP,
        "mysterious": _NIGHT_CLIP,
        "joyful": _SUNLIT_CLIP,
        "dramatic": _CALM_CLIP,
    },
    # Artistic styles
    "watercolor": {
        "peaceful": _CALM_CLIP,
        "mysterious": _NIGHT_CLIP,
        "joyful": _SUNLIT_CLIP,
        "dramatic": _CALM_CLIP,
    },
    "claymation": {
        "peaceful": _SUNLIT_CLIP,
        "mysterious": _NIGHT_CLIP,
        "joyful": _SUNLIT_CLIP,
        "dramatic": _CALM_CLIP,
    },
    "hand-drawn": {
        "peaceful": _SUNLIT_CLIP,
        "mysterious": _NIGHT_CLIP,
        "joyful": _SUNLIT_CLIP,
        "dramatic": _CALM_CLIP,
    },
    # Digital styles
    "cyberpunk": {
        "peaceful": _NIGHT_CLIP,
        "mysterious": _NIGHT_CLIP,
        "joyful": _SUNLIT_CLIP,
        "dramatic": _CALM_CLIP,
    },
}


class FallbackSelector:
    """Deterministic lookup into the curated library."""

    def __init__(self, library: Dict[str, Dict[str, str]] = None):
        self.library = library if library is not None else VIDEO_LIBRARY
        if FALLBACK_STYLE not in self.library or FALLBACK_TONE not in self.library[FALLBACK_STYLE]:
            raise ValueError(
                f"Fallback library must contain '{FALLBACK_STYLE}/{FALLBACK_TONE}'"
            )

    def select(self, style: str, tone: str) -> str:
        """Curated video URL for a style and tone. Never fails."""
        if isinstance(tone, EmotionalTone):
            tone = tone.value

        row = self.library.get(style)
        if row is None:
            logger.debug(f"No curated row for style '{style}', using '{FALLBACK_STYLE}'")
            row = self.library[FALLBACK_STYLE]

        url = row.get(tone)
        if url is None:
            fallback_row = row if FALLBACK_TONE in row else self.library[FALLBACK_STYLE]
            url = fallback_row[FALLBACK_TONE]

        return url

    def library_urls(self) -> List[str]:
        """Every URL in the library, row by row."""
        return [url for row in self.library.values() for url in row.values()]
