"""
Dream Pattern Tables

Keyword tables driving TextAnalyzer. Every table that is iterated is a
tuple of records so evaluation order is fixed; scoring ties keep the
declared order.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from dreamcinema.core.constants import ElementType


@dataclass(frozen=True)
class ElementPattern:
    """Canonical label and the substrings that trigger it."""
    label: str
    triggers: Tuple[str, ...]


@dataclass(frozen=True)
class CategoryTable:
    """Pattern table for one element category with its saturation settings."""
    type: ElementType
    weight: float  # Prominence added per trigger hit
    cap: float  # Prominence ceiling
    patterns: Tuple[ElementPattern, ...]


@dataclass(frozen=True)
class ThemePattern:
    """Theme scored from text keywords, associated elements and emotion tags."""
    name: str
    keywords: Tuple[str, ...]
    elements: Tuple[str, ...]
    emotions: Tuple[str, ...]


@dataclass(frozen=True)
class ColorSet:
    key: str
    colors: Tuple[str, ...]


@dataclass(frozen=True)
class MoodBand:
    """Palette seed used when mood_score is strictly above ``above``."""
    above: Optional[float]
    colors: Tuple[str, ...]


# =============================================================================
# ELEMENT TABLES
# =============================================================================

ENVIRONMENT_TABLE = CategoryTable(
    type=ElementType.ENVIRONMENT,
    weight=0.3,
    cap=1.0,
    patterns=(
        ElementPattern("underwater", ("ocean", "sea", "underwater", "swimming", "diving", "fish", "coral")),
        ElementPattern("forest", ("forest", "trees", "woods", "jungle", "leaves", "branches", "nature")),
        ElementPattern("city", ("city", "building", "street", "urban", "skyscraper", "traffic", "crowd")),
        ElementPattern("mountains", ("mountain", "peak", "cliff", "valley", "hiking", "summit", "rocks")),
        ElementPattern("sky", ("sky", "clouds", "flying", "floating", "air", "wind", "birds")),
        ElementPattern("space", ("space", "stars", "planets", "galaxy", "universe", "cosmic", "void")),
        ElementPattern("house", ("house", "home", "room", "bedroom", "kitchen", "living room", "basement")),
        ElementPattern("school", ("school", "classroom", "teacher", "students", "desk", "hallway", "library")),
        ElementPattern("hospital", ("hospital", "doctor", "nurse", "patient", "medical", "surgery", "emergency")),
        ElementPattern("beach", ("beach", "sand", "waves", "shore", "sunset", "seashells", "tide")),
    ),
)

OBJECT_TABLE = CategoryTable(
    type=ElementType.OBJECTS,
    weight=0.25,
    cap=0.8,
    patterns=(
        ElementPattern("mirror", ("mirror", "reflection", "glass", "looking glass")),
        ElementPattern("door", ("door", "entrance", "exit", "doorway", "portal")),
        ElementPattern("water", ("water", "river", "lake", "pond", "stream", "rain")),
        ElementPattern("fire", ("fire", "flame", "burning", "smoke", "heat", "light")),
        ElementPattern("car", ("car", "vehicle", "driving", "road", "highway", "traffic")),
        ElementPattern("phone", ("phone", "call", "calling", "telephone", "mobile")),
        ElementPattern("book", ("book", "reading", "pages", "story", "words", "text")),
        ElementPattern("stairs", ("stairs", "steps", "climbing", "ascending", "descending")),
        ElementPattern("bridge", ("bridge", "crossing", "over", "connection", "span")),
        ElementPattern("key", ("key", "lock", "unlock", "open", "access")),
    ),
)

ACTION_TABLE = CategoryTable(
    type=ElementType.ACTIONS,
    weight=0.3,
    cap=0.9,
    patterns=(
        ElementPattern("flying", ("flying", "soaring", "floating", "levitating", "airborne")),
        ElementPattern("running", ("running", "chasing", "pursuing", "sprinting", "racing")),
        ElementPattern("falling", ("falling", "dropping", "plummeting", "tumbling", "descending")),
        ElementPattern("swimming", ("swimming", "diving", "floating", "underwater", "submerged")),
        ElementPattern("climbing", ("climbing", "ascending", "scaling", "mounting", "rising")),
        ElementPattern("searching", ("searching", "looking", "seeking", "finding", "hunting")),
        ElementPattern("hiding", ("hiding", "concealing", "escaping", "avoiding", "fleeing")),
        ElementPattern("dancing", ("dancing", "moving", "rhythm", "music", "celebration")),
        ElementPattern("fighting", ("fighting", "battling", "struggling", "conflict", "war")),
        ElementPattern("talking", ("talking", "speaking", "conversation", "dialogue", "communication")),
    ),
)

CATEGORY_TABLES: Tuple[CategoryTable, ...] = (ENVIRONMENT_TABLE, OBJECT_TABLE, ACTION_TABLE)

EMOTION_TAG_PROMINENCE = 0.7

# Inserted when nothing in the text or tags matched
GENERIC_ELEMENTS: Tuple[Tuple[ElementType, str, float], ...] = (
    (ElementType.ENVIRONMENT, "surreal landscape", 0.8),
    (ElementType.OBJECTS, "mysterious objects", 0.6),
    (ElementType.ACTIONS, "wandering", 0.5),
)

# =============================================================================
# MOOD
# =============================================================================

EMOTION_WEIGHTS: Dict[str, float] = {
    "joy": 0.8, "happiness": 0.8, "love": 0.7, "peace": 0.6, "excitement": 0.7,
    "fear": -0.6, "anxiety": -0.5, "terror": -0.8, "sadness": -0.4, "anger": -0.5,
    "mystery": 0.1, "curiosity": 0.3, "wonder": 0.4, "confusion": -0.2,
}

POSITIVE_WORDS: Tuple[str, ...] = (
    "beautiful", "bright", "warm", "safe", "happy", "peaceful", "wonderful", "amazing",
)
NEGATIVE_WORDS: Tuple[str, ...] = (
    "dark", "scary", "cold", "dangerous", "lost", "trapped", "broken", "dead",
)
LEXICAL_MOOD_STEP = 0.2
LEXICAL_MOOD_FACTOR = 0.5

ELEMENT_MOOD_IMPACT: Dict[str, float] = {
    "flying": 0.3, "dancing": 0.4, "swimming": 0.2,
    "falling": -0.3, "running": -0.1, "hiding": -0.2,
    "fire": 0.1, "water": 0.1, "mirror": -0.1,
}
ELEMENT_MOOD_FACTOR = 0.3

# =============================================================================
# PALETTE
# =============================================================================

MOOD_BANDS: Tuple[MoodBand, ...] = (
    MoodBand(0.7, ("#FFD700", "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4")),
    MoodBand(0.4, ("#A8E6CF", "#DCEDC1", "#FFD3A5", "#FD9853", "#C7CEEA")),
    MoodBand(None, ("#2C3E50", "#34495E", "#7F8C8D", "#95A5A6", "#BDC3C7")),
)

ENVIRONMENT_COLORS: Tuple[ColorSet, ...] = (
    ColorSet("underwater", ("#006994", "#0099CC", "#66B2FF", "#99CCFF")),
    ColorSet("forest", ("#228B22", "#32CD32", "#90EE90", "#98FB98")),
    ColorSet("city", ("#708090", "#778899", "#B0C4DE", "#D3D3D3")),
    ColorSet("space", ("#191970", "#4B0082", "#8A2BE2", "#9370DB")),
    ColorSet("fire", ("#FF4500", "#FF6347", "#FF7F50", "#FFA500")),
    ColorSet("sky", ("#87CEEB", "#87CEFA", "#B0E0E6", "#E0F6FF")),
)

EMOTION_COLORS: Tuple[ColorSet, ...] = (
    ColorSet("joy", ("#FFD700", "#FFA500", "#FF69B4")),
    ColorSet("fear", ("#2F4F4F", "#696969", "#800000")),
    ColorSet("peace", ("#B0E0E6", "#E6E6FA", "#F0F8FF")),
    ColorSet("love", ("#FF69B4", "#FFB6C1", "#FFC0CB")),
    ColorSet("mystery", ("#4B0082", "#663399", "#8A2BE2")),
)

# =============================================================================
# THEMES
# =============================================================================

THEME_PATTERNS: Tuple[ThemePattern, ...] = (
    ThemePattern(
        "transformation",
        keywords=("change", "transform", "different", "becoming", "turning into", "metamorphosis"),
        elements=("mirror", "door", "stairs"),
        emotions=("mystery", "fear", "wonder"),
    ),
    ThemePattern(
        "journey",
        keywords=("path", "road", "travel", "journey", "destination", "walking", "moving"),
        elements=("bridge", "car", "stairs", "door"),
        emotions=("curiosity", "excitement", "anxiety"),
    ),
    ThemePattern(
        "pursuit",
        keywords=("chase", "follow", "run", "escape", "flee", "hunting", "searching"),
        elements=("running", "hiding", "car"),
        emotions=("fear", "anxiety", "excitement"),
    ),
    ThemePattern(
        "loss",
        keywords=("lost", "missing", "gone", "disappear", "vanish", "forgotten"),
        elements=("searching", "crying", "empty"),
        emotions=("sadness", "fear", "anxiety"),
    ),
    ThemePattern(
        "discovery",
        keywords=("find", "discover", "reveal", "uncover", "hidden", "secret"),
        elements=("door", "key", "book", "light"),
        emotions=("curiosity", "wonder", "excitement"),
    ),
    ThemePattern(
        "freedom",
        keywords=("free", "escape", "liberate", "break", "open", "release"),
        elements=("flying", "running", "door", "sky"),
        emotions=("joy", "relief", "excitement"),
    ),
    ThemePattern(
        "connection",
        keywords=("together", "meet", "friend", "family", "love", "unite"),
        elements=("talking", "dancing", "bridge"),
        emotions=("love", "joy", "peace"),
    ),
    ThemePattern(
        "conflict",
        keywords=("fight", "battle", "struggle", "war", "argue", "compete"),
        elements=("fighting", "running", "hiding"),
        emotions=("anger", "fear", "anxiety"),
    ),
)

THEME_KEYWORD_SCORE = 1.0
THEME_ELEMENT_SCORE = 0.5
THEME_EMOTION_SCORE = 0.7
THEME_THRESHOLD = 1.0

DEFAULT_EMOTIONAL_THEMES: Tuple[str, ...] = ("emotional journey",)
DEFAULT_NEUTRAL_THEMES: Tuple[str, ...] = ("mystery", "exploration")

# =============================================================================
# SUMMARY METADATA
# =============================================================================

STOP_WORDS = frozenset({
    "the", "and", "a", "an", "in", "on", "at", "to", "for", "with", "was", "were",
    "that", "this", "there", "their", "they", "it", "is", "are", "be", "been",
    "being", "have", "has", "had", "do", "does", "did", "but", "or", "as", "if",
    "then", "else", "when", "up", "down", "out", "about", "who", "which", "what",
    "where", "how", "why", "can", "will", "just", "should", "now", "me", "my",
    "myself", "we", "our", "you", "your", "he", "him", "his", "she", "her", "hers",
})

EMOTION_TITLES: Dict[str, str] = {
    "joy": "A Joyful Dream",
    "fear": "The Dark Vision",
    "peace": "Tranquil Moments",
    "mystery": "The Unknown Path",
    "love": "Dreams of Love",
    "anxiety": "Restless Nights",
    "wonder": "A Wondrous Journey",
    "excitement": "The Great Adventure",
}

RECURRING_INDICATORS: Tuple[str, ...] = (
    "again", "recurring", "same", "repeat", "always", "every night",
    "keeps happening", "over and over", "familiar",
)
