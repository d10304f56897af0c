"""
Dream analysis data model.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from dreamcinema.core.constants import ElementType


@dataclass
class DreamElement:
    """A single detected symbol with a saturating prominence score."""
    type: ElementType
    value: str
    prominence: float

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "value": self.value, "prominence": self.prominence}


@dataclass
class DreamAnalysis:
    """Structured extraction computed from free-text dream narration."""
    elements: List[DreamElement]
    dominant_themes: List[str] = field(default_factory=list)
    suggested_palette: List[str] = field(default_factory=list)
    mood_score: float = 0.5

    def values_of(self, element_type: ElementType) -> List[str]:
        """Values of all elements of one type, in detection order."""
        return [e.value for e in self.elements if e.type == element_type]

    def has_element(self, value: str) -> bool:
        return any(e.value == value for e in self.elements)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "elements": [e.to_dict() for e in self.elements],
            "dominant_themes": list(self.dominant_themes),
            "suggested_palette": list(self.suggested_palette),
            "mood_score": self.mood_score,
        }


@dataclass
class DreamSummary:
    """Analysis plus the presentation metadata collaborators show alongside it."""
    title: str
    keywords: List[str]
    is_recurring: bool
    analysis: DreamAnalysis

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "keywords": list(self.keywords),
            "is_recurring": self.is_recurring,
            "analysis": self.analysis.to_dict(),
        }
