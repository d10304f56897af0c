"""
Dream summary helpers: title, keywords and recurring-dream detection.

These feed the metadata collaborators display next to a generated video.
"""

import re
from collections import Counter
from typing import Iterable, List, Optional

from .models import DreamSummary
from .patterns import EMOTION_TITLES, RECURRING_INDICATORS, STOP_WORDS
from .text_analyzer import TextAnalyzer, normalize_tags

_PUNCTUATION = re.compile(r"[.,!?;:'\"()]")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")

DEFAULT_KEYWORD_LIMIT = 8


def extract_keywords(text: str, limit: int = DEFAULT_KEYWORD_LIMIT) -> List[str]:
    """
    Most frequent meaningful words of the dream.

    Words are lower-cased, stripped of punctuation, longer than three
    characters and not stop words. Ties keep first-occurrence order.
    """
    counts: Counter = Counter()
    for word in (text or "").lower().split():
        clean = _PUNCTUATION.sub("", word)
        if len(clean) > 3 and clean not in STOP_WORDS:
            counts[clean] += 1

    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [word for word, _ in ranked[:limit]]


def _key_phrases(sentence: str) -> List[str]:
    words = sentence.lower().split()
    phrases = []

    for i in range(len(words) - 1):
        two_words = f"{words[i]} {words[i + 1]}"
        if len(two_words) > 6 and "was" not in two_words and "were" not in two_words:
            phrases.append(two_words)

        if i < len(words) - 2:
            three_words = f"{words[i]} {words[i + 1]} {words[i + 2]}"
            if len(three_words) > 10:
                phrases.append(three_words)

    return phrases[:3]


def _capitalize_title(phrase: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in phrase.split(" "))


def generate_title(text: str, emotion_tags: Optional[Iterable[str]] = None) -> str:
    """Title from the first sentence's leading key phrase, else from the first emotion."""
    sentences = [s.strip() for s in _SENTENCE_SPLIT.split(text or "") if s.strip()]
    first_sentence = sentences[0] if sentences else ""

    phrases = _key_phrases(first_sentence)
    if phrases:
        return _capitalize_title(phrases[0])

    emotions = normalize_tags(emotion_tags)
    if emotions:
        return EMOTION_TITLES.get(emotions[0], "My Dream Journey")

    return "Untitled Dream"


def detect_recurring(text: str) -> bool:
    """True when the narration mentions the dream repeating."""
    content = (text or "").lower()
    return any(indicator in content for indicator in RECURRING_INDICATORS)


def describe_dream(
    text: str,
    emotion_tags: Optional[Iterable[str]] = None,
    analyzer: Optional[TextAnalyzer] = None,
) -> DreamSummary:
    """Full analysis plus title, keywords and recurring flag."""
    tags = list(emotion_tags or [])
    analyzer = analyzer or TextAnalyzer()
    return DreamSummary(
        title=generate_title(text, tags),
        keywords=extract_keywords(text),
        is_recurring=detect_recurring(text),
        analysis=analyzer.analyze(text, tags),
    )
