"""
Dream Cinema Analysis Module

Heuristic text analysis of dream narration.
"""

from .models import DreamAnalysis, DreamElement, DreamSummary
from .text_analyzer import TextAnalyzer, analyze
from .dream_summary import describe_dream, detect_recurring, extract_keywords, generate_title

__all__ = [
    'DreamAnalysis',
    'DreamElement',
    'DreamSummary',
    'TextAnalyzer',
    'analyze',
    'describe_dream',
    'detect_recurring',
    'extract_keywords',
    'generate_title',
]
