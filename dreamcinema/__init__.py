"""
Dream Cinema - Dream Narration to Video

Turns a short written dream into a playable video clip: heuristic text
analysis, prompt building, a remote text-to-video provider with polling,
and a curated fallback library so callers always get something to play.

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "Dream Cinema Team"
__project__ = "Dream Cinema"

from pathlib import Path

# Package root directory
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent

from .analysis import DreamAnalysis, DreamElement, DreamSummary, TextAnalyzer
from .video import GenerationOrchestrator, GenerationResult, HailuoProviderClient
from .service import DreamVideoService

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__project__",
    # Paths
    "PACKAGE_ROOT",
    "PROJECT_ROOT",
    # Pipeline
    "DreamAnalysis",
    "DreamElement",
    "DreamSummary",
    "TextAnalyzer",
    "GenerationOrchestrator",
    "GenerationResult",
    "HailuoProviderClient",
    "DreamVideoService",
]
