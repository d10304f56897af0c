"""
Dream Cinema Video Module

Prompt building, provider client, fallback library and orchestration.
"""

from .models import GenerationJob, GenerationRequest, GenerationResult, JobHandle, JobStatus
from .prompt_builder import PromptBuilder, build_prompt
from .fallback_selector import FallbackSelector
from .provider_client import HailuoProviderClient, clamp_duration
from .orchestrator import GenerationOrchestrator, determine_emotional_tone
from . import style_catalog

__all__ = [
    'GenerationJob',
    'GenerationRequest',
    'GenerationResult',
    'JobHandle',
    'JobStatus',
    'PromptBuilder',
    'build_prompt',
    'FallbackSelector',
    'HailuoProviderClient',
    'clamp_duration',
    'GenerationOrchestrator',
    'determine_emotional_tone',
    'style_catalog',
]
