"""
Wellness chat package for the AI support assistant.

This package provides:
- API endpoints: POST /api/chat/reply
- Response generator: Gemini call with keyword fallback
- Fallback selector: Ordered keyword table of canned replies
- Prompt builder and history helpers
"""

from . import api
from . import response_generator
from . import fallback
from . import prompt_builder
from . import history
from . import models

__all__ = [
    'api',
    'response_generator',
    'fallback',
    'prompt_builder',
    'history',
    'models'
]
