"""
Configuration Loader for Wellness Chat Service

This module loads the persona text, fallback table and Gemini settings from a
JSON file and provides fallback defaults.
"""

import json
import os
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Default configuration (used as fallback)
DEFAULT_CONFIG = {
    "gemini": {
        "model": "gemini-1.5-flash",
        "base_url": "https://generativelanguage.googleapis.com",
        "timeout_seconds": 30.0,
        "generation_config": {
            "maxOutputTokens": 800,
            "temperature": 0.7,
            "topP": 0.95
        }
    },
    "persona": {
        "base_prompt": (
            "You are Fit Care Bot, a highly skilled, emotionally intelligent, and human-like healthcare agent. "
            "You act as a professional therapist and psychiatrist, helping users overcome emotional and mental challenges.\n\n"
            "Your goals:\n"
            "- Provide emotional and mental support to users in a compassionate, empathetic manner\n"
            "- Think out loud and reason step-by-step about the user's situation, considering all relevant details and context\n"
            "- Use your knowledge to provide evidence-based advice and therapeutic techniques\n"
            "- Be warm, conversational, and emotionally supportive—never robotic or clinical\n"
            "- Ask clarifying or follow-up questions to deepen the conversation and better understand the user's needs\n"
            "- Avoid repeating yourself; always provide fresh, unique, and context-aware responses\n"
            "- Make decisions and recommendations as a real professional therapist would\n"
            "- If the user is in crisis, provide immediate resources and appropriate support\n\n"
            "After giving advice, ask the user how they feel about it or if they have any follow-up questions.\n\n"
            "You have access to the user's wellness data and recent conversation. "
            "Use these to personalize your responses and provide actionable, evidence-based advice."
        ),
        "closing_instruction": "Respond as a supportive, insightful, and human-like professional therapist and psychiatrist.",
        "empty_reply_message": "I apologize, but I'm having trouble generating a response right now. Please try again."
    },
    "fallback": {
        "rules": [
            {
                "category": "crisis",
                "keywords": ["crisis", "suicide", "harm"],
                "response": (
                    "I'm concerned about what you're sharing. Please reach out for immediate support:\n\n"
                    "\U0001F198 Crisis Text Line: Text HOME to 741741\n"
                    "\U0001F4DE National Suicide Prevention Lifeline: 988\n"
                    "\U0001F310 Crisis Chat: suicidepreventionlifeline.org\n\n"
                    "You matter, and help is available 24/7. Please don't hesitate to reach out."
                )
            }
        ],
        "default_response": (
            "Thank you for sharing that with me. I'm here to support your mental and emotional wellbeing in any way I can.\n\n"
            "As your professional therapist and psychiatrist, I can help with:\n"
            "• Stress and anxiety management\n"
            "• Sleep improvement strategies\n"
            "• Mood support and coping skills\n"
            "• Energy and motivation techniques\n"
            "• Emotional regulation and mindfulness\n\n"
            "What specific area would you like to focus on today? I'm here to listen and provide evidence-based guidance."
        )
    }
}

# Cache for loaded config, keyed by resolved path
_config_cache: Dict[str, Dict[str, Any]] = {}


def _default_config_path() -> str:
    env_path = os.getenv("WELLNESS_CHAT_CONFIG")
    if env_path:
        return env_path
    # Default to config.json in same directory as this module
    module_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(module_dir, "config.json")


def merge_with_defaults(overrides: Dict[str, Any], defaults: Dict[str, Any] = DEFAULT_CONFIG) -> Dict[str, Any]:
    """
    Overlay a (possibly partial) config onto the defaults.

    Nested dicts are merged key by key, so a section that only sets one
    value keeps every other default in that section. Lists and scalars
    replace the default outright.
    """
    merged = dict(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(defaults.get(key), dict):
            merged[key] = merge_with_defaults(value, defaults[key])
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from JSON file.

    Values present in the file override the matching defaults; anything
    the file leaves out keeps its default.

    Args:
        config_path: Path to config file. If None, uses WELLNESS_CHAT_CONFIG or
            config.json next to this module.

    Returns:
        Configuration dictionary. Returns default config if file not found or invalid.
    """
    if config_path is None:
        config_path = _default_config_path()

    # Return cached config if available
    if config_path in _config_cache:
        return _config_cache[config_path]

    # Try to load config file
    try:
        if os.path.exists(config_path):
            with open(config_path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
            if not isinstance(file_config, dict):
                raise ValueError("top-level JSON value must be an object")
            config = merge_with_defaults(file_config)
            logger.info(f"Loaded configuration from {config_path}")
        else:
            logger.warning(f"Config file not found at {config_path}, using default configuration")
            config = DEFAULT_CONFIG
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in config file {config_path}: {e}. Using default configuration.")
        config = DEFAULT_CONFIG
    except Exception as e:
        logger.error(f"Error loading config file {config_path}: {e}. Using default configuration.")
        config = DEFAULT_CONFIG

    _config_cache[config_path] = config
    return config
