"""
Prompt Builder Module

This module renders the system instruction sent as the first turn of every
Gemini request: persona preamble, optional wellness data block and closing
instruction.
"""

from typing import Any, Dict, List, Optional

from wellness_chat.models import WellnessContext

# (attribute, label, suffix) in render order
WELLNESS_FIELDS = [
    ("mood_rating", "Mood", "/10"),
    ("stress_level", "Stress", "/10"),
    ("energy_level", "Energy", "/10"),
    ("sleep_hours", "Sleep Hours", ""),
    ("sleep_quality", "Sleep Quality", "/10"),
]


def _format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_wellness_lines(context: Optional[WellnessContext]) -> List[str]:
    """Return one '- Label: value' line per present field, in fixed order."""
    if context is None:
        return []

    lines = []
    for attr, label, suffix in WELLNESS_FIELDS:
        value = getattr(context, attr)
        if value is not None:
            lines.append(f"- {label}: {_format_value(value)}{suffix}")
    if context.notes:
        lines.append(f"- Notes: {context.notes}")
    return lines


def build_system_prompt(persona: Dict[str, str], context: Optional[WellnessContext] = None) -> str:
    """
    Build the system instruction block.

    Args:
        persona: 'persona' config section (base_prompt, closing_instruction)
        context: Optional wellness readings

    Returns:
        Persona preamble, wellness data block (only when any field is present)
        and closing instruction
    """
    prompt = persona["base_prompt"]

    lines = render_wellness_lines(context)
    if lines:
        prompt += "\n\nUser Wellness Data:\n" + "\n".join(lines)

    return prompt + "\n\n" + persona["closing_instruction"]
