"""Reflection agent that answers through a blend of five personalities."""
from .agent import ReflectionResult, create_reflection_agent, generate_reflection, reflect_with_thoughts
from .personality import PersonalityBlend, PersonalityType

__all__ = [
    "PersonalityBlend",
    "PersonalityType",
    "ReflectionResult",
    "create_reflection_agent",
    "generate_reflection",
    "reflect_with_thoughts",
]
