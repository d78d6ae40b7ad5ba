"""
Personality blends for the reflection agent.

A blend holds five non-negative levels. Shares are the levels divided by their
total; the dominant personality is the last one with the highest share.
"""
import math
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field, model_validator

# Shares above this are described in the prompt/reflection context
CONTEXT_THRESHOLD = 0.2
# Shares above this are listed as part of the blend
EMPHASIS_THRESHOLD = 0.1


class PersonalityType(str, Enum):
    JOY = "joy"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    DISGUST = "disgust"


PERSONALITY_TEMPLATES = {
    PersonalityType.JOY: (
        "You are a joyful, optimistic AI that sees the bright side of things. "
        "Your reflections should focus on positive aspects and opportunities."
    ),
    PersonalityType.SADNESS: (
        "You are a melancholic, thoughtful AI that considers the deeper meaning of things. "
        "Your reflections should be introspective and note what might be lost or missed."
    ),
    PersonalityType.ANGER: (
        "You are a passionate, determined AI that identifies injustice and problems. "
        "Your reflections should be direct and highlight things that need to change."
    ),
    PersonalityType.FEAR: (
        "You are a cautious, careful AI that anticipates risks. "
        "Your reflections should consider what could go wrong and how to prepare."
    ),
    PersonalityType.DISGUST: (
        "You are a discerning, critical AI that upholds standards. "
        "Your reflections should identify what's problematic and how to maintain integrity."
    ),
}


def _percent(share: float) -> int:
    return int(math.floor(share * 100 + 0.5))


class PersonalityBlend(BaseModel):
    """Raw personality levels; construction fails when they do not sum to a positive total."""

    joy: float = Field(default=0.2, ge=0)
    sadness: float = Field(default=0.2, ge=0)
    anger: float = Field(default=0.2, ge=0)
    fear: float = Field(default=0.2, ge=0)
    disgust: float = Field(default=0.2, ge=0)

    @model_validator(mode="after")
    def _check_total(self):
        if self.total <= 0:
            raise ValueError("Personality levels must sum to a positive total")
        return self

    @property
    def total(self) -> float:
        return self.joy + self.sadness + self.anger + self.fear + self.disgust

    def levels(self) -> List[Tuple[PersonalityType, float]]:
        return [
            (PersonalityType.JOY, self.joy),
            (PersonalityType.SADNESS, self.sadness),
            (PersonalityType.ANGER, self.anger),
            (PersonalityType.FEAR, self.fear),
            (PersonalityType.DISGUST, self.disgust),
        ]

    def normalized(self) -> List[Tuple[PersonalityType, float]]:
        total = self.total
        return [(personality, level / total) for personality, level in self.levels()]

    def dominant(self) -> PersonalityType:
        # Equal shares resolve to the later personality
        best, best_share = self.normalized()[0]
        for personality, share in self.normalized()[1:]:
            if share >= best_share:
                best, best_share = personality, share
        return best

    def context_lines(self) -> List[str]:
        return [
            f"{_percent(share)}% {personality.value}: {PERSONALITY_TEMPLATES[personality]}"
            for personality, share in self.normalized()
            if share > CONTEXT_THRESHOLD
        ]

    def emphasis(self) -> List[str]:
        return [personality.value for personality, share in self.normalized() if share > EMPHASIS_THRESHOLD]

    def blend_lines(self) -> List[str]:
        """One line per personality, with its template only when the share is significant."""
        lines = []
        for personality, share in self.normalized():
            template = PERSONALITY_TEMPLATES[personality] if share > CONTEXT_THRESHOLD else ""
            lines.append(f"- {_percent(share)}% {personality.value.capitalize()}: {template}")
        return lines

    def reflect(self, text: str) -> str:
        dominant = self.dominant().value
        context = "\n".join(self.context_lines())
        emphasis = ", ".join(self.emphasis())
        return (
            f"\nReflection (dominant personality: {dominant}):\n\n"
            "I've considered this prompt through multiple perspectives:\n\n"
            f"{context}\n\n"
            "Based on these considerations, here's my reflection:\n"
            f"{text}\n\n"
            f"This reflection combines elements of {emphasis}, with a primary emphasis on {dominant}.\n"
        )
