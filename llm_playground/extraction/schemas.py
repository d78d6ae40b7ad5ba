"""Structured output schemas for tagging and extraction."""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class Classification(BaseModel):
    """Free-form tags for a passage."""
    sentiment: str = Field(..., description="The sentiment of the text")
    aggressiveness: int = Field(
        ..., ge=1, le=10, description="How aggressive the text is on a scale from 1 to 10"
    )
    language: str = Field(..., description="The language the text is written in")


class GradedClassification(BaseModel):
    """Tags restricted to fixed values."""
    sentiment: Literal["happy", "neutral", "sad"]
    aggressiveness: int = Field(
        ...,
        ge=1,
        le=5,
        description="Describes how aggressive the statement is, the higher the number the more aggressive",
    )
    language: Literal["spanish", "english", "french", "german", "italian", "portuguese"] = Field(
        ..., description="The language the text is written in"
    )


class Person(BaseModel):
    """Information about a person."""
    name: Optional[str] = Field(default=None, description="The name of the person")
    hair_color: Optional[str] = Field(default=None, description="The color of the person's hair if known")
    height_in_meters: Optional[float] = Field(default=None, description="Height measured in meters")


class Data(BaseModel):
    """Extracted data about people."""
    people: List[Person] = Field(default_factory=list, description="Extracted data about people.")
