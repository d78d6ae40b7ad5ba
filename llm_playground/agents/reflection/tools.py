from typing import Any, List, Type

from langchain_core.tools import BaseTool
from pydantic import BaseModel, Field

from llm_playground.utils.logger import logger

from .personality import PersonalityBlend


class ReflectionInput(BaseModel):
    query: str = Field(description="The thought or idea to reflect on")


class ThoughtInput(BaseModel):
    thought: str = Field(description="The intermediate thought to store")


class ThoughtStore(BaseModel):
    """Thoughts collected during a single reflection run."""

    prompt_id: str
    personality_type: str
    thoughts: List[str] = Field(default_factory=list)

    def add(self, thought: str) -> None:
        self.thoughts.append(thought)


class ReflectionTool(BaseTool):
    name: str = "generate_reflection"
    description: str = "Generate a reflection based on a prompt with different personality aspects"
    args_schema: Type[BaseModel] = ReflectionInput
    blend: PersonalityBlend = Field(default_factory=PersonalityBlend)

    def _run(self, query: str, **kwargs: Any) -> str:
        return self.blend.reflect(query)


class ThoughtStorageTool(BaseTool):
    name: str = "store_thought"
    description: str = "Store an intermediate thought or reflection"
    args_schema: Type[BaseModel] = ThoughtInput
    store: ThoughtStore

    def _run(self, thought: str, **kwargs: Any) -> str:
        self.store.add(thought)
        logger.info(
            f"[Reflection] Stored thought #{len(self.store.thoughts)} "
            f"for prompt {self.store.prompt_id} ({self.store.personality_type})"
        )
        return "Thought stored successfully"
