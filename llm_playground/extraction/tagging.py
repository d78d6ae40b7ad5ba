"""
Tagging passages with sentiment, aggressiveness and language through
structured output.
"""
from typing import List, Optional, Type

from langchain_core.language_models.chat_models import BaseChatModel
from pydantic import BaseModel

from llm_playground.utils.logger import logger
from llm_playground.utils.model_factory import create_demo_chat_model

from .prompts import TAGGING_PROMPT
from .schemas import Classification, GradedClassification

FREE_FORM_PASSAGE = "Porra assim não da mano, sem condições uma merda dessas"

GRADED_PASSAGES: List[str] = [
    "Estoy increiblemente contento de haberte conocido! Creo que seremos muy buenos amigos!",
    "Estoy muy enojado con vos! Te voy a dar tu merecido!",
    "Weather is ok here, I can go outside without much more than a coat",
]


def classify(model: BaseChatModel, passage: str, schema: Type[BaseModel] = Classification) -> BaseModel:
    """Tag ``passage`` with the fields of ``schema``."""
    structured_model = model.with_structured_output(schema)
    return structured_model.invoke(TAGGING_PROMPT.invoke({"input": passage}))


def run(model: Optional[BaseChatModel] = None) -> None:
    model = model or create_demo_chat_model("tagging")

    logger.info("[Tagging] Free-form classification")
    print("output1", classify(model, FREE_FORM_PASSAGE, Classification))

    logger.info("[Tagging] Classification with fixed values")
    for index, passage in enumerate(GRADED_PASSAGES, start=2):
        print(f"result{index}", classify(model, passage, GradedClassification))
