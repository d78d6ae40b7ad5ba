"""
Extracting people from text into ``Person`` and ``Data`` schemas.

The list schema runs on an OpenAI model: list-valued tool arguments are not
reliable on the Groq-hosted models.
"""
from typing import Optional, Type

from langchain_core.language_models.chat_models import BaseChatModel
from pydantic import BaseModel

from llm_playground.utils.logger import logger
from llm_playground.utils.model_factory import create_demo_chat_model

from .prompts import EXTRACTION_PROMPT
from .schemas import Data, Person

SINGLE_PERSON_METRIC = "Alan Smith is 1.83 tall and has blond hair."
SINGLE_PERSON_IMPERIAL = "Alan Smith is 6 feet tall and has blond hair."
MULTIPLE_PEOPLE = "My name is Jeff, my hair is black and i am 6 feet tall. Anna has the same color hair as me."

LIST_EXTRACTION_MODEL = "gpt-4o-mini"


def extract(model: BaseChatModel, text: str, schema: Type[BaseModel] = Person) -> BaseModel:
    structured_model = model.with_structured_output(schema)
    return structured_model.invoke(EXTRACTION_PROMPT.invoke({"text": text}))


def run(model: Optional[BaseChatModel] = None, list_model: Optional[BaseChatModel] = None) -> None:
    model = model or create_demo_chat_model("people_extraction")
    list_model = list_model or create_demo_chat_model(
        "people_list_extraction", default_model=LIST_EXTRACTION_MODEL, default_temperature=0
    )

    logger.info("[Extraction] Single person, metric height")
    print({"result_1": extract(model, SINGLE_PERSON_METRIC, Person)})

    logger.info("[Extraction] Single person, imperial height")
    print({"result_2": extract(model, SINGLE_PERSON_IMPERIAL, Person)})

    logger.info("[Extraction] Several people")
    print(extract(list_model, MULTIPLE_PEOPLE, Data))
