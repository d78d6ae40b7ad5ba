"""
A chat model keeps no memory between calls: asking for a name in a fresh call
fails, while replaying the history lets the model answer.
"""
from typing import Dict, List, Optional, Tuple

from langchain_core.language_models.chat_models import BaseChatModel

from llm_playground.utils.model_factory import create_demo_chat_model, extract_text_content

Turn = Dict[str, str]

INTRODUCTION: List[Turn] = [{"role": "user", "content": "hi im r4to"}]
NAME_QUESTION: List[Turn] = [{"role": "user", "content": "what's my name?"}]
HISTORY_WITH_QUESTION: List[Turn] = [
    {"role": "user", "content": "hi!, i'm r4to"},
    {"role": "assistant", "content": "hi r4to!, how can I assist you today?"},
    {"role": "user", "content": "what's my name?"},
]


def ask(model: BaseChatModel, turns: List[Turn]) -> str:
    return extract_text_content(model.invoke(turns).content)


def stateless_vs_history(model: BaseChatModel) -> Tuple[str, str, str]:
    """Introduction, a fresh name question, then the question with history replayed."""
    return (
        ask(model, INTRODUCTION),
        ask(model, NAME_QUESTION),
        ask(model, HISTORY_WITH_QUESTION),
    )


def run(model: Optional[BaseChatModel] = None) -> None:
    model = model or create_demo_chat_model("conversation")

    results = stateless_vs_history(model)
    for index, content in enumerate(results, start=1):
        print(f"result_{index} => {content}")
