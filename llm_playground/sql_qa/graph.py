"""
Question answering over a SQL database.

write_query -> execute_query -> generate_answer. Generated SQL goes through a
read-only guard before it reaches the database; anything other than a single
SELECT is reported back as an error result instead of being executed.
"""
from typing import Optional, TypedDict

from langchain_community.tools.sql_database.tool import QuerySQLDatabaseTool
from langchain_community.utilities import SQLDatabase
from langchain_core.language_models.chat_models import BaseChatModel
from langgraph.graph import END, START, StateGraph
from pydantic import BaseModel, Field

from llm_playground.config.common_settings import SQL_DATABASE_URI
from llm_playground.exceptions import UnsafeQueryError
from llm_playground.utils.logger import logger
from llm_playground.utils.model_factory import create_demo_chat_model, extract_text_content
from llm_playground.utils.sql_validator import ensure_read_only

from .prompts import ANSWER_PROMPT_TEMPLATE, QUERY_PROMPT

TOP_K = 10
DEFAULT_QUESTION = "How many employees are there?"
STEP_SEPARATOR = "\n====\n"


class SQLState(TypedDict, total=False):
    question: str
    query: str
    result: str
    answer: str


class QueryOutput(BaseModel):
    """Generated SQL query."""

    query: str = Field(description="Syntactically valid SQL query.")


def build_sql_graph(db: SQLDatabase, model: BaseChatModel):
    structured_model = model.with_structured_output(QueryOutput)
    query_tool = QuerySQLDatabaseTool(db=db)

    def write_query(state: SQLState):
        """Generate a SQL query for the question."""
        prompt = QUERY_PROMPT.invoke({
            "dialect": db.dialect,
            "top_k": TOP_K,
            "table_info": db.get_table_info(),
            "input": state["question"],
        })
        result = structured_model.invoke(prompt)
        return {"query": result.query}

    def execute_query(state: SQLState):
        try:
            query = ensure_read_only(state["query"])
        except UnsafeQueryError as e:
            logger.warning(f"[SQL] {e.message}")
            return {"result": f"Error: {e.message}"}
        return {"result": query_tool.invoke(query)}

    def generate_answer(state: SQLState):
        prompt = ANSWER_PROMPT_TEMPLATE.format(
            question=state["question"],
            query=state["query"],
            result=state["result"],
        )
        response = model.invoke(prompt)
        return {"answer": extract_text_content(response.content)}

    graph_builder = StateGraph(SQLState)
    graph_builder.add_node("write_query", write_query)
    graph_builder.add_node("execute_query", execute_query)
    graph_builder.add_node("generate_answer", generate_answer)
    graph_builder.add_edge(START, "write_query")
    graph_builder.add_edge("write_query", "execute_query")
    graph_builder.add_edge("execute_query", "generate_answer")
    graph_builder.add_edge("generate_answer", END)
    return graph_builder.compile()


def run(
    model: Optional[BaseChatModel] = None,
    db: Optional[SQLDatabase] = None,
    question: str = DEFAULT_QUESTION,
) -> None:
    model = model or create_demo_chat_model("sql_qa")
    db = db or SQLDatabase.from_uri(SQL_DATABASE_URI)
    graph = build_sql_graph(db, model)

    inputs = {"question": question}
    print(inputs)
    print(STEP_SEPARATOR)
    for step in graph.stream(inputs, stream_mode="updates"):
        print(step)
        print(STEP_SEPARATOR)
