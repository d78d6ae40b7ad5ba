from langchain_core.tools import tool
from pydantic import BaseModel, Field


class ArithmeticInput(BaseModel):
    a: float = Field(description="First operand")
    b: float = Field(description="Second operand")


@tool(name_or_callable="add", description="Add two numbers.", args_schema=ArithmeticInput)
def add(a: float, b: float) -> float:
    return a + b


@tool(name_or_callable="multiply", description="Multiply two numbers.", args_schema=ArithmeticInput)
def multiply(a: float, b: float) -> float:
    return a * b
