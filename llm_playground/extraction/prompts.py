from langchain_core.prompts import ChatPromptTemplate

TAGGING_PROMPT = ChatPromptTemplate.from_template(
    """Extract the desired information from the following passage.

Only extract the properties mentioned in the 'Classification' function.

Passage:
{input}
"""
)

EXTRACTION_SYSTEM_PROMPT = """You are an expert extraction algorithm.
Only extract relevant information from the text.
If you do not know the value of an attribute asked to extract, return null for the attribute's value!"""

EXTRACTION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", EXTRACTION_SYSTEM_PROMPT),
    ("human", "{text}"),
])
