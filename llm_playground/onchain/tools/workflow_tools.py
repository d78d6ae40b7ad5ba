from langchain_core.tools import tool

from llm_playground.utils.logger import logger

from .schemas import RequestAdditionalDataInput, UpdateProgressInput


@tool(
    name_or_callable="update_progress",
    description="Update the progress of the analysis workflow.",
    args_schema=UpdateProgressInput,
)
def update_progress(stage: str, status: str) -> str:
    """Log a stage transition and acknowledge it."""
    logger.info(f"[PROGRESS] {stage}: {status}")
    return f"Analysis progress updated: {stage} - {status}"


@tool(
    name_or_callable="request_additional_data",
    description="Request additional data when current information is insufficient.",
    args_schema=RequestAdditionalDataInput,
)
def request_additional_data(data_type: str, reason: str) -> str:
    return (
        f"Request for additional {data_type} data noted: {reason}. "
        "Please provide this information to continue the analysis."
    )
