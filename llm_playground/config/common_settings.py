import os

from dotenv import load_dotenv

from llm_playground.exceptions import ConfigurationError

load_dotenv()  # Load environment variables from .env file

# --------------------------------------------------
# LLM Provider Configuration
# --------------------------------------------------
# Provider is inferred from the model name (see utils/model_factory.py).
# DEFAULT_MODEL, EMBEDDINGS_MODEL and the provider API keys are read from the
# environment each time a client is created.
GROQ_DEFAULT_MODEL = os.environ.get("GROQ_DEFAULT_MODEL", "llama-3.3-70b-versatile")
WEB_SEARCH_MODEL = os.environ.get("WEB_SEARCH_MODEL", "gpt-4o-search-preview")

# --------------------------------------------------
# Demo Data Sources
# --------------------------------------------------
BLOG_POST_URL = os.environ.get("BLOG_POST_URL", "https://lilianweng.github.io/posts/2023-06-23-agent/")
PDF_DOCUMENT_PATH = os.environ.get("PDF_DOCUMENT_PATH", "./data/nke-10k-2023.pdf")
SQL_DATABASE_URI = os.environ.get("SQL_DATABASE_URI", "sqlite:///data/Chinook.db")

# --------------------------------------------------
# Output & Runtime
# --------------------------------------------------
REPORTS_DIR = os.environ.get("REPORTS_DIR", "./reports")
CONTRACT_ANALYSIS_TIMEOUT_SECONDS = float(os.environ.get("CONTRACT_ANALYSIS_TIMEOUT_SECONDS", "300"))


def get_required_env(env_name: str) -> str:
    """Return an environment variable or raise when it is unset or empty."""
    value = os.environ.get(env_name)

    if not value:
        raise ConfigurationError(f"{env_name} environment variable is required.")
    return value
