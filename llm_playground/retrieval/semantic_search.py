"""
Semantic search over a 10-K filing: plain similarity, similarity with scores,
search by embedding vector and an MMR retriever answering a batch of queries.
"""
from typing import Any, Dict, Optional

from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore

from llm_playground.utils.logger import logger
from llm_playground.utils.model_factory import create_embeddings

from .documents import build_vector_store, load_pdf, split_documents

INCORPORATION_QUESTION = "When was Nike incorporated?"
REVENUE_QUESTION = "What was Nike's revenue in 2023?"
MARGINS_QUESTION = "How were Nike's margins impacted in 2023?"


def search_examples(vector_store: InMemoryVectorStore, embeddings: Embeddings) -> Dict[str, Any]:
    """Run every search flavour once and return the raw results keyed by flavour."""
    results: Dict[str, Any] = {}

    results["similarity"] = vector_store.similarity_search(INCORPORATION_QUESTION)
    results["similarity_with_score"] = vector_store.similarity_search_with_score(REVENUE_QUESTION)

    embedding = embeddings.embed_query(MARGINS_QUESTION)
    results["vector_with_score"] = vector_store.similarity_search_with_score_by_vector(embedding, k=1)

    retriever = vector_store.as_retriever(search_type="mmr", search_kwargs={"fetch_k": 1})
    results["mmr_batch"] = retriever.batch([INCORPORATION_QUESTION, REVENUE_QUESTION])

    return results


def run(embeddings: Optional[Embeddings] = None, pdf_path: Optional[str] = None) -> None:
    embeddings = embeddings or create_embeddings()
    docs = load_pdf(pdf_path) if pdf_path else load_pdf()
    vector_store = build_vector_store(split_documents(docs), embeddings)

    results = search_examples(vector_store, embeddings)

    logger.info("[SemanticSearch] Similarity Search")
    print(results["similarity"][0])

    logger.info("[SemanticSearch] Similarity Search With Score")
    print(results["similarity_with_score"][0])

    logger.info("[SemanticSearch] Similarity Search Vector With Score")
    print(results["vector_with_score"])

    logger.info("[SemanticSearch] Vector Store as Retriever batch query")
    print(results["mmr_batch"])
