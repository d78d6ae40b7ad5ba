"""
Loading, splitting and indexing documents for the retrieval demos.

Sources are a blog post (only its ``<p>`` elements) and a PDF; both are split
into overlapping chunks and indexed in an in-memory vector store.
"""
from typing import List, Optional

import bs4
from langchain_community.document_loaders import PyPDFLoader, WebBaseLoader
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore
from langchain_text_splitters import RecursiveCharacterTextSplitter

from llm_playground.config.common_settings import BLOG_POST_URL, PDF_DOCUMENT_PATH
from llm_playground.utils.logger import logger
from llm_playground.utils.model_factory import create_embeddings

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200


def load_blog_post(url: str = BLOG_POST_URL) -> List[Document]:
    """Load the paragraphs of a web page as a single document."""
    loader = WebBaseLoader(
        web_paths=(url,),
        bs_kwargs={"parse_only": bs4.SoupStrainer("p")},
    )
    docs = loader.load()
    logger.info(f"[Documents] Loaded {len(docs)} document(s) from {url}")
    return docs


def load_pdf(path: str = PDF_DOCUMENT_PATH) -> List[Document]:
    """Load a PDF, one document per page."""
    docs = PyPDFLoader(path).load()
    logger.info(f"[Documents] Loaded {len(docs)} page(s) from {path}")
    return docs


def split_documents(
    docs: List[Document],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> List[Document]:
    splitter = RecursiveCharacterTextSplitter(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
    splits = splitter.split_documents(docs)
    logger.info(f"[Documents] Split {len(docs)} document(s) into {len(splits)} chunks")
    return splits


def build_vector_store(docs: List[Document], embeddings: Optional[Embeddings] = None) -> InMemoryVectorStore:
    vector_store = InMemoryVectorStore(embeddings or create_embeddings())
    vector_store.add_documents(docs)
    return vector_store


def build_blog_vector_store(url: str = BLOG_POST_URL, embeddings: Optional[Embeddings] = None) -> InMemoryVectorStore:
    """Load, split and index the blog post."""
    return build_vector_store(split_documents(load_blog_post(url)), embeddings)


def format_docs(docs: List[Document], separator: str = "\n") -> str:
    return separator.join(doc.page_content for doc in docs)
