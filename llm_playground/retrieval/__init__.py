"""Retrieval demos: semantic search, two-step RAG, conversational RAG and summarisation."""
