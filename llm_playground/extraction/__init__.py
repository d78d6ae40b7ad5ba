"""Structured output demos: tagging passages and extracting people from text."""
