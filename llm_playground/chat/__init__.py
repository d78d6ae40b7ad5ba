"""Chat model basics: translation prompts and stateless conversation."""
