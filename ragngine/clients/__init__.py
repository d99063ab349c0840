"""Provider clients: embeddings and LLMs."""
