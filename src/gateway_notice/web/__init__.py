"""Web package - FastAPI app serving the block notice."""
