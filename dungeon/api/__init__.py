"""HTTP play surface built on FastAPI."""
