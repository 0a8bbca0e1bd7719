"""FastAPI web dashboard."""
