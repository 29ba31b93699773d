"""FastAPI web adapter."""
