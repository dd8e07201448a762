"""FastAPI backend for sitecms."""
