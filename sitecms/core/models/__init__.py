"""Pydantic models shared by the API layer and the scripts."""
