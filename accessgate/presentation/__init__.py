"""Presentation layer: FastAPI integration."""
