"""Pydantic schemas and enumerations shared across the service."""
