"""Pydantic response models for the HTTP API."""
