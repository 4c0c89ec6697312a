"""Infrastructure Layer: logging setup and collaborator implementations."""
