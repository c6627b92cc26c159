"""Core configuration, logging, and collaborator helpers."""
