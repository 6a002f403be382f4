"""Shared utilities: logging, I/O and definition validation."""
