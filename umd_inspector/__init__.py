"""Validation and metadata extraction for UmdImageCreator dumps."""

__version__ = "0.1.0"
