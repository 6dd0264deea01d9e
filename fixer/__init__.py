"""Fixer screening: content moderation and payment checks for job postings."""

__version__ = "0.1.0"
