"""Helpers shared across domain modules."""

from .tokenizer import tokenize

__all__ = ["tokenize"]
