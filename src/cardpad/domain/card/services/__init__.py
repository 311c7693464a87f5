"""Domain services over card buffer lines.

All functions here are pure: they read lines and return new values.
"""

from .buffer_edits import replace_field_value, set_header
from .card_parser import parse_card
from .card_renderer import render_card, render_document
from .field_locator import locate_fields
from .field_navigator import FieldNavigator
from .highlighting import highlight_ranges
from .model_reconciler import ModelReconciler

__all__ = [
    "FieldNavigator",
    "ModelReconciler",
    "highlight_ranges",
    "locate_fields",
    "parse_card",
    "render_card",
    "render_document",
    "replace_field_value",
    "set_header",
]
