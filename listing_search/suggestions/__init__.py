"""Autocomplete suggestion generation."""

from .suggestion_generator import (
    generate_suggestions,
    history_suggestions,
    combine_suggestions,
)

__all__ = ['generate_suggestions', 'history_suggestions', 'combine_suggestions']
