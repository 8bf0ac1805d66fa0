from .terminal import (
    Category, category_for, format_letter, format_guess, format_knowledge, format_history,
    format_game, format_summary, pattern,
)

__all__ = [
    "Category", "category_for", "format_letter", "format_guess", "format_knowledge",
    "format_history", "format_game", "format_summary", "pattern",
]
