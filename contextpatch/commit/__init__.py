from .apply import apply_hunks, reindent_line
from .order import order_hunks

__all__ = ["apply_hunks", "order_hunks", "reindent_line"]
