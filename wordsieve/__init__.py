from .engine import WordPool

__all__ = ["WordPool"]
