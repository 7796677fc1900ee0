from .spans import highlight_spans

__all__ = ["highlight_spans"]
