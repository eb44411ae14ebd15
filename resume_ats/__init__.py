from .analysis import parse
from .scoring import score

__all__ = ["parse", "score"]
