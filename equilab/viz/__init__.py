"""Terminal display of equity results and hand rankings."""

from .results import ResultDisplay

__all__ = ["ResultDisplay"]
