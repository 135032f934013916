"""Route construction for path-finding algorithms."""

from .models import InMemoryPath, WeightedPath
from .utils import build_path, calculate_path_weight

__all__ = [
    "InMemoryPath",
    "WeightedPath",
    "build_path",
    "calculate_path_weight",
]
