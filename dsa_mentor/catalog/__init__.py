"""Problem catalog loading."""
from .loader import ProblemCatalog
from .models import Problem

__all__ = ["ProblemCatalog", "Problem"]
