"""
Classifier Module - Step 3 of hub activity aggregation

Components:
- Classifier: activity level and trend rules
"""

from .classifier import Classifier


__all__ = [
    "Classifier",
]
