"""
Scorer Module - Step 2 of hub activity aggregation

Components:
- Scorer: weighted activity score per hub
"""

from .scorer import Scorer


__all__ = [
    "Scorer",
]
