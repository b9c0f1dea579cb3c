"""
Accumulator Module - Step 1 of hub activity aggregation

Components:
- Accumulator: folds matched clusters into per-hub records
- HubAccumulator: running record for one hub
"""

from .models import HubAccumulator
from .accumulator import Accumulator


__all__ = [
    "Accumulator",
    "HubAccumulator",
]
