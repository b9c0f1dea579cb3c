"""
Base Transformer Interface

All payload transformers inherit from BaseTransformer and implement
transform_item(). Payloads are lists of plain dicts (JSON from the
clustering stage or the hub catalog file).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from loguru import logger


class TransformError(ValueError):
    """Raised when a raw payload item cannot be converted."""


class BaseTransformer(ABC):
    """
    Abstract base class for all data transformers.

    Usage:
        transformer = ClusterTransformer()
        clusters = transformer.transform(raw_items)
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return the payload name (e.g., 'clusters', 'hub_catalog')."""
        pass

    @abstractmethod
    def transform_item(self, item: Dict[str, Any]) -> Any:
        """
        Transform one raw item into a typed record.

        Raises:
            TransformError: if a required field is missing or invalid
        """
        pass

    def transform(self, raw_data: List[Dict[str, Any]], skip_invalid: bool = False) -> List[Any]:
        """
        Transform a raw payload list, preserving order.

        Args:
            raw_data: List of raw item dicts
            skip_invalid: Log and drop invalid items instead of raising

        Raises:
            TransformError: if the payload is not a list, or an item is
                invalid and skip_invalid is False
        """
        if not self.validate_raw_data(raw_data):
            raise TransformError(f"{self.source_name}: expected a list of objects")

        records = []
        for index, item in enumerate(raw_data):
            try:
                if not isinstance(item, dict):
                    raise TransformError("expected an object")
                records.append(self.transform_item(item))
            except TransformError as e:
                error = TransformError(f"{self.source_name}[{index}]: {e}")
                if not skip_invalid:
                    raise error from e
                logger.warning(f"Skipping invalid item {error}")
        return records

    def validate_raw_data(self, raw_data: Any) -> bool:
        """
        Validate raw data before transformation.

        An empty list is valid: it simply produces no records.
        """
        return isinstance(raw_data, list)

    @staticmethod
    def pick(item: Dict[str, Any], *keys: str, default: Any = None) -> Any:
        """Return the first present, non-None value among alternative keys."""
        for key in keys:
            value = item.get(key)
            if value is not None:
                return value
        return default
