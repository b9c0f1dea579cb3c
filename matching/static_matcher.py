"""
Static Hub Matcher

Default HubMatcher backed by the hub catalog JSON file. A hub matches
when its name, its city or one of its catalog keywords appears in the
title as a whole word (case-insensitive).
"""
import json
import re
from pathlib import Path
from typing import List, Optional, Pattern, Tuple

from loguru import logger

from config import settings
from data_transformers import HubCatalogTransformer, TransformError
from data_transformers.models import HubMatch, TechHubLocation
from .base import HubMatcher

NAME_CONFIDENCE = 1.0
DEFAULT_KEYWORD_CONFIDENCE = 0.7


def load_hub_catalog(path: Path = None) -> List[TechHubLocation]:
    """
    Load the hub catalog from a JSON file.

    The file holds either a list of hubs or {"hubs": [...]}. A missing or
    malformed file yields an empty catalog; invalid entries are logged and
    skipped so the remaining hubs are still loaded.
    """
    path = Path(path or settings.HUB_CATALOG_PATH)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Hub catalog not found: {path}")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse hub catalog {path}: {e}")
        return []

    if isinstance(raw, dict):
        raw = raw.get("hubs", [])

    try:
        hubs = HubCatalogTransformer().transform(raw, skip_invalid=True)
    except TransformError as e:
        logger.error(f"Invalid hub catalog {path}: {e}")
        return []

    logger.info(f"Loaded {len(hubs)} hubs from {path}")
    return hubs


class StaticHubMatcher(HubMatcher):
    """
    Keyword matcher over a fixed list of hubs.

    Name and city hits score NAME_CONFIDENCE, other keywords score
    keyword_confidence. At most one match is returned per hub, the
    strongest one.
    """

    def __init__(
        self,
        hubs: List[TechHubLocation],
        keyword_confidence: float = DEFAULT_KEYWORD_CONFIDENCE
    ):
        self._hubs = list(hubs)
        self.keyword_confidence = keyword_confidence
        self._patterns = [(hub, self._build_terms(hub)) for hub in self._hubs]

    @property
    def hubs(self) -> List[TechHubLocation]:
        return list(self._hubs)

    @classmethod
    def from_catalog(cls, path: Path = None, **kwargs) -> "StaticHubMatcher":
        """Build a matcher from the catalog file."""
        return cls(load_hub_catalog(path), **kwargs)

    def _build_terms(self, hub: TechHubLocation) -> List[Tuple[str, Pattern, float]]:
        terms = []
        seen = set()
        candidates = [(hub.name, NAME_CONFIDENCE), (hub.city, NAME_CONFIDENCE)]
        candidates += [(keyword, self.keyword_confidence) for keyword in hub.keywords]

        for term, confidence in candidates:
            term = (term or "").strip()
            if not term or term.lower() in seen:
                continue
            seen.add(term.lower())
            pattern = re.compile(r"(?<!\w)" + re.escape(term) + r"(?!\w)", re.IGNORECASE)
            terms.append((term, pattern, confidence))
        return terms

    def match(self, title: str) -> List[HubMatch]:
        if not title:
            return []

        matches = []
        for hub, terms in self._patterns:
            best: Optional[Tuple[str, float]] = None
            for term, pattern, confidence in terms:
                if pattern.search(title) and (best is None or confidence > best[1]):
                    best = (term, confidence)
            if best:
                matches.append(HubMatch(
                    hub_id=hub.id,
                    hub=hub,
                    confidence=best[1],
                    matched_keyword=best[0],
                ))
        return matches
