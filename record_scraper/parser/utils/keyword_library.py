# utils/keyword_library.py
# ===================================================================
# Header keyword sets for the four record fields.
# Defaults can be extended from a JSON file (FIELD_KEYWORDS_PATH) shaped
# like {"observed_value": ["record"], "location": ["place"]}.
# ===================================================================
import json
import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

from ..config import FIELD_KEYWORDS_PATH
from ..models import FIELD_ACTOR, FIELD_DATE, FIELD_LOCATION, FIELD_VALUE, RECORD_FIELDS
from .logger_instance import logger

FieldKeywords = Dict[str, Tuple[str, ...]]

DEFAULT_FIELD_KEYWORDS: Mapping[str, Tuple[str, ...]] = {
    FIELD_VALUE: ("mark",),
    FIELD_ACTOR: ("athlete",),
    FIELD_DATE: ("date",),
    FIELD_LOCATION: ("venue",),
}


def _normalize(keywords: Iterable[str]) -> Tuple[str, ...]:
    seen = []
    for kw in keywords:
        if not isinstance(kw, str):
            continue
        kw = kw.strip().lower()
        if kw and kw not in seen:
            seen.append(kw)
    return tuple(seen)


def build_field_keywords(overrides: Optional[Mapping[str, Iterable[str]]] = None, replace: bool = False) -> FieldKeywords:
    """
    Return a fresh keyword mapping for every record field.

    Overrides are appended after the defaults unless ``replace`` is set, in
    which case a field listed in ``overrides`` uses only the given keywords.
    Unknown field names are ignored.
    """
    keywords: FieldKeywords = {field: _normalize(DEFAULT_FIELD_KEYWORDS[field]) for field in RECORD_FIELDS}
    for field, extra in (overrides or {}).items():
        if field not in keywords:
            logger.warning(f"[KEYWORDS] Ignoring unknown field '{field}' in keyword overrides.")
            continue
        if isinstance(extra, str):
            extra = [extra]
        if replace:
            keywords[field] = _normalize(extra)
        else:
            keywords[field] = _normalize(list(keywords[field]) + list(extra))
    return keywords


def load_field_keywords(path: Optional[str] = None) -> FieldKeywords:
    """Load keyword overrides from a JSON file, falling back to the defaults."""
    path = path if path is not None else FIELD_KEYWORDS_PATH
    if not path or not os.path.exists(path):
        return build_field_keywords()
    try:
        with open(path, "r", encoding="utf-8") as f:
            overrides = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"[KEYWORDS] Failed to load keyword overrides from {path}: {e}")
        return build_field_keywords()
    if not isinstance(overrides, dict):
        logger.error(f"[KEYWORDS] Keyword overrides in {path} must be a JSON object.")
        return build_field_keywords()
    logger.debug(f"[KEYWORDS] Loaded keyword overrides for {sorted(overrides)} from {path}")
    return build_field_keywords(overrides)
