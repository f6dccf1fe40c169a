"""카탈로그 Core — 순수 Python, 저장소/호스트 무관"""

from .classifier import classify
from .errors import CatalogError, CatalogLoadError, IdConversionError
from .expander import expand
from .indexer import build_index
from .locator import locate_whitelists
from .models import (
    AmmoClassification,
    AmmoIndex,
    IdKind,
    IdRepresentation,
    ItemId,
    PassStatus,
    PassSummary,
    WhitelistRef,
)
from .store import CatalogStore

__all__ = [
    "classify",
    "build_index",
    "locate_whitelists",
    "expand",
    "CatalogError",
    "CatalogLoadError",
    "IdConversionError",
    "AmmoClassification",
    "AmmoIndex",
    "IdKind",
    "IdRepresentation",
    "ItemId",
    "PassStatus",
    "PassSummary",
    "WhitelistRef",
    "CatalogStore",
]
