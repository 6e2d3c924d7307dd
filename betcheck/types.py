from enum import Enum


class ScoreMode(str, Enum):
    SIMPLIFIED = "simplified"
    COMBINED = "combined"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ConfigCat(str, Enum):
    THRESHOLDS = "thresholds"
    REGISTRY = "registry"
    REDIRECTS = "redirects"


class WarningReason(str, Enum):
    DOMAIN_SIMILARITY = "domain_similarity"
    NOT_OFFICIAL_DOMAIN = "not_official_domain"
