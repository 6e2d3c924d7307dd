from betcheck.config import get_weight
from betcheck.types import ConfigCat, RiskLevel

HIGH_THRESHOLD = get_weight(ConfigCat.THRESHOLDS, "high", 70)
MEDIUM_THRESHOLD = get_weight(ConfigCat.THRESHOLDS, "medium", 40)


def classify_score(score: float) -> RiskLevel:
    if score >= HIGH_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MEDIUM_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def is_likely_phishing(level: RiskLevel) -> bool:
    return level is RiskLevel.HIGH
