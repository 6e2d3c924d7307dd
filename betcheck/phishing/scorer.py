from typing import Any, Dict, List, Optional

from loguru import logger

from betcheck.phishing.catalog import signals_for
from betcheck.phishing.models import PhishingAssessment, RedirectCheck, SimilarDomain
from betcheck.phishing.risk import classify_score, is_likely_phishing
from betcheck.phishing.signals.base import Signal
from betcheck.registry.models import Registry, normalize
from betcheck.types import ScoreMode

# The sum is left unclamped; with default weights both modes top out at 100.
MAX_SCORE = 100


def _run_signal_set(domain: str, signals: List[Signal], context: Dict[str, Any]):
    """
    Run signals on one domain.
    Returns: (total_score, scores_dict, details_list)
    """
    scores: Dict[str, float] = {}
    details: List[str] = []

    for signal in signals:
        try:
            result = signal.run(domain, context)
        except Exception as e:  # noqa: BLE001
            logger.warning(f"Signal {signal.name} crashed on {domain}: {e}")
            scores[signal.name] = 0.0
            continue

        scores[signal.name] = float(result.score)
        if result.fired:
            details.append(result.detail)

    return sum(scores.values()), scores, details


def score_domain(
        domain: str,
        registry: Optional[Registry] = None,
        mode: ScoreMode = ScoreMode.COMBINED,
        redirect_check: Optional[RedirectCheck] = None,
        similar_domains: Optional[List[SimilarDomain]] = None,
) -> PhishingAssessment:
    """
    Estimate how likely ``domain`` is to impersonate an approved operator.

    ``simplified`` only looks at the name itself, ``combined`` also compares
    against the registry and folds in the redirect probe result.
    """
    mode = ScoreMode(mode)
    domain = normalize(domain)
    context = {
        "mode": mode,
        "registry": registry if registry is not None else Registry(),
        "redirect_check": redirect_check,
        "similar_domains": similar_domains,
    }

    total, scores, details = _run_signal_set(domain, signals_for(mode), context)
    level = classify_score(total)

    logger.debug(f"Phishing score for {domain} ({mode.value}): {total} -> {level.value}")

    return PhishingAssessment(
        domain=domain,
        is_likely_phishing=is_likely_phishing(level),
        score=total,
        risk_level=level,
        details=details,
        mode=mode,
        signal_scores=scores,
        similar_domains=list(similar_domains or []),
        redirect_check=redirect_check,
    )
