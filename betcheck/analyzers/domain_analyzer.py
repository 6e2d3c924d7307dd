from typing import Optional
from urllib.parse import urlsplit

from betcheck.matching.cascade import check_domain
from betcheck.matching.verdict import MatchVerdict
from betcheck.phishing.models import PhishingAssessment, RedirectCheck
from betcheck.phishing.quick_check import check_phishing
from betcheck.phishing.redirects import check_redirects
from betcheck.phishing.scorer import score_domain
from betcheck.phishing.similar import find_similar_domains
from betcheck.phishing.terms import find_suspicious_terms
from betcheck.registry.models import Registry, normalize
from betcheck.types import ScoreMode


def extract_hostname(target: str) -> str:
    """Accept either a bare hostname or a full URL."""
    target = target.strip()
    if "://" not in target:
        target = "//" + target
    return normalize(urlsplit(target).hostname or "")


def check_bet_site(target: str, registry: Registry) -> MatchVerdict:
    domain = extract_hostname(target)
    verdict = check_domain(domain, registry)

    if not verdict.is_approved:
        warning = check_phishing(domain, registry)
        if warning.is_phishing:
            verdict.phishing_warning = warning

    return verdict


def advanced_phishing_check(
        target: str,
        registry: Registry,
        probe_redirects: bool = True,
        redirect_check: Optional[RedirectCheck] = None,
) -> PhishingAssessment:
    """
    Full analysis: registry similarity, name heuristics and the redirect
    probe. A ``redirect_check`` supplied by the caller is used as-is.
    """
    domain = extract_hostname(target)

    if redirect_check is None and probe_redirects:
        redirect_check = check_redirects(f"https://{domain}")

    assessment = score_domain(
        domain,
        registry,
        mode=ScoreMode.COMBINED,
        redirect_check=redirect_check,
        similar_domains=find_similar_domains(domain, registry),
    )
    assessment.suspicious_terms = find_suspicious_terms(target)
    return assessment


def quick_phishing_check(target: str) -> PhishingAssessment:
    return score_domain(extract_hostname(target), mode=ScoreMode.SIMPLIFIED)
