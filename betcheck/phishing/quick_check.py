from typing import List

from betcheck.phishing.models import PhishingWarning, SimilarSite
from betcheck.phishing.terms import contains_bet_terms, uses_official_suffix
from betcheck.registry.models import Registry, normalize
from betcheck.similarity import is_similar_text
from betcheck.types import WarningReason

NOT_OFFICIAL_MESSAGE = (
    "This site contains betting-related terms but does not use the official .bet.br domain"
)


def find_similar_sites(domain: str, registry: Registry) -> List[SimilarSite]:
    """Registry operators whose first domain label resembles the query's."""
    name = normalize(domain).split(".")[0]
    similar = []

    for record in registry.valid_records():
        approved_name = record.normalized_domain.split(".")[0]
        if is_similar_text(name, approved_name):
            similar.append(SimilarSite(
                domain=record.domain,
                company_name=record.company_name,
                tax_id=record.tax_id,
            ))

    return similar


def check_phishing(domain: str, registry: Registry) -> PhishingWarning:
    domain = normalize(domain)

    if uses_official_suffix(domain):
        return PhishingWarning(is_phishing=False)

    if not contains_bet_terms(domain):
        return PhishingWarning(is_phishing=False)

    similar = find_similar_sites(domain, registry)
    if similar:
        return PhishingWarning(
            is_phishing=True,
            reason=WarningReason.DOMAIN_SIMILARITY,
            similar_sites=similar,
        )

    return PhishingWarning(
        is_phishing=True,
        reason=WarningReason.NOT_OFFICIAL_DOMAIN,
        message=NOT_OFFICIAL_MESSAGE,
    )
