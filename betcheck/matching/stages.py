from betcheck.registry.models import base_domain
from betcheck.similarity import similarity

# Guards kept at their historical values for behavioural compatibility
MIN_CONTAINMENT_LENGTH = 3
TYPO_SIMILARITY_THRESHOLD = 0.85
MIN_SUFFIX_LENGTH = 7
MIN_BASE_DOMAIN_LENGTH = 5


class Stage:
    """
    One step of the matching cascade.

    Attributes:
        name:  identifier reported as ``matched_by`` on a hit
        order: position in the cascade, lower runs first
    """

    name = "base"
    order = 0

    def matches(self, query: str, candidate: str) -> bool:
        """
        MUST be overridden by each stage.

        Both arguments are already normalized.
        """
        raise NotImplementedError()


class ExactStage(Stage):
    name = "exact"
    order = 1

    def matches(self, query: str, candidate: str) -> bool:
        return query == candidate


class SubdomainStage(Stage):
    name = "subdomain"
    order = 2

    def matches(self, query: str, candidate: str) -> bool:
        return query.endswith("." + candidate) or candidate.endswith("." + query)


class LooseStage(Stage):
    """Substring containment between reasonably long names, or a near typo."""

    name = "loose"
    order = 3

    def matches(self, query: str, candidate: str) -> bool:
        long_enough = len(query) > MIN_CONTAINMENT_LENGTH and len(candidate) > MIN_CONTAINMENT_LENGTH
        if long_enough and (candidate in query or query in candidate):
            return True
        return similarity(query, candidate) > TYPO_SIMILARITY_THRESHOLD


class SuffixStage(Stage):
    name = "suffix"
    order = 4

    def matches(self, query: str, candidate: str) -> bool:
        return len(candidate) > MIN_SUFFIX_LENGTH and query.endswith(candidate)


class BaseDomainStage(Stage):
    name = "base_domain"
    order = 5

    def matches(self, query: str, candidate: str) -> bool:
        base = base_domain(query)
        return base == base_domain(candidate) and len(base) > MIN_BASE_DOMAIN_LENGTH


STAGES = sorted(
    [ExactStage(), SubdomainStage(), LooseStage(), SuffixStage(), BaseDomainStage()],
    key=lambda stage: stage.order,
)
