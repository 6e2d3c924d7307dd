from typing import List

from betcheck.phishing.models import SimilarDomain
from betcheck.registry.models import Registry, base_domain, normalize
from betcheck.similarity import edit_distance

MAX_BASE_DISTANCE = 3


def find_similar_domains(domain: str, registry: Registry, threshold: int = MAX_BASE_DISTANCE) -> List[SimilarDomain]:
    """
    Registry domains whose base domain is within ``threshold`` edits of the
    queried base domain, closest first (ties keep registry order).
    """
    base = base_domain(normalize(domain))
    similar = []

    for approved in registry.domains():
        distance = edit_distance(base, base_domain(approved))
        if distance <= threshold:
            similar.append(SimilarDomain(domain=approved, distance=distance))

    similar.sort(key=lambda s: s.distance)
    return similar
