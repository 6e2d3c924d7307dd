from typing import Optional, Sequence, Tuple

from loguru import logger

from betcheck.matching.related import find_related_sites
from betcheck.matching.stages import STAGES, Stage
from betcheck.matching.verdict import MatchVerdict
from betcheck.registry.models import OperatorRecord, Registry, normalize


def find_match(
        query: str,
        registry: Registry,
        stages: Sequence[Stage] = STAGES,
) -> Optional[Tuple[Stage, OperatorRecord]]:
    """
    Run the stages in order; within a stage the first valid record (in
    registry order) that satisfies it wins. Returns None when nothing hits.
    """
    query = normalize(query)
    candidates = [(r, r.normalized_domain) for r in registry if r.is_valid]

    for stage in stages:
        for record, candidate in candidates:
            if stage.matches(query, candidate):
                logger.debug(f"{query} matched {candidate} at stage '{stage.name}'")
                return stage, record

    return None


def check_domain(query: str, registry: Registry) -> MatchVerdict:
    query = normalize(query)
    logger.debug(f"Checking {query} against {len(registry)} registry records")

    hit = find_match(query, registry)
    if hit is None:
        logger.debug(f"No registry match for {query}")
        return MatchVerdict.not_approved()

    stage, record = hit
    return MatchVerdict(
        is_approved=True,
        company_name=record.company_name,
        tax_id=record.tax_id,
        domain=record.normalized_domain,
        related_sites=find_related_sites(record.tax_id, registry, exclude_domain=query),
        matched_by=stage.name,
    )
