from typing import List

from loguru import logger

from betcheck.matching.verdict import RelatedSite
from betcheck.registry.models import Registry, normalize
from betcheck.registry.tax_id import clean_tax_id, is_usable_tax_id


def find_related_sites(tax_id: str, registry: Registry, exclude_domain: str = "") -> List[RelatedSite]:
    """
    Every other registry domain owned by the same tax ID, in registry order.
    ``exclude_domain`` (usually the queried domain) is left out.
    """
    if not is_usable_tax_id(tax_id):
        logger.warning(f"Refusing to resolve related sites for tax ID {tax_id!r}")
        return []

    wanted = clean_tax_id(tax_id)
    excluded = normalize(exclude_domain)
    related = []

    for record in registry:
        if not record.is_valid or not is_usable_tax_id(record.tax_id):
            continue
        if clean_tax_id(record.tax_id) != wanted:
            continue
        if record.normalized_domain == excluded:
            continue

        related.append(RelatedSite(
            domain=record.normalized_domain,
            brand=record.brand or record.company_name,
        ))

    logger.debug(f"Found {len(related)} related sites for tax ID {wanted}")
    return related
