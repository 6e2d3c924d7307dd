from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RelatedSite:
    domain: str
    brand: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class MatchVerdict:
    """
    Outcome of the matching cascade. Only ``is_approved`` is meaningful
    when the domain was not found; ``phishing_warning`` is attached by the
    caller afterwards.
    """

    is_approved: bool
    company_name: Optional[str] = None
    tax_id: Optional[str] = None
    domain: Optional[str] = None
    related_sites: List[RelatedSite] = field(default_factory=list)
    matched_by: Optional[str] = None
    phishing_warning: Optional[Any] = None

    @classmethod
    def not_approved(cls) -> "MatchVerdict":
        return cls(is_approved=False)

    def to_dict(self) -> Dict[str, Any]:
        if not self.is_approved:
            data: Dict[str, Any] = {"is_approved": False}
        else:
            data = {
                "is_approved": True,
                "company_name": self.company_name,
                "tax_id": self.tax_id,
                "domain": self.domain,
                "related_sites": [s.to_dict() for s in self.related_sites],
                "matched_by": self.matched_by,
            }
        if self.phishing_warning is not None:
            data["phishing_warning"] = self.phishing_warning.to_dict()
        return data
