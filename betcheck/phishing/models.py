from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from betcheck.types import RiskLevel, ScoreMode, WarningReason


@dataclass(frozen=True)
class RedirectCheck:
    """Result handed over by the redirect probe (or supplied by the caller)."""

    has_redirect: bool = False
    redirect_url: str = ""
    is_suspicious: bool = False
    error: bool = False
    message: str = ""

    @classmethod
    def failed(cls, message: str) -> "RedirectCheck":
        return cls(error=True, message=message)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RedirectCheck":
        if data.get("error"):
            return cls.failed(str(data.get("message", "")))
        return cls(
            has_redirect=bool(data.get("has_redirect", False)),
            redirect_url=str(data.get("redirect_url", "")),
            is_suspicious=bool(data.get("is_suspicious", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        if self.error:
            return {"error": True, "message": self.message}
        return {
            "has_redirect": self.has_redirect,
            "redirect_url": self.redirect_url,
            "is_suspicious": self.is_suspicious,
        }


@dataclass(frozen=True)
class SimilarDomain:
    domain: str
    distance: int


@dataclass(frozen=True)
class SimilarSite:
    domain: str
    company_name: str
    tax_id: str


@dataclass(frozen=True)
class SignalResult:
    score: float
    detail: Optional[str] = None

    @property
    def fired(self) -> bool:
        return self.detail is not None


@dataclass
class PhishingWarning:
    is_phishing: bool
    reason: Optional[WarningReason] = None
    similar_sites: List[SimilarSite] = field(default_factory=list)
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"is_phishing": self.is_phishing}
        if self.reason is not None:
            data["reason"] = self.reason.value
        if self.similar_sites:
            data["similar_sites"] = [asdict(s) for s in self.similar_sites]
        if self.message:
            data["message"] = self.message
        return data


@dataclass
class PhishingAssessment:
    domain: str
    is_likely_phishing: bool
    score: float
    risk_level: RiskLevel
    details: List[str] = field(default_factory=list)
    mode: ScoreMode = ScoreMode.COMBINED
    signal_scores: Dict[str, float] = field(default_factory=dict)
    similar_domains: List[SimilarDomain] = field(default_factory=list)
    redirect_check: Optional[RedirectCheck] = None
    suspicious_terms: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "domain": self.domain,
            "is_likely_phishing": self.is_likely_phishing,
            "score": self.score,
            "risk_level": self.risk_level.value,
            "details": list(self.details),
            "mode": self.mode.value,
            "signal_scores": dict(self.signal_scores),
        }
        if self.similar_domains:
            data["similar_domains"] = [asdict(s) for s in self.similar_domains]
        if self.redirect_check is not None:
            data["redirect_check"] = self.redirect_check.to_dict()
        if self.suspicious_terms:
            data["suspicious_terms"] = list(self.suspicious_terms)
        return data
