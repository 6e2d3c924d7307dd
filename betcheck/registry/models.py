from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple


# Placeholders the regulator publishes instead of a domain
UNREGISTERED_SENTINELS = frozenset({
    "não registrado",
    "à definir",
    "a definir",
})

OFFICIAL_SUFFIX = ".bet.br"


def normalize(domain: str) -> str:
    """Lower-case and drop a single leading ``www.``."""
    domain = (domain or "").strip().lower()
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


def is_valid_domain(domain: str) -> bool:
    if not domain:
        return False
    return domain not in UNREGISTERED_SENTINELS


def base_domain(domain: str) -> str:
    """Last two dot-separated labels: ``sub.example.bet.br`` -> ``bet.br``."""
    parts = domain.split(".")
    if len(parts) < 2:
        return domain
    return ".".join(parts[-2:])


@dataclass(frozen=True)
class OperatorRecord:
    """One approved operator row of the registry feed."""

    request_number: str = ""
    authorization: str = ""
    company_name: str = ""
    tax_id: str = ""
    brand: str = ""
    domain: str = ""

    @property
    def normalized_domain(self) -> str:
        return normalize(self.domain)

    @property
    def is_valid(self) -> bool:
        return is_valid_domain(self.domain)


@dataclass(frozen=True)
class Registry:
    """Ordered, immutable snapshot of operator records."""

    records: Tuple[OperatorRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_records(cls, records: Iterable[OperatorRecord]) -> "Registry":
        return cls(tuple(records))

    def __iter__(self) -> Iterator[OperatorRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def valid_records(self) -> List[OperatorRecord]:
        return [r for r in self.records if r.is_valid]

    def domains(self) -> List[str]:
        """Normalized domains of every valid record, in registry order."""
        return [r.normalized_domain for r in self.records if r.is_valid]
