import csv
import io
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional

import requests
from loguru import logger

from betcheck.config import REGISTRY_SOURCE, REQUEST_TIMEOUT, get_section, get_weight
from betcheck.errors import RegistryLoadError
from betcheck.registry.models import OperatorRecord, Registry, is_valid_domain, normalize
from betcheck.types import ConfigCat

MIN_COLUMNS = 6


# ----------------------------------------------------
# CSV parsing
# ----------------------------------------------------

def _clean(field: str) -> str:
    field = field.strip()
    if field.startswith('"'):
        field = field[1:]
    if field.endswith('"'):
        field = field[:-1]
    return field.strip()


def parse_registry_csv(text: str) -> List[OperatorRecord]:
    """
    Parse the regulator's CSV feed.

    Columns: request number, authorization, company name, tax ID, brand, domain.
    The header row is skipped, short rows are dropped and so are rows whose
    domain is empty or a "not registered" placeholder.
    """
    records = []
    rows = csv.reader(io.StringIO(text))

    next(rows, None)  # header

    for row in rows:
        if not any(col.strip() for col in row):
            continue

        columns = [_clean(col) for col in row]
        if len(columns) < MIN_COLUMNS:
            logger.debug(f"Skipping short registry row: {row}")
            continue

        record = OperatorRecord(
            request_number=columns[0],
            authorization=columns[1],
            company_name=columns[2],
            tax_id=columns[3],
            brand=columns[4],
            domain=columns[5],
        )
        if not is_valid_domain(record.domain):
            continue

        records.append(record)

    return records


def _decode(source: str, raw: bytes) -> str:
    # The feed is UTF-8 regardless of what the server advertises
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RegistryLoadError(source, f"feed is not valid UTF-8: {e}") from e


def read_source(source: str) -> str:
    """Read the feed from a local path or an http(s) URL."""
    if source.startswith(("http://", "https://")):
        try:
            resp = requests.get(source, timeout=REQUEST_TIMEOUT)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise RegistryLoadError(source, str(e)) from e
        return _decode(source, resp.content)

    try:
        raw = Path(source).read_bytes()
    except OSError as e:
        raise RegistryLoadError(source, str(e)) from e
    return _decode(source, raw)


def seed_records() -> List[OperatorRecord]:
    return [
        OperatorRecord(**entry)
        for entry in get_section(ConfigCat.REGISTRY).get("seed_entries", []) or []
    ]


def with_seed_entries(records: Iterable[OperatorRecord], seeds: Iterable[OperatorRecord]) -> List[OperatorRecord]:
    """Append seeds whose domain the feed does not list yet."""
    records = list(records)
    known = {r.normalized_domain for r in records}
    for seed in seeds:
        if seed.is_valid and normalize(seed.domain) not in known:
            logger.debug(f"Adding seed registry entry for {seed.domain}")
            records.append(seed)
            known.add(seed.normalized_domain)
    return records


def load_registry(source: Optional[str] = None, include_seeds: bool = True) -> Registry:
    source = source or REGISTRY_SOURCE
    try:
        records = parse_registry_csv(read_source(source))
    except csv.Error as e:
        raise RegistryLoadError(source, f"malformed CSV: {e}") from e
    if include_seeds:
        records = with_seed_entries(records, seed_records())

    logger.info(f"Loaded {len(records)} registry domains from {source}")
    return Registry.from_records(records)


# ----------------------------------------------------
# Caller-owned snapshot cache
# ----------------------------------------------------

class RegistryCache:
    """
    Holds the last registry snapshot and reloads it once ``ttl`` seconds
    have passed since ``last_fetch``. A failed reload keeps serving the
    previous snapshot (or an empty registry on the first load).
    """

    def __init__(
        self,
        loader: Callable[[], Registry] = None,
        ttl: float = None,
        clock: Callable[[], float] = time.time,
    ):
        self.loader = loader or load_registry
        self.ttl = ttl if ttl is not None else get_weight(ConfigCat.REGISTRY, "ttl_seconds", 3600)
        self.clock = clock
        self.last_fetch: Optional[float] = None
        self._registry: Optional[Registry] = None

    @property
    def is_stale(self) -> bool:
        if self._registry is None or self.last_fetch is None:
            return True
        return self.clock() - self.last_fetch >= self.ttl

    def get(self) -> Registry:
        if self.is_stale:
            self.refresh()
        return self._registry

    def refresh(self) -> Registry:
        try:
            self._registry = self.loader()
        except RegistryLoadError as e:
            logger.warning(f"{e}; serving previous registry snapshot")
            if self._registry is None:
                self._registry = Registry()
        self.last_fetch = self.clock()
        return self._registry

    def invalidate(self) -> None:
        self.last_fetch = None
