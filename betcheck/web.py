from fastapi import Depends, FastAPI, HTTPException, Query
from loguru import logger

from betcheck.analyzers.domain_analyzer import (
    advanced_phishing_check,
    check_bet_site,
    quick_phishing_check,
)
from betcheck.matching.related import find_related_sites
from betcheck.registry.loader import RegistryCache
from betcheck.registry.models import Registry
from betcheck.types import ScoreMode

app = FastAPI(
    title="BetCheck API",
    version="1.0.0",
    description="Approved .bet.br operator check and phishing scoring",
)

registry_cache = RegistryCache()


def get_registry() -> Registry:
    return registry_cache.get()


@app.get("/api/v1/check/{domain}")
def check_route(domain: str, registry: Registry = Depends(get_registry)):
    try:
        return check_bet_site(domain, registry).to_dict()
    except Exception as e:  # noqa: BLE001
        logger.exception(f"Check failed for {domain}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/v1/phishing/{domain}")
def phishing_route(
        domain: str,
        mode: ScoreMode = Query(ScoreMode.COMBINED, description="Scorer mode"),
        probe: bool = Query(False, description="Probe the site for redirects"),
        registry: Registry = Depends(get_registry),
):
    try:
        if mode is ScoreMode.SIMPLIFIED:
            return quick_phishing_check(domain).to_dict()
        return advanced_phishing_check(domain, registry, probe_redirects=probe).to_dict()
    except Exception as e:  # noqa: BLE001
        logger.exception(f"Phishing analysis failed for {domain}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/v1/related")
def related_route(
        tax_id: str = Query(..., description="Operator tax ID (CNPJ)"),
        exclude: str = Query("", description="Domain to leave out"),
        registry: Registry = Depends(get_registry),
):
    return [site.to_dict() for site in find_related_sites(tax_id, registry, exclude)]
