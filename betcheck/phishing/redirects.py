from urllib.parse import urljoin

import requests
import tldextract
from loguru import logger

from betcheck.cache import DAY_SECONDS, get_cache, set_cache
from betcheck.config import REQUEST_TIMEOUT, get_weight
from betcheck.phishing.models import RedirectCheck
from betcheck.phishing.terms import uses_official_suffix
from betcheck.types import ConfigCat

REDIRECT_STATUSES = {301, 302, 303, 307, 308}

# Bundled public suffix snapshot only
_extract = tldextract.TLDExtract(suffix_list_urls=())


def registered_domain(url: str) -> str:
    ext = _extract(url)
    if not ext.suffix:
        return ext.domain.lower()
    return f"{ext.domain}.{ext.suffix}".lower()


def is_suspicious_redirect(origin: str, target: str) -> bool:
    """Leaving the original registered domain for a non-official one."""
    target_host = _extract(target).fqdn or target
    if uses_official_suffix(target_host):
        return False
    return registered_domain(origin) != registered_domain(target)


def check_redirects(url: str) -> RedirectCheck:
    """
    Probe ``url`` once without following redirects.
    Successful results are cached for ``redirects.cache_days`` days.
    """
    cache_key = f"redirect:{url}"
    cached = get_cache(cache_key)
    if cached:
        logger.debug(f"Using cached redirect data for {url}")
        return RedirectCheck.from_dict(cached)

    try:
        resp = requests.head(url, allow_redirects=False, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.warning(f"Redirect check failed for {url}: {e}")
        return RedirectCheck.failed(str(e))

    location = resp.headers.get("Location", "")
    has_redirect = resp.status_code in REDIRECT_STATUSES and bool(location)
    redirect_url = urljoin(url, location) if has_redirect else url

    result = RedirectCheck(
        has_redirect=has_redirect,
        redirect_url=redirect_url,
        is_suspicious=has_redirect and is_suspicious_redirect(url, redirect_url),
    )

    days = get_weight(ConfigCat.REDIRECTS, "cache_days", 1)
    set_cache(cache_key, result.to_dict(), expire=int(days * DAY_SECONDS))
    return result
