import re
from typing import List

from betcheck.registry.models import OFFICIAL_SUFFIX

# Stems found in betting operator names
BET_TERMS = [
    "bet", "bets", "aposta", "apostas", "casino", "cassino", "jogo", "jogos",
    "esporte", "esportes", "sport", "sports", "gambling", "gaming",
]

SUSPICIOUS_PATTERN = re.compile(
    r"-?seguro-?|-?secure-?|-?oficial-?|-?original-?|-?login-?|-?conta-?|-?account-?"
    r"|\d{4,}"          # long digit runs
    r"|-{2,}"           # repeated hyphens
    r"|[a-z]\d+[a-z]",  # digits wedged between letters
    re.IGNORECASE,
)

# Lure words commonly seen in phishing URLs
SUSPICIOUS_URL_TERMS = [
    "login", "account", "secure", "update", "verify",
    "confirmation", "confirm", "banking", "security",
    "authenticate", "wallet", "bonus", "free", "prize",
    "win", "lucky", "official", "promo", "promocao",
    "promocional", "oferta", "especial", "limitado",
]


def contains_bet_terms(domain: str) -> bool:
    domain = domain.lower()
    return any(term in domain for term in BET_TERMS)


def uses_official_suffix(domain: str) -> bool:
    return domain.lower().endswith(OFFICIAL_SUFFIX)


def has_phishing_pattern(domain: str) -> bool:
    return SUSPICIOUS_PATTERN.search(domain) is not None


def find_suspicious_terms(url: str) -> List[str]:
    url = url.lower()
    return [term for term in SUSPICIOUS_URL_TERMS if term in url]
