"""Unit tests for phishing vocabulary and patterns."""

import pytest

from betcheck.phishing.terms import (
    contains_bet_terms,
    find_suspicious_terms,
    has_phishing_pattern,
    uses_official_suffix,
)


class TestBetTerms:

    @pytest.mark.parametrize("domain", [
        "superapostas.com",
        "CASSINO-online.net",
        "jogosdodia.com",
        "esportesdasorte.io",
        "mygaming.site",
    ])
    def test_detected(self, domain):
        assert contains_bet_terms(domain)

    def test_clean_domain(self):
        assert contains_bet_terms("example.com") is False

    def test_official_suffix(self):
        assert uses_official_suffix("examplebet.bet.br")
        assert not uses_official_suffix("examplebet.bet.br.com")


class TestPhishingPattern:

    @pytest.mark.parametrize("domain", [
        "site-seguro.com",
        "secure.example.com",
        "conta.example.com",
        "promo2024bet.com",
        "bet--bonus.com",
        "x1y.com",
    ])
    def test_detected(self, domain):
        assert has_phishing_pattern(domain)

    @pytest.mark.parametrize("domain", ["example.com", "bet365.com", "a-b.com"])
    def test_clean(self, domain):
        assert has_phishing_pattern(domain) is False


def test_find_suspicious_terms_in_list_order():
    url = "https://login-bonus.example.com/verify"
    assert find_suspicious_terms(url) == ["login", "verify", "bonus"]


def test_find_suspicious_terms_none():
    assert find_suspicious_terms("https://example.com/") == []
