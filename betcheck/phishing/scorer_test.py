"""Unit tests for the phishing scorer."""

import pytest

from betcheck.phishing.catalog import SIGNALS, signals_for
from betcheck.phishing.models import RedirectCheck
from betcheck.phishing.risk import classify_score
from betcheck.phishing.scorer import score_domain
from betcheck.phishing.similar import find_similar_domains
from betcheck.registry.models import Registry
from betcheck.types import RiskLevel, ScoreMode


@pytest.fixture
def registry(record):
    return Registry.from_records([record("examplebet.bet.br", "11.111.111/0001-11", "Example Co")])


class TestSignalCatalog:

    def test_simplified_signals(self):
        assert [s.name for s in signals_for(ScoreMode.SIMPLIFIED)] == [
            "lexical_terms", "suspicious_pattern",
        ]

    def test_combined_signals(self):
        assert [s.name for s in signals_for(ScoreMode.COMBINED)] == [
            "lexical_terms", "suspicious_pattern", "registry_similarity", "redirect",
        ]


class TestSimplifiedMode:

    def test_betting_lookalike_with_pattern(self):
        result = score_domain("examplebett-secure123.com", mode=ScoreMode.SIMPLIFIED)
        assert result.score == 100
        assert result.risk_level is RiskLevel.HIGH
        assert result.is_likely_phishing is True
        assert result.details == [
            "Domain contains betting-related terms but does not use the official .bet.br domain",
            "Domain contains common phishing patterns",
        ]

    def test_terms_only(self):
        result = score_domain("www.superapostas.com", mode=ScoreMode.SIMPLIFIED)
        assert result.domain == "superapostas.com"
        assert result.score == 70
        assert result.risk_level is RiskLevel.HIGH

    def test_pattern_only(self):
        result = score_domain("login-example.com", mode="simplified")
        assert result.score == 30
        assert result.risk_level is RiskLevel.LOW
        assert result.is_likely_phishing is False

    def test_official_domain_clean(self):
        result = score_domain("examplebet.bet.br", mode=ScoreMode.SIMPLIFIED)
        assert result.score == 0
        assert result.details == []


class TestCombinedMode:

    def test_terms_and_pattern_without_registry(self):
        result = score_domain("examplebett-secure123.com", Registry(), ScoreMode.COMBINED)
        assert result.score == 45
        assert result.risk_level is RiskLevel.MEDIUM
        assert result.signal_scores == {
            "lexical_terms": 15,
            "suspicious_pattern": 30,
            "registry_similarity": 0,
            "redirect": 0,
        }

    def test_distance_one(self, registry):
        result = score_domain("examplebet.bet.bz", registry)
        assert result.signal_scores["registry_similarity"] == 40
        assert result.score == 55
        assert result.details[-1] == "Domain is extremely similar to an approved site"

    def test_distance_two(self, registry):
        result = score_domain("x.bat.bz", registry)
        assert result.signal_scores["registry_similarity"] == 30
        assert result.score == 30
        assert result.details == ["Domain is very similar to an approved site"]

    def test_distance_three(self, registry):
        result = score_domain("x.com.br", registry)
        assert result.score == 20
        assert result.risk_level is RiskLevel.LOW

    def test_closest_entry_decides(self, record):
        registry = Registry.from_records([
            record("far.bat.bz"),
            record("near.bet.br"),
        ])
        similar = find_similar_domains("x.bet.bx", registry)
        assert [(s.domain, s.distance) for s in similar] == [("near.bet.br", 1), ("far.bat.bz", 2)]
        assert score_domain("x.bet.bx", registry).signal_scores["registry_similarity"] == 40

    def test_redirect_unavailable(self):
        result = score_domain("example.org", redirect_check=RedirectCheck.failed("timeout"))
        assert result.score == 5
        assert result.details == ["Could not verify redirects"]

    def test_suspicious_redirect(self):
        check = RedirectCheck(has_redirect=True, redirect_url="https://evil.com/", is_suspicious=True)
        assert score_domain("example.org", redirect_check=check).score == 15

    def test_not_probed_adds_nothing(self):
        result = score_domain("example.org", redirect_check=None)
        assert result.signal_scores["redirect"] == 0
        assert result.details == []

    def test_harmless_redirect(self):
        check = RedirectCheck(has_redirect=True, redirect_url="https://example.org/home")
        assert score_domain("example.org", redirect_check=check).score == 0

    def test_all_signals_reach_maximum(self, registry):
        check = RedirectCheck(has_redirect=True, redirect_url="https://evil.com/", is_suspicious=True)
        result = score_domain("bet-secure.bet.bz", registry, redirect_check=check)
        assert result.score == 100
        assert result.is_likely_phishing is True
        assert len(result.details) == 4

    def test_crashing_signal_contributes_nothing(self, monkeypatch):
        def boom(domain, context):
            raise RuntimeError("broken")

        monkeypatch.setattr(SIGNALS["suspicious_pattern"], "run", boom)

        result = score_domain("examplebett-secure123.com", Registry())
        assert result.score == 15
        assert result.signal_scores["suspicious_pattern"] == 0


class TestClassifyScore:

    @pytest.mark.parametrize("score, level", [
        (0, RiskLevel.LOW),
        (39, RiskLevel.LOW),
        (40, RiskLevel.MEDIUM),
        (69, RiskLevel.MEDIUM),
        (70, RiskLevel.HIGH),
        (115, RiskLevel.HIGH),
    ])
    def test_tiers(self, score, level):
        assert classify_score(score) is level


def test_to_dict():
    data = score_domain("examplebett-secure123.com", mode=ScoreMode.SIMPLIFIED).to_dict()
    assert data["risk_level"] == "high"
    assert data["mode"] == "simplified"
    assert data["is_likely_phishing"] is True
    assert "redirect_check" not in data
