from betcheck.phishing.signals.base import Signal
from betcheck.phishing.terms import contains_bet_terms, uses_official_suffix
from betcheck.types import ScoreMode


class BetTermsSignal(Signal):
    """Betting vocabulary in a domain that is not under .bet.br."""

    name = "lexical_terms"
    order = 1
    default_weights = {ScoreMode.SIMPLIFIED: 70, ScoreMode.COMBINED: 15}

    def run(self, domain, context):
        if contains_bet_terms(domain) and not uses_official_suffix(domain):
            return self.hit(
                self.weight(context["mode"]),
                "Domain contains betting-related terms but does not use the official .bet.br domain",
            )
        return self.miss()
