from betcheck.phishing.signals.base import Signal
from betcheck.phishing.terms import has_phishing_pattern
from betcheck.types import ScoreMode


class SuspiciousPatternSignal(Signal):
    name = "suspicious_pattern"
    order = 2
    default_weights = {ScoreMode.SIMPLIFIED: 30, ScoreMode.COMBINED: 30}

    def run(self, domain, context):
        if has_phishing_pattern(domain):
            return self.hit(self.weight(context["mode"]), "Domain contains common phishing patterns")
        return self.miss()
