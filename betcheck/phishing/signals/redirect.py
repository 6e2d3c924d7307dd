from betcheck.phishing.signals.base import Signal
from betcheck.types import ScoreMode


class RedirectSignal(Signal):
    """Scores the redirect probe result; never performs the probe itself."""

    name = "redirect"
    order = 4
    modes = [ScoreMode.COMBINED]

    def run(self, domain, context):
        check = context.get("redirect_check")
        if check is None:
            return self.miss()

        mode = context["mode"]

        if check.error:
            return self.hit(
                self.weight(mode, "redirect_unavailable", 5),
                "Could not verify redirects",
            )
        if check.has_redirect and check.is_suspicious:
            return self.hit(
                self.weight(mode, "redirect_suspicious", 15),
                "Suspicious redirects detected",
            )
        return self.miss()
