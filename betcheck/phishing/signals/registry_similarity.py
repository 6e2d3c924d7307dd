from betcheck.phishing.signals.base import Signal
from betcheck.phishing.similar import find_similar_domains
from betcheck.types import ScoreMode


class RegistrySimilaritySignal(Signal):
    """Base domain a few edits away from an approved operator's."""

    name = "registry_similarity"
    order = 3
    modes = [ScoreMode.COMBINED]

    def run(self, domain, context):
        similar = context.get("similar_domains")
        if similar is None:
            similar = find_similar_domains(domain, context["registry"])
        if not similar:
            return self.miss()

        # Only the closest entry matters
        distance = similar[0].distance
        mode = context["mode"]

        if distance == 1:
            return self.hit(
                self.weight(mode, "registry_similarity_1", 40),
                "Domain is extremely similar to an approved site",
            )
        if distance <= 2:
            return self.hit(
                self.weight(mode, "registry_similarity_2", 30),
                "Domain is very similar to an approved site",
            )
        return self.hit(
            self.weight(mode, "registry_similarity_3", 20),
            "Domain is similar to an approved site",
        )
