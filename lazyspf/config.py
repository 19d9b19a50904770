"""Configuration classes for lazyspf searches."""

from dataclasses import dataclass

from lazyspf.algorithms.base import Weight, WeightPolicy


@dataclass
class SearchConfig:
    """Configuration for a shortest-path search."""

    # Which edge weights the engine accepts
    weight_policy: WeightPolicy = WeightPolicy.NON_NEGATIVE

    # Verify heap order and position map after every queue operation
    debug_checks: bool = False

    # Emit a DEBUG progress line every N extractions (0 disables)
    log_progress_every: int = 0

    def __post_init__(self) -> None:
        if self.log_progress_every < 0:
            raise ValueError("log_progress_every must be non-negative")

    def is_valid_weight(self, weight: Weight) -> bool:
        """Return True if ``weight`` is acceptable under ``weight_policy``.

        NaN is never acceptable: float NaN compares False, and ordering a
        ``Decimal`` NaN raises ``InvalidOperation`` (an ``ArithmeticError``).
        """
        try:
            if self.weight_policy == WeightPolicy.STRICTLY_POSITIVE:
                return weight > 0
            return weight >= 0
        except ArithmeticError:
            return False


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
