# studyhub/domain/models/password_strength.py

from dataclasses import dataclass, field
from typing import List

VERY_WEAK = "very-weak"
WEAK = "weak"
FAIR = "fair"
GOOD = "good"
STRONG = "strong"


@dataclass(frozen=True)
class PasswordStrength:
    """Result of scoring a candidate password (0-9 points)."""

    score: int
    strength: str
    feedback: List[str] = field(default_factory=list)

    @property
    def is_acceptable(self) -> bool:
        """Registration refuses very-weak and weak passwords."""
        return self.strength not in (VERY_WEAK, WEAK)
