from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

# Weakness reason codes (stable strings, part of the external contract)
COMMONLY_USED = "COMMONLY_USED"
DEMOGRAPHIC_DOB_SELF = "DEMOGRAPHIC_DOB_SELF"
DEMOGRAPHIC_DOB_SPOUSE = "DEMOGRAPHIC_DOB_SPOUSE"
DEMOGRAPHIC_ANNIVERSARY = "DEMOGRAPHIC_ANNIVERSARY"

COMMON_PIN = "Common PIN"


class PinStrength(Enum):
    """MPINの強度区分"""
    STRONG = "STRONG"
    WEAK = "WEAK"


@dataclass
class ValidationResult:
    """
    Outcome of a single MPIN evaluation.

    weakness_reasons drive the classification; detected_patterns are
    informational and only lower the score.
    """
    strength: PinStrength
    security_score: int
    weakness_reasons: List[str] = field(default_factory=list)
    detected_patterns: List[str] = field(default_factory=list)

    @property
    def is_strong(self) -> bool:
        return self.strength is PinStrength.STRONG

    def to_dict(self) -> Dict[str, Any]:
        """External representation with camelCase keys."""
        return {
            "strength": self.strength.value,
            "weaknessReasons": list(self.weakness_reasons),
            "securityScore": self.security_score,
            "detectedPatterns": list(self.detected_patterns),
        }


def score_band(score: int) -> str:
    """スコアバーの色分け用の区分 (high / medium / low)"""
    if score >= 70:
        return "high"
    if score >= 40:
        return "medium"
    return "low"
