import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringPolicy:
    """
    Score weights used by the MPIN validator.
    The defaults are the reference values and are what DEFAULT_POLICY uses.
    """
    start_score: int = 100
    common_pin_penalty: int = 40
    pattern_penalty: int = 15
    demographic_penalty: int = 25
    strong_threshold: int = 60

    MAX_SCORE = 100

    @classmethod
    def from_config(cls, section: Optional[Dict[str, Any]]) -> "ScoringPolicy":
        """
        Build a policy from the "scoring" section of the config.
        Unknown keys and values that are not non-negative integers are ignored,
        as is a start_score above MAX_SCORE.
        """
        policy = cls()
        if not section:
            return policy
        if not isinstance(section, dict):
            logger.warning("Ignoring scoring config: expected a mapping, got %s", type(section).__name__)
            return policy

        known = {f.name for f in fields(cls)}
        overrides = {}
        for key, value in section.items():
            if key not in known:
                logger.warning("Ignoring unknown scoring key: %s", key)
                continue
            # bool is a subclass of int
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                logger.warning("Ignoring invalid value for scoring.%s: %r", key, value)
                continue
            if key == "start_score" and value > cls.MAX_SCORE:
                logger.warning("Ignoring scoring.start_score above %d: %r", cls.MAX_SCORE, value)
                continue
            overrides[key] = value

        return replace(policy, **overrides)


DEFAULT_POLICY = ScoringPolicy()
