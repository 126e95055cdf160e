"""
MPIN安全性チェックモジュール

暗証番号（MPIN）の強度を判定するロジックを提供します。
頻出PIN辞書、構造パターン、個人情報（日付）との一致の3つの観点で
スコアを減点し、STRONG / WEAK に分類します。
"""

import logging
from typing import Any, Mapping, Optional, Union

from mpin_checker.core.common_pins import is_commonly_used
from mpin_checker.core.demographic_matcher import Demographics, check_demographics
from mpin_checker.core.pattern_detector import detect_patterns
from mpin_checker.core.scoring_policy import DEFAULT_POLICY, ScoringPolicy
from mpin_checker.core.validation_result import (
    COMMON_PIN,
    COMMONLY_USED,
    PinStrength,
    ValidationResult,
)

logger = logging.getLogger(__name__)

LOW_SCORE = "LOW_SCORE"

DemographicsInput = Union[Demographics, Mapping[str, Any], None]


def _as_demographics(demographics: DemographicsInput) -> Demographics:
    if isinstance(demographics, Demographics):
        return demographics
    return Demographics.from_dict(demographics)


def validate_mpin(
    pin: str,
    demographics: DemographicsInput = None,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> ValidationResult:
    """
    MPINの強度を判定します。

    Args:
        pin (str): 4桁または6桁の数字文字列。正規化は行わず、そのまま比較する。
        demographics: Demographics または {"dob", "spouseDob", "anniversary"} 形式の辞書
        policy (ScoringPolicy): 減点の重み

    Returns:
        ValidationResult: 判定結果
            - weakness_reasons が1つでもあれば WEAK
            - スコアが閾値未満でも WEAK
            - 構造パターンはスコアを下げるだけで、理由コードには含めない
    """
    weakness_reasons = []
    detected_patterns = []
    score = policy.start_score

    # 1. 頻出PIN辞書
    if is_commonly_used(pin):
        weakness_reasons.append(COMMONLY_USED)
        score -= policy.common_pin_penalty
        detected_patterns.append(COMMON_PIN)

    # 2. 構造パターン (検出数に応じてまとめて減点)
    patterns = detect_patterns(pin)
    if patterns:
        score -= policy.pattern_penalty * len(patterns)
        detected_patterns.extend(patterns)

    # 3. 個人情報（日付）との一致
    issues = check_demographics(pin, _as_demographics(demographics))
    weakness_reasons.extend(issues)
    score -= policy.demographic_penalty * len(issues)

    score = min(policy.MAX_SCORE, max(0, score))

    if not weakness_reasons and score >= policy.strong_threshold:
        strength = PinStrength.STRONG
    else:
        strength = PinStrength.WEAK

    # PIN自体はログに残さない
    logger.debug(
        "MPIN evaluated: length=%d score=%d strength=%s reasons=%s patterns=%s",
        len(pin), score, strength.value, weakness_reasons, detected_patterns,
    )

    return ValidationResult(
        strength=strength,
        security_score=score,
        weakness_reasons=weakness_reasons,
        detected_patterns=detected_patterns,
    )


def is_strong_pin(
    pin: str,
    demographics: DemographicsInput = None,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> tuple[bool, str]:
    """
    MPINが安全かどうかを簡易的に返します。

    Returns:
        tuple[bool, str]: (判定結果, NG理由)
            - 判定結果: STRONG なら True
            - NG理由: 最初の理由コード。スコア不足のみで WEAK の場合は "LOW_SCORE"。
              STRONG の場合は空文字列。
    """
    result = validate_mpin(pin, demographics, policy)
    if result.is_strong:
        return True, ""
    if result.weakness_reasons:
        return False, result.weakness_reasons[0]
    return False, LOW_SCORE


class MPINValidator:
    """validate_mpin に ScoringPolicy を束ねたもの"""

    def __init__(self, policy: Optional[ScoringPolicy] = None):
        self.policy = policy or DEFAULT_POLICY

    def validate(self, pin: str, demographics: DemographicsInput = None) -> ValidationResult:
        return validate_mpin(pin, demographics, self.policy)
