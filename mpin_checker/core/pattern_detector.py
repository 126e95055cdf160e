"""
構造パターン検出モジュール

PINの並びそのものから推測されやすさを判定します。
（同一数字の繰り返し、+1/-1 の連番、テンキー上の幾何学パターン）
"""

from typing import List

REPEATED_DIGITS = "Repeated digits"
SEQUENTIAL_PATTERN = "Sequential pattern"
KEYBOARD_PATTERN = "Keyboard pattern"

DIGITS = "0123456789"

# テンキーの縦列・対角線
KEYBOARD_PATTERNS_4_DIGIT = frozenset(["2580", "1470", "3690", "1590", "7410", "9630"])
KEYBOARD_PATTERNS_6_DIGIT = frozenset(["147258", "159357", "258147", "357159"])


def has_repeated_digits(pin: str) -> bool:
    # 全桁が同じ数字 (例: 0000, 111111)
    if len(set(pin)) == 1:
        return True

    # ペアの繰り返し (例: 1122, 3344) ※2つのペアが同じである必要はない
    if len(pin) == 4:
        return pin[0] == pin[1] and pin[2] == pin[3]

    if len(pin) == 6:
        # aabbcc 形式 (例: 112233) または abcabc 形式 (例: 123123)
        return (
            (pin[0] == pin[1] and pin[2] == pin[3] and pin[4] == pin[5])
            or pin[:3] == pin[3:]
        )

    return False


def has_sequential_pattern(pin: str) -> bool:
    """
    文字列全体が +1 または -1 の連番になっているかを判定します。
    9→0 の折り返しは連番とみなしません。
    隣接ペアが存在しない長さ0・1の文字列は条件を満たすものとして扱います。
    """
    # 数字以外を含む場合は連番にならない
    if not all(c in DIGITS for c in pin):
        return False

    digits = [int(c) for c in pin]
    is_ascending = True
    is_descending = True

    for i in range(1, len(digits)):
        if digits[i] != digits[i - 1] + 1:
            is_ascending = False
        if digits[i] != digits[i - 1] - 1:
            is_descending = False

    return is_ascending or is_descending


def has_keyboard_pattern(pin: str) -> bool:
    if len(pin) == 4:
        return pin in KEYBOARD_PATTERNS_4_DIGIT
    if len(pin) == 6:
        return pin in KEYBOARD_PATTERNS_6_DIGIT
    return False


def detect_patterns(pin: str) -> List[str]:
    """
    検出された構造パターンのラベルを固定順（繰り返し→連番→キーボード）で返します。

    Args:
        pin (str): 判定対象のPIN

    Returns:
        List[str]: パターンラベルのリスト。該当なしなら空リスト。
    """
    patterns = []

    if has_repeated_digits(pin):
        patterns.append(REPEATED_DIGITS)

    if has_sequential_pattern(pin):
        patterns.append(SEQUENTIAL_PATTERN)

    if has_keyboard_pattern(pin):
        patterns.append(KEYBOARD_PATTERN)

    return patterns
