"""
よく使われるPINの辞書モジュール

業界で多用されている推測されやすいPIN（連番、同一数字、記念的な年、
テンキーの対角線など）を桁数ごとに固定集合として保持します。
"""

# 4桁の頻出PIN
COMMON_PINS_4_DIGIT = frozenset([
    "1234", "1111", "0000", "1212", "7777",
    "1004", "2000", "4444", "2222", "6969",
    "9999", "3333", "5555", "6666", "8888",
    "4321", "2580", "1122", "1313", "8520",
    "2001", "1010", "1001", "0123", "9876",
    "1357", "2468", "1478", "1593", "2846",
])

# 6桁の頻出PIN
COMMON_PINS_6_DIGIT = frozenset([
    "123456", "111111", "000000", "121212", "777777",
    "100400", "200000", "444444", "222222", "696969",
    "999999", "333333", "555555", "666666", "888888",
    "432100", "258000", "112200", "131300", "852000",
    "200100", "101000", "100100", "012345", "987654",
    "135790", "246810", "147852", "159357", "284691",
    "123123", "456456", "789789", "147147", "258258",
    "369369", "654321", "112233", "445566",
])


def is_commonly_used(pin: str) -> bool:
    """
    PINが頻出PIN辞書に含まれるかを判定します。

    4桁・6桁以外のPINは辞書の対象外のため常に False を返します。
    """
    if len(pin) == 4:
        return pin in COMMON_PINS_4_DIGIT
    if len(pin) == 6:
        return pin in COMMON_PINS_6_DIGIT
    return False
