"""
個人情報（日付）照合モジュール

本人・配偶者の生年月日、結婚記念日から導出される数字列と
PINが一致するかを判定します。

日付は "YYYY-MM-DD" 形式の文字列を固定位置で切り出すだけで、
暦としての妥当性は確認しません (例: "1990-02-30" もそのまま処理する)。
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from mpin_checker.core.validation_result import (
    DEMOGRAPHIC_ANNIVERSARY,
    DEMOGRAPHIC_DOB_SELF,
    DEMOGRAPHIC_DOB_SPOUSE,
)


@dataclass(frozen=True)
class Demographics:
    """
    PIN保持者に紐づく日付情報。
    未指定 (None) と空文字列はどちらも「入力なし」として扱う。
    """
    dob: Optional[str] = None
    spouse_dob: Optional[str] = None
    anniversary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Demographics":
        """
        辞書から生成します。キーは camelCase ("spouseDob") と
        snake_case ("spouse_dob") のどちらも受け付けます。
        """
        if not data:
            return cls()
        return cls(
            dob=data.get("dob"),
            spouse_dob=data.get("spouseDob") or data.get("spouse_dob"),
            anniversary=data.get("anniversary"),
        )


def date_variations(date: str) -> List[str]:
    """
    日付から候補となる数字列を10通り生成します。

    Returns:
        List[str]: DDMM, MMDD, YYMM, YYDD, MMYY, DDYY,
                   DDMMYY, MMDDYY, YYMMDD, YYDDMM の順
    """
    year, month, day = date[0:4], date[5:7], date[8:10]
    yy = year[-2:]
    return [
        day + month,
        month + day,
        yy + month,
        yy + day,
        month + yy,
        day + yy,
        day + month + yy,
        month + day + yy,
        yy + month + day,
        yy + day + month,
    ]


def matches(pin: str, date: Optional[str]) -> bool:
    """
    PINが日付由来の数字列と一致するかを判定します。

    - 4桁PIN: 候補の先頭4文字 または 末尾4文字 と一致
    - 6桁PIN: 候補の先頭6文字と一致 (6文字の候補のみ該当)
    - それ以外の桁数: 一致なし
    """
    if not date:
        return False

    for variation in date_variations(date):
        if len(pin) == 4:
            if variation[:4] == pin or variation[-4:] == pin:
                return True
        elif len(pin) == 6:
            if variation == pin or variation[:6] == pin:
                return True
    return False


def check_demographics(pin: str, demographics: Optional[Demographics]) -> List[str]:
    """
    本人 → 配偶者 → 記念日 の順に照合し、該当した理由コードを返します。
    各チェックは独立しており、複数同時に該当し得ます。
    """
    issues = []
    if demographics is None:
        return issues

    if demographics.dob and matches(pin, demographics.dob):
        issues.append(DEMOGRAPHIC_DOB_SELF)

    if demographics.spouse_dob and matches(pin, demographics.spouse_dob):
        issues.append(DEMOGRAPHIC_DOB_SPOUSE)

    if demographics.anniversary and matches(pin, demographics.anniversary):
        issues.append(DEMOGRAPHIC_ANNIVERSARY)

    return issues
