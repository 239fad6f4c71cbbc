"""altool出力の解釈。

altoolの出力はログ行とXML plistが混在したテキストになる。
ここではplist部分を抽出・パースし、成功または失敗理由のリストに分類する。
"""

import plistlib
import re
from collections.abc import Callable, Mapping
from typing import Any
from xml.parsers.expat import ExpatError

from ipa_validator.models.errors import EmptyOutputError, MalformedPlistError, NoPlistFoundError
from ipa_validator.models.validation import ValidationFailure, ValidationSuccess

# 最初のXML宣言から最後の</plist>までを貪欲にマッチさせる
_PLIST_RE = re.compile(r"(<\?xml.*</plist>)", re.DOTALL)

SUCCESS_FALLBACK = "No errors found"
UNKNOWN_ERROR = "Unknown error"


def extract_plist(raw: str) -> str | None:
    """出力テキストからplist部分を抽出する。見つからなければNoneを返す。"""
    match = _PLIST_RE.search(raw)
    if match is None:
        return None
    return match.group(1).strip()


def parse_plist(xml: str) -> dict[str, Any] | None:
    """plist XMLをパースする。

    パースできない場合、ルートが辞書でない場合、product-errorsが配列でない場合はNoneを返す。
    """
    try:
        document = plistlib.loads(xml.encode("utf-8"), fmt=plistlib.FMT_XML)
    except (ValueError, ExpatError, AttributeError, TypeError):
        # 不正な<date>などの値はAttributeErrorになる
        return None
    if not isinstance(document, dict):
        return None
    if "product-errors" in document and not isinstance(document["product-errors"], list):
        return None
    return document


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _failure_reason(entry: Mapping[str, Any]) -> str | None:
    user_info = entry.get("userInfo")
    if not isinstance(user_info, Mapping):
        return None
    return _non_empty_str(user_info.get("NSLocalizedFailureReason"))


def _message(entry: Mapping[str, Any]) -> str | None:
    return _non_empty_str(entry.get("message"))


# 先頭から順に評価し、最初に空でない値を返したものを採用する
REASON_EXTRACTORS: tuple[Callable[[Mapping[str, Any]], str | None], ...] = (
    _failure_reason,
    _message,
)


def error_reason(entry: Any) -> str:
    """product-errorsの1エントリから表示用の理由文字列を導出する。"""
    if not isinstance(entry, Mapping):
        return UNKNOWN_ERROR
    for extractor in REASON_EXTRACTORS:
        reason = extractor(entry)
        if reason is not None:
            return reason
    return UNKNOWN_ERROR


def classify(document: Mapping[str, Any]) -> ValidationSuccess | ValidationFailure:
    """パース済みplistを成功・失敗に分類する。

    product-errorsが空でなければ、success-messageの有無に関わらず失敗とする。
    """
    errors = document.get("product-errors")
    if not errors:
        summary = document.get("success-message")
        if not isinstance(summary, str):
            summary = SUCCESS_FALLBACK
        return ValidationSuccess(summary=summary)

    reasons = [error_reason(entry) for entry in errors]
    return ValidationFailure(reasons=reasons, count=len(reasons))


def interpret(raw: str) -> ValidationSuccess | ValidationFailure:
    """altoolの出力テキストを検証結果に変換する。

    Args:
        raw: altoolのstdout+stderr。

    Returns:
        ValidationSuccess または ValidationFailure。

    Raises:
        EmptyOutputError: 出力が空、または空白のみの場合。
        NoPlistFoundError: 出力にplistが含まれない場合。
        MalformedPlistError: plistをパースできない場合。
    """
    if not raw.strip():
        raise EmptyOutputError()

    xml = extract_plist(raw)
    if xml is None:
        raise NoPlistFoundError(raw)

    document = parse_plist(xml)
    if document is None:
        raise MalformedPlistError(raw)

    return classify(document)


def format_success(success: ValidationSuccess) -> str:
    """成功通知のメッセージを組み立てる。"""
    return f"Validation succeeded: {success.summary}"


def format_failure(failure: ValidationFailure) -> str:
    """失敗理由を番号付きで列挙したメッセージを組み立てる。"""
    lines = [f"  {index}. {reason}" for index, reason in enumerate(failure.reasons, start=1)]
    return f"Validation failed with {failure.count} error(s):\n" + "\n".join(lines)
