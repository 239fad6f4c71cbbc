"""ipa-validatorのカスタム例外クラス。"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ipa_validator.models.validation import ValidationFailure


class IpaValidatorError(Exception):
    """ipa-validatorの基底例外クラス。"""


class InvalidParameterError(IpaValidatorError):
    """必須パラメータが空、または値が不正な場合の例外。"""

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter


class IpaNotFoundError(IpaValidatorError):
    """IPAファイルが存在しない場合の例外。"""

    def __init__(self, path: str) -> None:
        super().__init__(f"IPA file not found: {path}")
        self.path = path


class WrongExtensionError(IpaValidatorError):
    """拡張子が.ipaでない場合の例外。"""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not an IPA file: {path}")
        self.path = path


class AltoolLaunchError(IpaValidatorError):
    """altoolの起動失敗、または異常終了時の例外。"""

    def __init__(self, cause: str) -> None:
        super().__init__(f"altool execution failed: {cause}")
        self.cause = cause


class EmptyOutputError(IpaValidatorError):
    """altoolが何も出力しなかった場合の例外。"""

    def __init__(self) -> None:
        super().__init__("altool returned empty output")


class NoPlistFoundError(IpaValidatorError):
    """altoolの出力にplistが含まれない場合の例外。"""

    def __init__(self, raw_output: str) -> None:
        super().__init__(f"No plist found in altool output:\n{raw_output}")
        self.raw_output = raw_output


class MalformedPlistError(IpaValidatorError):
    """抽出したplistをパースできない場合の例外。"""

    def __init__(self, raw_output: str) -> None:
        super().__init__(f"Failed to parse altool XML output:\n{raw_output}")
        self.raw_output = raw_output


class ValidationFailedError(IpaValidatorError):
    """IPAがリモート検証に失敗した場合の例外。"""

    def __init__(self, failure: ValidationFailure) -> None:
        super().__init__("IPA validation failed")
        self.failure = failure
