"""IPA検証関連のデータモデル。"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator

from ipa_validator.models.errors import InvalidParameterError

Platform = Literal["ios", "macos"]

SUPPORTED_PLATFORMS: tuple[str, ...] = ("ios", "macos")


class ValidationRequest(BaseModel):
    """1回の検証呼び出しに渡すパラメータ。"""

    model_config = ConfigDict(frozen=True)

    path: str
    platform: Platform
    username: str
    password: SecretStr


class ValidationSuccess(BaseModel):
    """検証成功の結果。"""

    status: Literal["success"] = "success"
    summary: str


class ValidationFailure(BaseModel):
    """検証失敗の結果。reasonsはaltoolが返したエラー順を保持する。"""

    status: Literal["failure"] = "failure"
    reasons: list[str]
    count: int

    @model_validator(mode="after")
    def _check_count(self) -> "ValidationFailure":
        if self.count != len(self.reasons):
            raise ValueError(f"count ({self.count}) must equal number of reasons ({len(self.reasons)})")
        return self


Verdict = Annotated[ValidationSuccess | ValidationFailure, Field(discriminator="status")]


def build_request(path: str, platform: str, username: str, password: str) -> ValidationRequest:
    """呼び出し元パラメータを検証してValidationRequestを構築する。

    Args:
        path: IPAファイルのパス。
        platform: プラットフォーム種別（ios, macos）。
        username: Apple ID。
        password: App用パスワード。

    Returns:
        検証済みのValidationRequest。

    Raises:
        InvalidParameterError: パラメータが空、またはplatformが未対応の場合。
    """
    for name, value in (("path", path), ("platform", platform), ("username", username), ("password", password)):
        if not value:
            raise InvalidParameterError(name, f"'{name}' must not be empty")
    if platform not in SUPPORTED_PLATFORMS:
        raise InvalidParameterError(
            "platform",
            f"Unsupported platform '{platform}'. Supported: {', '.join(SUPPORTED_PLATFORMS)}",
        )
    return ValidationRequest(
        path=path,
        platform=platform,  # type: ignore[arg-type]
        username=username,
        password=SecretStr(password),
    )
