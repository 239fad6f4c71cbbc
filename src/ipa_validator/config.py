"""ipa-validatorの設定管理。"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings

from ipa_validator.models.validation import ValidationRequest, build_request


class ServerConfig(BaseSettings):
    """サーバー設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "IPA_VALIDATOR_"}

    host: str = "0.0.0.0"
    port: int = 8000
    xcrun_path: str = "xcrun"
    log_level: str = "INFO"


class ValidateIpaOptions(BaseSettings):
    """validate_ipaの呼び出しパラメータ。FL_VALIDATE_IPA_* 環境変数から読み込む。"""

    model_config = {"env_prefix": "FL_VALIDATE_IPA_"}

    path: str = ""
    platform: str = ""
    username: str = ""
    password: SecretStr = SecretStr("")

    def to_request(self) -> ValidationRequest:
        """オプションを検証してValidationRequestに変換する。

        Raises:
            InvalidParameterError: 必須パラメータが空、またはplatformが未対応の場合。
        """
        return build_request(
            self.path,
            self.platform,
            self.username,
            self.password.get_secret_value(),
        )
