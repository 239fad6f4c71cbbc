"""IPA検証のMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP

from ipa_validator.models.errors import IpaValidatorError, ValidationFailedError
from ipa_validator.models.validation import build_request
from ipa_validator.services.validate import ValidationService


def register_validate_tools(mcp: FastMCP, validation_service: ValidationService) -> None:
    """IPA検証関連のMCPツールを登録する。"""

    @mcp.tool()
    async def validate_ipa(
        path: str,
        platform: str,
        username: str,
        password: str,
    ) -> dict[str, Any]:
        """altoolでIPAファイルを検証する。

        App Store Connectへアップロードする前に、IPAファイルを
        Appleの検証サービスで検証して結果を返します。
        失敗時は altool が報告したエラー理由を順番通りに返します。

        Args:
            path: IPAファイルのパス。
            platform: プラットフォーム種別（ios, macos）。
            username: Apple ID。
            password: App用パスワード。
        """
        try:
            request = build_request(path, platform, username, password)
            result = await validation_service.validate(request)
            return {"success": True, "summary": result.summary}
        except ValidationFailedError as e:
            return {
                "error": type(e).__name__,
                "message": str(e),
                "reasons": e.failure.reasons,
                "count": e.failure.count,
            }
        except IpaValidatorError as e:
            return {"error": type(e).__name__, "message": str(e)}
