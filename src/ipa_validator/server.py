"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from ipa_validator.config import ServerConfig
from ipa_validator.services.invoker import AltoolInvoker
from ipa_validator.services.validate import ValidationService
from ipa_validator.tools.validate import register_validate_tools


def create_server(config: ServerConfig | None = None) -> FastMCP:
    """ipa-validator MCPサーバーを作成し、ツールを登録する。

    Args:
        config: サーバー設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = ServerConfig()

    mcp = FastMCP("ipa-validator")

    # サービス層
    validation_service = ValidationService(invoker=AltoolInvoker(xcrun_path=config.xcrun_path))

    # MCPインターフェース登録
    register_validate_tools(mcp, validation_service)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return mcp
