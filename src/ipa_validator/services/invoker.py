"""altoolの起動と出力の取得。"""

import asyncio
import logging
import shlex
from typing import Protocol

from ipa_validator.models.errors import AltoolLaunchError
from ipa_validator.models.validation import ValidationRequest

logger = logging.getLogger(__name__)

# ログ・エラーメッセージ上でパスワードを置き換える文字列
_PASSWORD_MASK = "********"


class ProcessInvoker(Protocol):
    """検証ツールを実行して出力テキストを返すインターフェース。"""

    async def invoke(self, request: ValidationRequest) -> str: ...


class AltoolInvoker:
    """xcrun altool --validate-app を実行する。"""

    def __init__(self, xcrun_path: str = "xcrun") -> None:
        self._xcrun_path = xcrun_path

    def build_command(self, request: ValidationRequest) -> list[str]:
        """altoolの引数リストを構築する。

        シェルを経由しないため、各値はそのまま1引数として渡される。
        """
        return [
            self._xcrun_path,
            "altool",
            "--validate-app",
            "--file",
            request.path,
            "--type",
            request.platform,
            "--username",
            request.username,
            "--password",
            request.password.get_secret_value(),
            "--output-format",
            "xml",
        ]

    def redacted_command(self, request: ValidationRequest) -> str:
        """パスワードをマスクした表示用コマンド文字列を返す。"""
        args = self.build_command(request)
        args[args.index("--password") + 1] = _PASSWORD_MASK
        return shlex.join(args)

    async def invoke(self, request: ValidationRequest) -> str:
        """altoolを実行し、stdoutとstderrを出力順に結合したテキストを返す。

        Args:
            request: 検証リクエスト。

        Returns:
            altoolの出力テキスト。

        Raises:
            AltoolLaunchError: 起動に失敗した場合、または終了コードが0以外の場合。
        """
        args = self.build_command(request)
        logger.debug("Running: %s", self.redacted_command(request))
        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
            stdout_bytes, _ = await proc.communicate()
        except OSError as e:
            raise AltoolLaunchError(str(e)) from e

        output = stdout_bytes.decode("utf-8", errors="replace")
        if proc.returncode:
            secret = request.password.get_secret_value()
            output = output.replace(secret, _PASSWORD_MASK)
            raise AltoolLaunchError(
                f"Exit status of command '{self.redacted_command(request)}' was {proc.returncode}:\n{output}"
            )
        return output
