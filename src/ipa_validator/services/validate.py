"""IPA検証を実行するサービス。"""

import logging
from pathlib import Path

from ipa_validator.models.errors import ValidationFailedError
from ipa_validator.models.validation import ValidationFailure, ValidationRequest, ValidationSuccess
from ipa_validator.services.guard import check_artifact
from ipa_validator.services.interpreter import format_failure, format_success, interpret
from ipa_validator.services.invoker import AltoolInvoker, ProcessInvoker

logger = logging.getLogger(__name__)


class ValidationService:
    """IPAファイルの事前チェック、altool実行、結果判定を順に行う。"""

    def __init__(self, invoker: ProcessInvoker | None = None) -> None:
        self._invoker: ProcessInvoker = invoker if invoker is not None else AltoolInvoker()

    async def validate(self, request: ValidationRequest) -> ValidationSuccess:
        """IPAファイルをaltoolで検証する。

        Args:
            request: 検証リクエスト。

        Returns:
            検証成功の結果。

        Raises:
            IpaNotFoundError: IPAファイルが存在しない場合。
            WrongExtensionError: 拡張子が.ipaでない場合。
            AltoolLaunchError: altoolの実行に失敗した場合。
            EmptyOutputError: altoolの出力が空の場合。
            NoPlistFoundError: 出力にplistが含まれない場合。
            MalformedPlistError: plistをパースできない場合。
            ValidationFailedError: IPAが検証に失敗した場合。
        """
        check_artifact(request.path)

        logger.info("Validating '%s' (%s)...", Path(request.path).name, request.platform)

        raw = await self._invoker.invoke(request)
        verdict = interpret(raw)

        if isinstance(verdict, ValidationFailure):
            logger.error(format_failure(verdict))
            raise ValidationFailedError(verdict)

        logger.info(format_success(verdict))
        return verdict
