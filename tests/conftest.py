"""テスト共通フィクスチャ。"""

import plistlib
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from ipa_validator.config import ServerConfig
from ipa_validator.models.validation import ValidationRequest, build_request
from ipa_validator.services.invoker import AltoolInvoker
from ipa_validator.services.validate import ValidationService


@pytest.fixture
def ipa_path(tmp_path: Path) -> Path:
    """テスト用の空IPAファイル。"""
    path = tmp_path / "test.ipa"
    path.touch()
    return path


@pytest.fixture
def validation_request(ipa_path: Path) -> ValidationRequest:
    """テスト用ValidationRequest。"""
    return build_request(str(ipa_path), "ios", "test@example.com", "test-password")


@pytest.fixture
def to_plist() -> Callable[[dict[str, Any]], str]:
    """辞書をaltoolと同じXML plist文字列に変換する関数。"""

    def _to_plist(document: dict[str, Any]) -> str:
        return plistlib.dumps(document, fmt=plistlib.FMT_XML).decode("utf-8")

    return _to_plist


@pytest.fixture
def mock_invoker() -> AsyncMock:
    """invokeが差し替え可能なProcessInvoker。"""
    invoker = AsyncMock()
    invoker.invoke.return_value = ""
    return invoker


@pytest.fixture
def validation_service(mock_invoker: AsyncMock) -> ValidationService:
    """テスト用ValidationService。"""
    return ValidationService(invoker=mock_invoker)


@pytest.fixture
def altool_invoker() -> AltoolInvoker:
    """テスト用AltoolInvoker。"""
    return AltoolInvoker()


@pytest.fixture
def server_config() -> ServerConfig:
    """テスト用ServerConfig。"""
    return ServerConfig(xcrun_path="xcrun")
