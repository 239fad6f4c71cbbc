"""IPAファイルの事前チェック。"""

from pathlib import Path

from ipa_validator.models.errors import IpaNotFoundError, WrongExtensionError

IPA_EXTENSION = ".ipa"


def check_artifact(path: str) -> Path:
    """IPAファイルの存在と拡張子を検証する。

    altoolを起動する前に実行し、ローカルで判定できる誤りを早期に検出する。

    Args:
        path: IPAファイルのパス。

    Returns:
        検証済みのパス。

    Raises:
        IpaNotFoundError: パスにファイルが存在しない場合。
        WrongExtensionError: 拡張子が.ipaでない場合（大文字小文字は区別しない）。
    """
    artifact = Path(path)
    if not artifact.exists():
        raise IpaNotFoundError(path)
    if artifact.suffix.lower() != IPA_EXTENSION:
        raise WrongExtensionError(path)
    return artifact
