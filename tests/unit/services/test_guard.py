"""IPAファイル事前チェックのユニットテスト。"""

from pathlib import Path

import pytest

from ipa_validator.models.errors import IpaNotFoundError, WrongExtensionError
from ipa_validator.services.guard import check_artifact


class TestCheckArtifact:
    def test_accepts_existing_ipa(self, ipa_path: Path) -> None:
        assert check_artifact(str(ipa_path)) == ipa_path

    def test_extension_is_case_insensitive(self, tmp_path: Path) -> None:
        path = tmp_path / "App.IPA"
        path.touch()
        assert check_artifact(str(path)) == path

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.ipa"
        with pytest.raises(IpaNotFoundError, match="IPA file not found") as exc_info:
            check_artifact(str(missing))
        assert exc_info.value.path == str(missing)

    @pytest.mark.parametrize("name", ["test.txt", "test.zip", "test", "test.ipa.bak"])
    def test_wrong_extension(self, tmp_path: Path, name: str) -> None:
        path = tmp_path / name
        path.touch()
        with pytest.raises(WrongExtensionError, match="Not an IPA file"):
            check_artifact(str(path))

    def test_missing_checked_before_extension(self, tmp_path: Path) -> None:
        with pytest.raises(IpaNotFoundError):
            check_artifact(str(tmp_path / "missing.txt"))
