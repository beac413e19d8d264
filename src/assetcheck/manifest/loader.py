"""マニフェストファイルの読み込みと構造検証。"""

from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from assetcheck.models.errors import (
    BaseDirectoryNotFoundError,
    ManifestMalformedError,
    ManifestNotFoundError,
)
from assetcheck.models.manifest import Manifest

DEFAULT_MANIFEST_FILENAME = "manifest.json"


class ManifestLoader:
    """ベースディレクトリ直下のマニフェストを読み込む。"""

    def __init__(self, manifest_filename: str = DEFAULT_MANIFEST_FILENAME) -> None:
        self._manifest_filename = manifest_filename

    def manifest_path(self, base_directory: Path) -> Path:
        return base_directory / self._manifest_filename

    def load(self, base_directory: Path) -> Manifest:
        """マニフェストを読み込み、スキーマ検証済みのモデルを返す。

        Args:
            base_directory: 検証対象のベースディレクトリ。

        Returns:
            読み込んだマニフェスト。

        Raises:
            BaseDirectoryNotFoundError: ベースディレクトリが存在しない場合。
            ManifestNotFoundError: マニフェストファイルが存在しない場合。
            ManifestMalformedError: JSONとして不正、またはスキーマに適合しない場合。
        """
        if not base_directory.exists():
            raise BaseDirectoryNotFoundError(base_directory)

        manifest_path = self.manifest_path(base_directory)
        if not manifest_path.exists():
            raise ManifestNotFoundError(manifest_path)

        try:
            text = manifest_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raise ManifestMalformedError(manifest_path) from None

        try:
            manifest = Manifest.model_validate_json(text)
        except ValidationError as e:
            # 個別のフィールドエラーは報告せず、1件の構造エラーにまとめる
            logger.debug("Manifest {} failed validation: {}", manifest_path, e)
            raise ManifestMalformedError(manifest_path) from None

        logger.debug(
            "Loaded manifest {} with {} entity group(s)", manifest_path, len(manifest.entity_groups)
        )
        return manifest
