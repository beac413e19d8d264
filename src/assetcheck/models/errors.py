"""assetcheckのカスタム例外クラス。"""

from pathlib import Path


class AssetCheckError(Exception):
    """assetcheckの基底例外クラス。"""


class StructuralError(AssetCheckError):
    """ベースディレクトリ単位で検証を打ち切る構造エラー。"""


class BaseDirectoryNotFoundError(StructuralError):
    """検証対象のベースディレクトリが存在しない場合の例外。"""

    def __init__(self, base_directory: Path) -> None:
        super().__init__(f"Directory {base_directory} does not exist")
        self.base_directory = base_directory


class ManifestNotFoundError(StructuralError):
    """マニフェストファイルが存在しない場合の例外。"""

    def __init__(self, manifest_path: Path) -> None:
        super().__init__(f"Manifest {manifest_path} does not exist")
        self.manifest_path = manifest_path


class ManifestMalformedError(StructuralError):
    """マニフェストが不正なJSON、またはスキーマに適合しない場合の例外。"""

    def __init__(self, manifest_path: Path) -> None:
        super().__init__(f"Manifest {manifest_path} is malformed")
        self.manifest_path = manifest_path
