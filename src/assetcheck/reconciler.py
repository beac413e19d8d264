"""マニフェスト全体の照合と複数ディレクトリの実行集計。"""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field

from assetcheck.config import VerifierConfig
from assetcheck.manifest.loader import ManifestLoader
from assetcheck.models.errors import StructuralError
from assetcheck.models.report import VerificationReport
from assetcheck.verifiers.directory import DirectoryVerifier


class ManifestReconciler:
    """マニフェストの全エンティティグループ × ディレクトリルールを照合する。"""

    def __init__(
        self,
        loader: ManifestLoader | None = None,
        verifier: DirectoryVerifier | None = None,
    ) -> None:
        self._loader = loader or ManifestLoader()
        self._verifier = verifier or DirectoryVerifier()

    def run(self, base_directory: Path, delete_unexpected: bool = False) -> VerificationReport:
        """ベースディレクトリをマニフェストに基づいて検証する。

        構造エラー（ディレクトリ・マニフェストの欠落、不正なマニフェスト）は
        そのメッセージ1件のみを含むレポートとして返す。

        Args:
            base_directory: 検証対象のベースディレクトリ。
            delete_unexpected: 想定外ファイルを削除するかどうか。

        Returns:
            ベースディレクトリ全体のレポート。
        """
        try:
            manifest = self._loader.load(base_directory)
        except StructuralError as e:
            logger.warning("Skipping {}: {}", base_directory, e)
            return VerificationReport.failure(str(e))

        report = VerificationReport()
        for group in manifest.entity_groups:
            for rule in group.directories:
                report.extend(
                    self._verifier.verify(base_directory, group.entities, rule, delete_unexpected)
                )
        return report


class DirectoryResult(BaseModel):
    """1つのベースディレクトリの検証結果。"""

    base_directory: Path
    report: VerificationReport


class RunSummary(BaseModel):
    """複数ベースディレクトリの検証結果。ディレクトリごとのレポートを個別に保持する。"""

    results: list[DirectoryResult] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(result.report.has_errors for result in self.results)


def verify_directories(
    base_directories: Iterable[Path],
    config: VerifierConfig | None = None,
) -> RunSummary:
    """複数のベースディレクトリを順に検証する。

    あるディレクトリの構造エラーは他のディレクトリの検証を妨げない。
    """
    if config is None:
        config = VerifierConfig()

    reconciler = ManifestReconciler(loader=ManifestLoader(config.manifest_filename))
    summary = RunSummary()
    for base_directory in base_directories:
        report = reconciler.run(base_directory, delete_unexpected=config.delete_unexpected)
        summary.results.append(DirectoryResult(base_directory=base_directory, report=report))
    return summary
