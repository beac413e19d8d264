"""ディレクトリ単位のエンティティファイル照合ロジック。"""

import os
import posixpath
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from assetcheck.models.manifest import DirectoryRule
from assetcheck.models.report import VerificationReport


def _display_path(rule_path: str, file_name: str) -> str:
    return posixpath.normpath(posixpath.join(rule_path, file_name))


class DirectoryVerifier:
    """1つのディレクトリルールについて、期待ファイルと実ファイルを照合する。"""

    def verify(
        self,
        base_directory: Path,
        entities: Sequence[str],
        rule: DirectoryRule,
        delete_unexpected: bool = False,
    ) -> VerificationReport:
        """エンティティ一覧から期待されるファイルとディレクトリの実体を照合する。

        欠落ファイルは required ならエラー、そうでなければ警告になる。
        ignoredEntities に含まれるエンティティの欠落は報告しないが、
        存在する場合は required に関わらず警告とする。
        どのエンティティにも対応しないファイルはエラー、
        delete_unexpected が有効な場合は報告せずに削除する。

        Args:
            base_directory: マニフェストのあるベースディレクトリ。
            entities: エンティティ名の一覧（順序どおりに検査する）。
            rule: 検証対象ディレクトリのルール。
            delete_unexpected: 想定外ファイルを削除するかどうか。

        Returns:
            このルールで検出されたエラーと警告。
        """
        # 絶対パス指定でもベースディレクトリ配下として解決する
        actual_directory = base_directory / rule.path.lstrip("/")
        if not actual_directory.is_dir():
            return VerificationReport.failure(f"Directory {rule.path} does not exist")

        logger.debug("Checking {} against {} entities", actual_directory, len(entities))
        report = VerificationReport()

        # ファイル名 -> 参照済みフラグ（サブディレクトリは対象外）
        seen: dict[str, bool] = {}
        with os.scandir(actual_directory) as it:
            for entry in sorted(it, key=lambda e: e.name):
                if entry.is_dir(follow_symlinks=False):
                    continue
                seen[entry.name] = False

        ignored = set(rule.ignored_entities)

        for entity in entities:
            file_name = f"{entity}.{rule.extension}"
            display_path = _display_path(rule.path, file_name)

            if file_name not in seen:
                if entity in ignored:
                    continue
                if rule.required:
                    report.errors.append(f"File {display_path} missing")
                else:
                    report.warnings.append(f"File {display_path} missing")
                continue

            seen[file_name] = True
            if entity in ignored:
                report.warnings.append(f"File {display_path} ignored but is present")

        for file_name, was_seen in seen.items():
            if was_seen:
                continue
            if delete_unexpected:
                (actual_directory / file_name).unlink()
                logger.info("Deleted unexpected file {}", actual_directory / file_name)
            else:
                report.errors.append(f"File {_display_path(rule.path, file_name)} unexpected")

        return report
