"""テスト共通フィクスチャ。"""

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from loguru import logger

from assetcheck.manifest.loader import ManifestLoader
from assetcheck.reconciler import ManifestReconciler
from assetcheck.verifiers.directory import DirectoryVerifier


def write_manifest(base_dir: Path, data: Any) -> Path:
    """ベースディレクトリにmanifest.jsonを書き込む。"""
    base_dir.mkdir(parents=True, exist_ok=True)
    manifest_path = base_dir / "manifest.json"
    manifest_path.write_text(json.dumps(data), encoding="utf-8")
    return manifest_path


def touch_files(directory: Path, *names: str) -> None:
    """空ファイルを作成する。"""
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_text("", encoding="utf-8")


def rule_data(
    path: str = "files",
    extension: str = "txt",
    required: bool = True,
    ignored: list[str] | None = None,
) -> dict[str, Any]:
    """マニフェスト中のディレクトリ定義を作成する。"""
    return {
        "extension": extension,
        "required": required,
        "path": path,
        "ignoredEntities": ignored or [],
    }


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """CLIテストが追加したloguruシンクをテストごとに外す。"""
    yield
    logger.remove()


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """テスト用のベースディレクトリ。"""
    path = tmp_path / "assets"
    path.mkdir()
    return path


@pytest.fixture
def make_manifest(base_dir: Path) -> Callable[..., Path]:
    """エンティティグループのリストからmanifest.jsonを作成する。"""

    def _make(*groups: dict[str, Any]) -> Path:
        return write_manifest(base_dir, {"entityDirectories": list(groups)})

    return _make


@pytest.fixture
def loader() -> ManifestLoader:
    return ManifestLoader()


@pytest.fixture
def verifier() -> DirectoryVerifier:
    return DirectoryVerifier()


@pytest.fixture
def reconciler() -> ManifestReconciler:
    return ManifestReconciler()
