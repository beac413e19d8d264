"""assetcheckの設定管理。"""

from pydantic_settings import BaseSettings


class VerifierConfig(BaseSettings):
    """検証実行の設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "ASSETCHECK_"}

    manifest_filename: str = "manifest.json"
    delete_unexpected: bool = False
    show_warnings: bool = True
    exit_on_error: bool = True
    log_level: str = "WARNING"
