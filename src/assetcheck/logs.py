"""loguruのシンク設定。"""

import sys

from loguru import logger


def setup_logging(log_level: str = "WARNING") -> None:
    """既定のハンドラを外し、標準エラー出力へのシンクを追加する。

    Args:
        log_level: ログレベル（例: "DEBUG", "INFO", "WARNING"）。
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format="<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
    )
