"""設定の読み込みを行うサービス"""
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from shopping_cart.domain.value_objects.application_config import ApplicationConfig, LOG_LEVELS


_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class ConfigLoader:
    """環境変数から設定を読み込むサービス"""

    def __init__(self, project_root: Path) -> None:
        """初期化

        Args:
            project_root: プロジェクトルートディレクトリ
        """
        self.project_root = project_root
        self.logger = logging.getLogger(__name__)

    def load_config(self) -> ApplicationConfig:
        """アプリケーション設定を読み込む

        Returns:
            ApplicationConfig: アプリケーション設定

        Raises:
            ValueError: 設定値が無効な場合
        """
        load_dotenv(self.project_root / ".env")

        log_level = self._parse_log_level(os.getenv("LOG_LEVEL"))
        log_to_file = self._parse_log_to_file(os.getenv("LOG_TO_FILE"))
        log_dir = os.getenv("LOG_DIR") or "logs"

        try:
            config = ApplicationConfig(
                log_level=log_level,
                log_to_file=log_to_file,
                log_dir=log_dir,
            )
        except ValueError as e:
            raise ValueError(f"設定値が無効です: {str(e)}")

        self.logger.debug(
            "設定を読み込みました",
            extra={"context": config.model_dump()},
        )
        return config

    def _parse_log_level(self, value: Optional[str]) -> str:
        """ログレベルをパースする

        Args:
            value: 環境変数の値

        Returns:
            str: パースされた値、無効な場合は INFO
        """
        if not value:
            return "INFO"

        level = value.strip().upper()
        if level not in LOG_LEVELS:
            self.logger.warning(
                f"LOG_LEVEL の値が無効です: {value}。INFO で実行します。"
            )
            return "INFO"

        return level

    def _parse_log_to_file(self, value: Optional[str]) -> bool:
        """ファイル出力フラグをパースする

        Args:
            value: 環境変数の値

        Returns:
            bool: パースされた値、無効な場合は True
        """
        if not value:
            return True

        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False

        self.logger.warning(
            f"LOG_TO_FILE の値が無効です: {value}。ファイルへのログ出力を有効にします。"
        )
        return True
