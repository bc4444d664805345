import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from shopping_cart.domain.value_objects.application_config import ApplicationConfig
from shopping_cart.infrastructure.logging.json_formatter import JSONFormatter, get_version


class LoggingSetup:

    @staticmethod
    def setup(config: ApplicationConfig, project_root: Path) -> Optional[Path]:
        level = getattr(logging, config.log_level, logging.INFO)

        version = get_version(project_root)
        formatter = JSONFormatter(version=version)

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        handlers: List[logging.Handler] = [stream_handler]

        log_file = None
        if config.log_to_file:
            # 相対パスはプロジェクトルート基準
            log_dir = Path(config.log_dir)
            if not log_dir.is_absolute():
                log_dir = project_root / log_dir
            log_dir.mkdir(parents=True, exist_ok=True)

            # ログファイル名にタイムスタンプを含める
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_dir / f"app_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        logging.basicConfig(
            level=level,
            handlers=handlers,
            force=True
        )

        logger = logging.getLogger(__name__)
        if log_file:
            logger.info("ログファイルを初期化しました", extra={"context": {"log_file": str(log_file)}})
        return log_file
