"""アプリケーション設定を表す値オブジェクト"""
from pydantic import BaseModel, Field, field_validator


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ApplicationConfig(BaseModel):
    """アプリケーション設定の値オブジェクト"""

    # ログ設定
    log_level: str = Field(default="INFO", description="ログレベル")
    log_to_file: bool = Field(default=True, description="ログをファイルにも出力するか")
    log_dir: str = Field(default="logs", description="ログファイルの保存先ディレクトリ")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """ログレベルのバリデーション"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"ログレベルは {LOG_LEVELS} のいずれかである必要があります")
        return level

    class Config:
        frozen = True
