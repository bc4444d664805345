"""ドメイン例外"""
from typing import Optional


class InvalidArgumentError(ValueError):
    """値オブジェクトの生成時に不正な引数が渡された場合の例外"""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(self.message)
