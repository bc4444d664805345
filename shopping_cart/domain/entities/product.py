"""商品エンティティ"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """カートに入れる商品を表すエンティティ"""

    name: str

    def __post_init__(self):
        """バリデーション"""
        if not self.name:
            raise ValueError("商品名が空です")
