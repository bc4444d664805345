"""pytest共通設定"""
import logging

import pytest
from pathlib import Path

from shopping_cart.domain.entities.product import Product
from shopping_cart.infrastructure.logging.json_formatter import JSONFormatter


@pytest.fixture
def widget() -> Product:
    """テスト用の商品"""
    return Product(name="Widget")


@pytest.fixture
def gadget() -> Product:
    """テスト用の別の商品"""
    return Product(name="Gadget")


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """テスト用のプロジェクトルート"""
    root = tmp_path / "project"
    root.mkdir(exist_ok=True)
    return root


@pytest.fixture
def restore_root_logger():
    """ルートロガーの状態をテスト後に元に戻す"""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, JSONFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
