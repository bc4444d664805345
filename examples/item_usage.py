"""カート明細（Item）の使用例"""
import logging
import sys
from decimal import Decimal
from pathlib import Path

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from shopping_cart.domain.entities.product import Product
from shopping_cart.domain.exceptions import InvalidArgumentError
from shopping_cart.domain.value_objects.item import Item
from shopping_cart.infrastructure.config.config_loader import ConfigLoader
from shopping_cart.infrastructure.logging.logging_setup import LoggingSetup

logger = logging.getLogger(__name__)


def example_calculate_amount() -> None:
    """明細の合計金額を計算する例"""
    widget = Item(product=Product("Widget"), unit_price=Decimal("10.00"), quantity=3)
    gadget = Item(product=Product("Gadget"), unit_price=Decimal("2.995"), quantity=2)

    for item in (widget, gadget):
        logger.info(
            f"{item.product.name}: {item.unit_price} × {item.quantity} = {item.amount}",
            extra={"context": {"product": item.product.name, "amount": item.amount}},
        )


def example_invalid_item() -> None:
    """不正な明細を生成しようとする例"""
    try:
        Item(product=Product("Widget"), unit_price=Decimal("5.50"), quantity=0)
    except InvalidArgumentError as e:
        logger.warning(f"明細を生成できませんでした: {e}", extra={"context": {"field": e.field}})


if __name__ == "__main__":
    config = ConfigLoader(project_root).load_config()
    LoggingSetup.setup(config, project_root)

    print("=== 例1: 合計金額を計算 ===")
    example_calculate_amount()

    print("\n=== 例2: 不正な明細 ===")
    example_invalid_item()
