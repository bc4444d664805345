"""カート明細の値オブジェクト"""
from dataclasses import dataclass
from decimal import Decimal, localcontext

from shopping_cart.domain.entities.product import Product
from shopping_cart.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Item:
    """ショッピングカートの1明細（商品・単価・数量）を表す値オブジェクト

    生成時にすべての値を検証し、生成後は変更できない。
    商品は参照として保持するだけで、そのライフサイクルは管理しない。
    """

    product: Product
    unit_price: Decimal
    quantity: int

    def __post_init__(self):
        """バリデーション"""
        if self.product is None:
            raise InvalidArgumentError("商品が指定されていません", field="product")

        self._validate_unit_price()
        self._validate_quantity()

    def _validate_unit_price(self) -> None:
        """単価のバリデーション

        int は誤差なく Decimal に変換できるため受け付ける。
        float は二進浮動小数点のため受け付けない。

        Raises:
            InvalidArgumentError: 単価が未指定、Decimal 以外、または0以下の場合
        """
        if self.unit_price is None:
            raise InvalidArgumentError("単価が指定されていません", field="unit_price")

        if isinstance(self.unit_price, int) and not isinstance(self.unit_price, bool):
            object.__setattr__(self, "unit_price", Decimal(self.unit_price))

        if not isinstance(self.unit_price, Decimal):
            raise InvalidArgumentError(
                f"単価はDecimalで指定してください: {self.unit_price!r}",
                field="unit_price",
            )

        # NaN との大小比較は InvalidOperation になるため先に弾く
        if not self.unit_price.is_finite() or self.unit_price <= 0:
            raise InvalidArgumentError(
                f"単価は0より大きい必要があります: {self.unit_price}",
                field="unit_price",
            )

    def _validate_quantity(self) -> None:
        """数量のバリデーション

        Raises:
            InvalidArgumentError: 数量が整数でない、または0以下の場合
        """
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidArgumentError(
                f"数量は整数で指定してください: {self.quantity!r}",
                field="quantity",
            )

        if self.quantity <= 0:
            raise InvalidArgumentError(
                f"数量は0より大きい必要があります: {self.quantity}",
                field="quantity",
            )

    @property
    def amount(self) -> Decimal:
        """明細の合計金額（単価 × 数量）

        単価の桁数（スケール）を保ったまま丸めずに計算する。
        例: Decimal("2.995") × 2 = Decimal("5.990")

        Returns:
            Decimal: 合計金額
        """
        digits = len(self.unit_price.as_tuple().digits) + len(str(self.quantity))
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, digits)
            return self.unit_price * self.quantity
