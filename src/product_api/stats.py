from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Sequence

from .models import Product, Stats


CENTS = Decimal("0.01")


def _round_price(value: float) -> float:
    # half up on the shortest decimal form, so 10.125 -> 10.13
    return float(Decimal(repr(value)).quantize(CENTS, rounding=ROUND_HALF_UP))


def aggregate(products: Sequence[Product]) -> Stats:
    total = len(products)
    if total == 0:
        return Stats()

    in_stock = 0
    categories: Dict[str, int] = {}
    price_sum = 0.0
    min_price = max_price = products[0].price
    for product in products:
        if product.in_stock:
            in_stock += 1
        categories[product.category] = categories.get(product.category, 0) + 1
        price_sum += product.price
        min_price = min(min_price, product.price)
        max_price = max(max_price, product.price)

    return Stats(
        total=total,
        in_stock=in_stock,
        out_of_stock=total - in_stock,
        categories=categories,
        average_price=_round_price(price_sum / total),
        min_price=min_price,
        max_price=max_price,
    )
