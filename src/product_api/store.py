import uuid
from dataclasses import replace
from threading import Lock
from typing import Callable, Dict, Iterable, List, Optional

from .errors import ApiError, ErrorKind
from .models import Product


IdGenerator = Callable[[], str]

SAMPLE_PRODUCTS = (
    Product(
        id="1",
        name="Laptop",
        description="High-performance laptop with 16GB RAM",
        price=1200.0,
        category="electronics",
        in_stock=True,
    ),
    Product(
        id="2",
        name="Smartphone",
        description="Latest model with 128GB storage",
        price=800.0,
        category="electronics",
        in_stock=True,
    ),
    Product(
        id="3",
        name="Coffee Maker",
        description="Programmable coffee maker with timer",
        price=50.0,
        category="kitchen",
        in_stock=False,
    ),
)


def _uuid4() -> str:
    return str(uuid.uuid4())


class ProductStore:
    """Sole owner of the product collection.

    Records are frozen, so the lists handed out by :meth:`list` are
    snapshots: later mutations never show through them.
    """

    def __init__(self, id_generator: Optional[IdGenerator] = None):
        self._lock = Lock()
        self._products: List[Product] = []
        self._new_id = id_generator or _uuid4

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise ApiError(ErrorKind.NOT_FOUND)

    def load(self, products: Iterable[Product]) -> None:
        with self._lock:
            known = {p.id for p in self._products}
            for product in products:
                if product.id in known:
                    raise ValueError(f"duplicate product id: {product.id}")
                known.add(product.id)
                self._products.append(product)

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def get(self, product_id: str) -> Product:
        with self._lock:
            return self._products[self._index_of(product_id)]

    def create(self, fields: Dict[str, object]) -> Product:
        with self._lock:
            known = {p.id for p in self._products}
            pid = self._new_id()
            while pid in known:
                pid = self._new_id()
            product = Product(id=pid, **fields)
            self._products.append(product)
            return product

    def update(self, product_id: str, fields: Dict[str, object]) -> Product:
        fields = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            index = self._index_of(product_id)
            product = replace(self._products[index], **fields)
            self._products[index] = product
            return product

    def delete(self, product_id: str) -> Product:
        with self._lock:
            # pop keeps the remaining records in insertion order
            return self._products.pop(self._index_of(product_id))
