from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    description: str
    price: float
    category: str
    in_stock: bool

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "inStock": self.in_stock,
        }


@dataclass(frozen=True)
class PageInfo:
    page: int
    limit: int
    total: int
    pages: int
    has_next: bool
    has_prev: bool

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "pages": self.pages,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }


@dataclass(frozen=True)
class Stats:
    total: int = 0
    in_stock: int = 0
    out_of_stock: int = 0
    categories: Dict[str, int] = field(default_factory=dict)
    average_price: float = 0
    min_price: float = 0
    max_price: float = 0

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "inStock": self.in_stock,
            "outOfStock": self.out_of_stock,
            "categories": dict(self.categories),
            "averagePrice": self.average_price,
            "priceRange": {"min": self.min_price, "max": self.max_price},
        }
