"""
Domain models for seller sales statistics.

Input models (Seller, Product, LineItem, PurchaseRecord) are immutable and can
be built from the JSON-shaped dicts callers usually hold. Aggregation models
(SellerStat, ProductStat) are mutated while purchase records are scanned.
Result models (SellerReport, TopProduct) carry rounded values and serialize
back to plain dicts.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union


# ═══════════════════════════════════════════════════════════════════════════════
# INPUT
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Seller:
    """Seller from the sellers collection."""
    id: str
    first_name: str = ""
    last_name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> "Seller":
        """Create Seller from a raw dict."""
        return cls(
            id=data.get("id"),
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
        )

    @property
    def full_name(self) -> str:
        """Display name used in reports."""
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Product:
    """Catalog entry, keyed by SKU."""
    sku: str
    name: str = "Unknown"
    purchase_price: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping) -> "Product":
        """Create Product from a raw dict."""
        return cls(
            sku=data.get("sku"),
            name=data.get("name", "Unknown"),
            purchase_price=_number(data.get("purchase_price")),
        )


@dataclass(frozen=True)
class LineItem:
    """One product entry within a purchase record."""
    sku: str
    sale_price: float
    quantity: float
    discount: float = 0.0  # percent, 0-100

    @classmethod
    def from_dict(cls, data: Mapping) -> "LineItem":
        """Create LineItem from a raw dict. Missing or null numbers count as 0."""
        return cls(
            sku=data.get("sku"),
            sale_price=_number(data.get("sale_price")),
            quantity=_number(data.get("quantity")),
            discount=_number(data.get("discount")),
        )

    @property
    def discount_factor(self) -> float:
        """Share of the sale price left after the discount."""
        return 1 - self.discount / 100

    @property
    def discounted_price(self) -> float:
        """Unit price after the discount."""
        return self.sale_price * self.discount_factor


@dataclass(frozen=True)
class PurchaseRecord:
    """Receipt: a seller ID plus its ordered line items."""
    seller_id: str
    items: tuple = ()

    @classmethod
    def from_dict(cls, data: Mapping) -> "PurchaseRecord":
        """Create PurchaseRecord from a raw dict. Unrelated keys are ignored."""
        return cls(
            seller_id=data.get("seller_id"),
            items=tuple(_coerce(LineItem, item) for item in data.get("items") or ()),
        )


def _coerce(model, value):
    """Build ``model`` from a dict, pass model instances through."""
    if isinstance(value, Mapping):
        return model.from_dict(value)
    return value


def _number(value: Any) -> Union[int, float]:
    """Numeric field as given; None counts as 0 and strings are parsed."""
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        return value
    return float(value)


@dataclass(frozen=True)
class SalesData:
    """Input bundle for one analysis run."""
    sellers: Sequence[Seller]
    products: Sequence[Product]
    purchase_records: Sequence[PurchaseRecord]

    @classmethod
    def from_dict(cls, data: Mapping) -> "SalesData":
        """Create SalesData from a raw dict, parsing every collection."""
        return cls.from_collections(
            data.get("sellers") or (),
            data.get("products") or (),
            data.get("purchase_records") or (),
        )

    @classmethod
    def from_collections(
        cls,
        sellers: Sequence[Union[Seller, Mapping]],
        products: Sequence[Union[Product, Mapping]],
        purchase_records: Sequence[Union[PurchaseRecord, Mapping]],
    ) -> "SalesData":
        """Create SalesData from collections of dicts or model instances."""
        return cls(
            sellers=[_coerce(Seller, s) for s in sellers],
            products=[_coerce(Product, p) for p in products],
            purchase_records=[_coerce(PurchaseRecord, r) for r in purchase_records],
        )


# ═══════════════════════════════════════════════════════════════════════════════
# AGGREGATION
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass
class ProductStat:
    """Running totals for one SKU sold by one seller."""
    product: Product
    revenue: float = 0.0
    profit: float = 0.0
    quantity: float = 0

    def add(self, revenue: float, profit: float, quantity: float) -> None:
        self.revenue += revenue
        self.profit += profit
        self.quantity += quantity


@dataclass
class SellerStat:
    """Running totals for one seller."""
    id: str
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    products_sold: Dict[str, ProductStat] = field(default_factory=dict)
    bonus: Optional[float] = None

    @classmethod
    def from_seller(cls, seller: Seller) -> "SellerStat":
        """Create an empty stat for a seller."""
        return cls(id=seller.id, name=seller.full_name)

    def product_stat(self, product: Product) -> ProductStat:
        """Get the ProductStat for a product, creating it on first sale."""
        stat = self.products_sold.get(product.sku)
        if stat is None:
            stat = self.products_sold[product.sku] = ProductStat(product=product)
        return stat


RevenueStrategy = Callable[[LineItem, Product], float]
BonusStrategy = Callable[[int, int, SellerStat], float]


@dataclass(frozen=True)
class AnalysisOptions:
    """Pluggable strategies for one analysis run."""
    calculate_revenue: RevenueStrategy
    calculate_bonus: BonusStrategy


# ═══════════════════════════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass
class TopProduct:
    """Product in a seller's top products list."""
    sku: str
    name: str
    revenue: float
    profit: float
    quantity: float

    @classmethod
    def from_stat(cls, stat: ProductStat, digits: int = 2) -> "TopProduct":
        """Project a ProductStat, rounding money values."""
        return cls(
            sku=stat.product.sku,
            name=stat.product.name,
            revenue=round(stat.revenue, digits),
            profit=round(stat.profit, digits),
            quantity=stat.quantity,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "sku": self.sku,
            "name": self.name,
            "revenue": self.revenue,
            "profit": self.profit,
            "quantity": self.quantity,
        }


@dataclass
class SellerReport:
    """Final statistics row for one seller."""
    seller_id: str
    name: str
    revenue: float
    profit: float
    sales_count: int
    bonus: float
    top_products: List[TopProduct] = field(default_factory=list)

    @classmethod
    def from_stat(
        cls,
        stat: SellerStat,
        top_products: List[ProductStat],
        digits: int = 2,
    ) -> "SellerReport":
        """Project a ranked SellerStat, rounding money values."""
        return cls(
            seller_id=stat.id,
            name=stat.name,
            revenue=round(stat.revenue, digits),
            profit=round(stat.profit, digits),
            sales_count=stat.sales_count,
            bonus=round(stat.bonus or 0.0, digits),
            top_products=[TopProduct.from_stat(p, digits) for p in top_products],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "seller_id": self.seller_id,
            "name": self.name,
            "revenue": self.revenue,
            "profit": self.profit,
            "sales_count": self.sales_count,
            "bonus": self.bonus,
            "top_products": [p.to_dict() for p in self.top_products],
        }
