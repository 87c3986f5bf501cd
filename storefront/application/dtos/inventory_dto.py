"""Application DTOs for the inventory screen."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from storefront.application.inventory_stats import InventoryStats, inventory_lines
from storefront.domain.entities import Product


class InventoryStatsDTO(BaseModel):
    """Dashboard tallies."""

    total_sales: Decimal = Field(..., ge=0, description="Revenue from paid, confirmed-or-later orders")
    total_vials_sold: int = Field(..., ge=0, description="Units sold in those orders")
    total_inventory_value: Decimal = Field(..., description="Stock value at current prices")
    low_stock_count: int = Field(..., ge=0, description="Products with a low stock level")
    total_items: int = Field(..., ge=0, description="Products in the catalog")
    currency: str = Field(..., description="Currency code")

    model_config = {"frozen": True}


class InventoryLineDTO(BaseModel):
    """One stock row: a variation, or a product without variations."""

    product_id: str = Field(..., description="Product ID")
    variation_id: Optional[str] = Field(None, description="Variation ID")
    name: str = Field(..., description="Display name")
    stock_quantity: int = Field(..., description="Units in stock")
    unit_price: Decimal = Field(..., description="Price per unit")
    stock_value: Decimal = Field(..., description="Units times price")
    in_stock: bool = Field(..., description="Whether any unit is available")

    model_config = {"frozen": True}


class ProductStockDTO(BaseModel):
    """Product with its stock rows."""

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    category: str = Field(default="", description="Category")
    low_stock: bool = Field(..., description="Any stock level below the threshold")
    out_of_stock: bool = Field(..., description="Every stock level at zero")
    lines: List[InventoryLineDTO] = Field(default_factory=list, description="Stock rows")

    model_config = {"frozen": True}


class StockUpdateRequest(BaseModel):
    """Request DTO for the stock editor."""

    product_id: str = Field(..., min_length=1, description="Product ID")
    variation_id: Optional[str] = Field(None, description="Variation ID; product stock when omitted")
    new_stock: int = Field(..., ge=0, description="New stock quantity")

    model_config = {"frozen": True}


def stats_to_dto(stats: InventoryStats) -> InventoryStatsDTO:
    return InventoryStatsDTO(
        total_sales=stats.total_sales.amount,
        total_vials_sold=stats.total_vials_sold,
        total_inventory_value=stats.total_inventory_value.amount,
        low_stock_count=stats.low_stock_count,
        total_items=stats.total_items,
        currency=stats.total_sales.currency,
    )


def product_to_dto(product: Product, low_stock_threshold: int) -> ProductStockDTO:
    lines = [
        InventoryLineDTO(
            product_id=line.product_id,
            variation_id=line.variation_id,
            name=line.name,
            stock_quantity=line.stock_quantity,
            unit_price=line.unit_price.amount,
            stock_value=line.stock_value.amount,
            in_stock=line.in_stock,
        )
        for line in inventory_lines(product)
    ]
    return ProductStockDTO(
        id=product.id,
        name=product.name,
        category=product.category,
        low_stock=product.is_low_stock(low_stock_threshold),
        out_of_stock=product.is_out_of_stock(),
        lines=lines,
    )
