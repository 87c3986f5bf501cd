"""Inventory endpoints: dashboard figures, catalog filters and the stock editor."""

from typing import List

from fastapi import APIRouter, Depends, Query

from storefront.application.dtos import (
    InventoryStatsDTO,
    ProductStockDTO,
    StockUpdateRequest,
    product_to_dto,
    stats_to_dto,
)
from storefront.application.inventory_stats import filter_products
from storefront.application.services import InventoryService
from storefront.domain.enums import StockFilter

from console_api.deps import get_inventory_service

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("/stats", response_model=InventoryStatsDTO)
async def get_inventory_stats(
    service: InventoryService = Depends(get_inventory_service),
) -> InventoryStatsDTO:
    """Sales and stock tallies, recomputed on every request."""
    return stats_to_dto(await service.get_stats())


@router.get("/products", response_model=List[ProductStockDTO])
async def list_inventory_products(
    category: str = Query(default="all", description="'all' or a product category"),
    q: str = Query(default="", description="Search in name and description"),
    stock: StockFilter = Query(default=StockFilter.ALL, description="Stock level filter"),
    service: InventoryService = Depends(get_inventory_service),
) -> List[ProductStockDTO]:
    products = await service.list_products()
    visible = filter_products(
        products,
        category,
        q,
        stock,
        low_stock_threshold=service.low_stock_threshold,
    )
    return [product_to_dto(product, service.low_stock_threshold) for product in visible]


@router.patch("/stock", response_model=StockUpdateRequest)
async def update_stock(
    request: StockUpdateRequest,
    service: InventoryService = Depends(get_inventory_service),
) -> StockUpdateRequest:
    """Overwrite the stock of a variation, or of the product when no variation is given.

    Negative values are rejected with 422 before reaching the store.
    """
    await service.update_stock(request.product_id, request.variation_id, request.new_stock)
    return request
