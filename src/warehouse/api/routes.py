"""FastAPI routes for the Warehouse domain: products and analytics.

The warehouse and its analyzer live on ``app.state`` and are injected into
each endpoint, so every application instance owns its own inventory.
"""

from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Request
from protean.exceptions import ObjectNotFoundError, ValidationError

from warehouse.analytics.analyzer import WarehouseAnalyzer
from warehouse.api.schemas import (
    CategoryAmountResponse,
    CategoryProductsResponse,
    CreateProductRequest,
    DiscountedPriceResponse,
    InventoryStatisticsResponse,
    InventoryValidationResponse,
    ProductIdResponse,
    ProductResponse,
    ShippingCostResponse,
    ShippingGroupResponse,
    StatusResponse,
    UpdatePriceRequest,
)
from warehouse.category.category import Category
from warehouse.inventory.warehouse import Warehouse
from warehouse.product.capabilities import Perishable, Shippable
from warehouse.product.electronics import ElectronicsProduct
from warehouse.product.food import FoodProduct
from warehouse.product.product import Product

_KIND_BY_CLASS = {FoodProduct: "food", ElectronicsProduct: "electronics"}


def get_warehouse(request: Request) -> Warehouse:
    return request.app.state.warehouse


def get_analyzer(request: Request) -> WarehouseAnalyzer:
    return request.app.state.analyzer


def _to_response(product: Product) -> ProductResponse:
    shippable = isinstance(product, Shippable)
    return ProductResponse(
        id=str(product.id),
        kind=_KIND_BY_CLASS.get(type(product), type(product).__name__.lower()),
        name=product.name,
        category=product.category.name,
        price=product.price,
        details=product.details(),
        weight=product.weight if shippable else None,
        shipping_cost=product.shipping_cost() if shippable else None,
        expiration_date=product.expiration_date if isinstance(product, Perishable) else None,
    )


def _build_product(body: CreateProductRequest) -> Product:
    category = Category.of(body.category)
    if body.kind == "food":
        if body.warranty_months is not None:
            raise ValidationError({"warranty_months": ["Warranty months only apply to electronics."]})
        return FoodProduct(
            id=body.id,
            name=body.name,
            category=category,
            price=body.price,
            expiration_date=body.expiration_date,
            weight=body.weight,
        )

    if body.expiration_date is not None:
        raise ValidationError({"expiration_date": ["Expiration date only applies to food."]})
    return ElectronicsProduct(
        id=body.id,
        name=body.name,
        category=category,
        price=body.price,
        warranty_months=body.warranty_months if body.warranty_months is not None else 0,
        weight=body.weight,
    )


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: CreateProductRequest, warehouse: Warehouse = Depends(get_warehouse)) -> ProductIdResponse:
    product = _build_product(body)
    warehouse.add(product)
    return ProductIdResponse(product_id=str(product.id))


@product_router.get("", response_model=list[ProductResponse])
async def list_products(warehouse: Warehouse = Depends(get_warehouse)) -> list[ProductResponse]:
    return [_to_response(p) for p in warehouse.all()]


@product_router.get("/grouped", response_model=list[CategoryProductsResponse])
async def grouped_by_category(warehouse: Warehouse = Depends(get_warehouse)) -> list[CategoryProductsResponse]:
    return [
        CategoryProductsResponse(category=category.name, products=[_to_response(p) for p in products])
        for category, products in warehouse.grouped_by_category().items()
    ]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, warehouse: Warehouse = Depends(get_warehouse)) -> ProductResponse:
    product = warehouse.get(product_id)
    if product is None:
        raise ObjectNotFoundError({"_entity": [f"Product not found with id: {product_id}"]})
    return _to_response(product)


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str, warehouse: Warehouse = Depends(get_warehouse)) -> StatusResponse:
    warehouse.remove(product_id)
    return StatusResponse()


@product_router.put("/{product_id}/price", response_model=StatusResponse)
async def update_price(
    product_id: str, body: UpdatePriceRequest, warehouse: Warehouse = Depends(get_warehouse)
) -> StatusResponse:
    warehouse.update_price(product_id, body.price)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Analytics Router
# ---------------------------------------------------------------------------
analytics_router = APIRouter(prefix="/analytics", tags=["analytics"])


@analytics_router.get("/category/{name}", response_model=list[ProductResponse])
async def products_in_category(name: str, analyzer: WarehouseAnalyzer = Depends(get_analyzer)) -> list[ProductResponse]:
    return [_to_response(p) for p in analyzer.find_products_in_category(Category.of(name))]


@analytics_router.get("/price-range", response_model=list[ProductResponse])
async def products_in_price_range(
    min_price: Decimal, max_price: Decimal, analyzer: WarehouseAnalyzer = Depends(get_analyzer)
) -> list[ProductResponse]:
    return [_to_response(p) for p in analyzer.find_products_in_price_range(min_price, max_price)]


@analytics_router.get("/expiring", response_model=list[ProductResponse])
async def products_expiring(
    days: int = Query(ge=0),
    today: date | None = None,
    analyzer: WarehouseAnalyzer = Depends(get_analyzer),
) -> list[ProductResponse]:
    return [_to_response(p) for p in analyzer.find_products_expiring_within_days(days, today=today)]


@analytics_router.get("/search", response_model=list[ProductResponse])
async def search_products(term: str = "", analyzer: WarehouseAnalyzer = Depends(get_analyzer)) -> list[ProductResponse]:
    return [_to_response(p) for p in analyzer.search_products_by_name(term)]


@analytics_router.get("/above-price", response_model=list[ProductResponse])
async def products_above_price(
    threshold: Decimal, analyzer: WarehouseAnalyzer = Depends(get_analyzer)
) -> list[ProductResponse]:
    return [_to_response(p) for p in analyzer.find_products_above_price(threshold)]


@analytics_router.get("/weighted-averages", response_model=list[CategoryAmountResponse])
async def weighted_averages(analyzer: WarehouseAnalyzer = Depends(get_analyzer)) -> list[CategoryAmountResponse]:
    averages = analyzer.weighted_average_price_by_category()
    return [
        CategoryAmountResponse(category=category.name, amount=amount)
        for category, amount in sorted(averages.items(), key=lambda item: item[0].name)
    ]


@analytics_router.get("/discounts", response_model=list[DiscountedPriceResponse])
async def discounts(
    today: date | None = None, analyzer: WarehouseAnalyzer = Depends(get_analyzer)
) -> list[DiscountedPriceResponse]:
    return [
        DiscountedPriceResponse(
            product_id=str(product.id),
            name=product.name,
            original_price=product.price,
            discounted_price=price,
        )
        for product, price in analyzer.expiration_based_discounts(today=today).items()
    ]


@analytics_router.get("/validation", response_model=InventoryValidationResponse)
async def validation(
    threshold: Decimal | None = None, analyzer: WarehouseAnalyzer = Depends(get_analyzer)
) -> InventoryValidationResponse:
    result = analyzer.validate_inventory_constraints(high_value_threshold=threshold)
    return InventoryValidationResponse(
        high_value_percentage=result.high_value_percentage,
        category_diversity=result.category_diversity,
        high_value_warning=result.high_value_warning,
        minimum_diversity=result.minimum_diversity,
    )


@analytics_router.get("/statistics", response_model=InventoryStatisticsResponse)
async def statistics(
    today: date | None = None, analyzer: WarehouseAnalyzer = Depends(get_analyzer)
) -> InventoryStatisticsResponse:
    stats = analyzer.inventory_statistics(today=today)
    return InventoryStatisticsResponse(
        total_products=stats.total_products,
        total_value=stats.total_value,
        average_price=stats.average_price,
        expired_count=stats.expired_count,
        category_count=stats.category_count,
        most_expensive_product_id=str(stats.most_expensive_product.id) if stats.most_expensive_product else None,
        cheapest_product_id=str(stats.cheapest_product.id) if stats.cheapest_product else None,
    )


@analytics_router.get("/shipping-groups", response_model=list[ShippingGroupResponse])
async def shipping_groups(
    max_weight: Decimal, analyzer: WarehouseAnalyzer = Depends(get_analyzer)
) -> list[ShippingGroupResponse]:
    return [
        ShippingGroupResponse(
            product_ids=[str(p.id) for p in group.products],
            total_weight=group.total_weight,
            total_shipping_cost=group.total_shipping_cost,
        )
        for group in analyzer.optimize_shipping_groups(max_weight)
    ]


@analytics_router.get("/shipping-cost", response_model=ShippingCostResponse)
async def shipping_cost(analyzer: WarehouseAnalyzer = Depends(get_analyzer)) -> ShippingCostResponse:
    return ShippingCostResponse(total_shipping_cost=analyzer.total_shipping_cost())
