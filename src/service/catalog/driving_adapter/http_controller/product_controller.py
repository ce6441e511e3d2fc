from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.constant.route_constant import (
    PRODUCT_ADD,
    PRODUCT_DELETE,
    PRODUCT_DETAILS,
    PRODUCT_EDIT,
    PRODUCT_LIST_BUYER,
    PRODUCT_LIST_SELLER,
)
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.command.create_product_use_case import CreateProductUseCase
from src.service.catalog.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.catalog.app.command.edit_product_use_case import EditProductUseCase
from src.service.catalog.app.dto.product_summary import ProductPage
from src.service.catalog.app.query.get_product_use_case import GetProductUseCase
from src.service.catalog.app.query.list_products_use_case import ListProductsUseCase
from src.service.catalog.domain.entity.user_entity import UserEntity
from src.service.catalog.driving_adapter.http_controller.auth.role_auth import (
    require_buyer,
    require_seller,
    require_user,
)
from src.service.catalog.driving_adapter.http_controller.schema.product_schema import (
    BuyerListRequest,
    MessageResponse,
    ProductDetailEnvelope,
    ProductDetailResponse,
    ProductListResponse,
    ProductRequest,
    ProductSummaryResponse,
    SellerListRequest,
)


router = APIRouter(tags=['product'])


def _to_list_response(product_page: ProductPage) -> ProductListResponse:
    return ProductListResponse(
        product_list=[
            ProductSummaryResponse(
                id=item.id,
                name=item.name,
                brand=item.brand,
                price=item.price,
                category=item.category,
                free_shipping=item.free_shipping,
                available_quantity=item.available_quantity,
                description=item.description,
                image=item.image,
            )
            for item in product_page.items
        ],
        total_page=product_page.total_page,
    )


@router.post(PRODUCT_ADD, response_model=MessageResponse, status_code=status.HTTP_200_OK)
@Logger.io
async def add_product(
    request: ProductRequest,
    current_user: UserEntity = Depends(require_seller),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> MessageResponse:
    await use_case.create(
        seller_id=current_user.id,
        name=request.name,
        brand=request.brand,
        category=request.category,
        price=request.price,
        available_quantity=request.available_quantity,
        free_shipping=request.free_shipping,
        description=request.description,
        image=request.image,
    )
    return MessageResponse(message='Product is added successfully.')


@router.get(PRODUCT_DETAILS, response_model=ProductDetailEnvelope)
@Logger.io
async def get_product_details(
    product_id: UUID,
    current_user: UserEntity = Depends(require_user),
    use_case: GetProductUseCase = Depends(GetProductUseCase.depends),
) -> ProductDetailEnvelope:
    product = await use_case.get_by_id(product_id)
    return ProductDetailEnvelope(
        product_detail=ProductDetailResponse(
            id=product.id,
            name=product.name,
            brand=product.brand,
            category=product.category,
            price=product.price,
            available_quantity=product.available_quantity,
            free_shipping=product.free_shipping,
            description=product.description,
            image=product.image,
            seller_id=product.seller_id,
            created_at=product.created_at,
        )
    )


@router.delete(PRODUCT_DELETE, response_model=MessageResponse)
@Logger.io
async def delete_product(
    product_id: UUID,
    current_user: UserEntity = Depends(require_seller),
    use_case: DeleteProductUseCase = Depends(DeleteProductUseCase.depends),
) -> MessageResponse:
    await use_case.delete(product_id=product_id, caller_id=current_user.id)
    return MessageResponse(message='Product is removed successfully.')


@router.put(PRODUCT_EDIT, response_model=MessageResponse)
@Logger.io
async def edit_product(
    product_id: UUID,
    request: ProductRequest,
    current_user: UserEntity = Depends(require_seller),
    use_case: EditProductUseCase = Depends(EditProductUseCase.depends),
) -> MessageResponse:
    await use_case.edit(
        product_id=product_id,
        caller_id=current_user.id,
        name=request.name,
        brand=request.brand,
        category=request.category,
        price=request.price,
        available_quantity=request.available_quantity,
        free_shipping=request.free_shipping,
        description=request.description,
        image=request.image,
    )
    return MessageResponse(message='Product is updated successfully.')


@router.post(PRODUCT_LIST_BUYER, response_model=ProductListResponse)
@Logger.io
async def list_products_for_buyer(
    request: BuyerListRequest,
    current_user: UserEntity = Depends(require_buyer),
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> ProductListResponse:
    product_page = await use_case.list_for_buyer(
        page=request.page, limit=request.limit, search_text=request.search_text
    )
    return _to_list_response(product_page)


@router.post(PRODUCT_LIST_SELLER, response_model=ProductListResponse)
@Logger.io
async def list_products_for_seller(
    request: SellerListRequest,
    current_user: UserEntity = Depends(require_seller),
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> ProductListResponse:
    product_page = await use_case.list_for_seller(
        page=request.page, limit=request.limit, seller_id=current_user.id
    )
    return _to_list_response(product_page)
