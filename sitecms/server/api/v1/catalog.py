"""
Product and Product Category Endpoints.

Public read access to the catalog and admin CRUD. Product writes are
multipart forms so the product image can be uploaded in the same request.
"""

from typing import List, Optional

from fastapi import APIRouter, File, Form, Query, UploadFile, status

from sitecms.core.models.io.catalog import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)
from sitecms.core.models.io.common import ApiResponse
from sitecms.server.core.constant import CATEGORY_PAGE_SIZE, FEATURED_LIMIT, MAX_CATEGORY_PAGE_SIZE
from sitecms.server.services.deps import AdminDep, CategoryServiceDep, ProductServiceDep

from .params import PageDep, form_values

router = APIRouter(tags=["products"])


def product_upload(file: Optional[UploadFile], image: Optional[UploadFile]) -> Optional[UploadFile]:
    """The product image part; admin clients send it as `file`, older ones as `image`."""
    if file is not None and file.filename:
        return file
    return image


# =====================================================================
# Public
# =====================================================================


@router.get(
    "/products",
    response_model=ApiResponse[List[ProductRead]],
    summary="List Products",
    description="Paginated products, newest first, optionally filtered by category.",
)
async def list_products(
    service: ProductServiceDep,
    paging: PageDep,
    category_id: Optional[str] = Query(None, alias="categoryId", description="Only products of this category"),
) -> ApiResponse[List[ProductRead]]:
    items, pagination = await service.list_page(paging.page, paging.page_size, {"category_id": category_id})
    return ApiResponse[List[ProductRead]](
        data=[ProductRead.model_validate(p) for p in items],
        pagination=pagination,
    )


@router.get(
    "/products/featured",
    response_model=ApiResponse[List[ProductRead]],
    summary="Featured Products",
    description="Up to five featured products in display order, for the homepage.",
)
async def list_featured_products(service: ProductServiceDep) -> ApiResponse[List[ProductRead]]:
    items = await service.list_featured(FEATURED_LIMIT)
    return ApiResponse[List[ProductRead]](data=[ProductRead.model_validate(p) for p in items])


@router.get(
    "/products/{product_id}",
    response_model=ApiResponse[ProductRead],
    summary="Get Product",
    responses={404: {"description": "Product not found"}},
)
async def get_product(product_id: str, service: ProductServiceDep) -> ApiResponse[ProductRead]:
    return ApiResponse[ProductRead](data=ProductRead.model_validate(await service.get(product_id)))


@router.get(
    "/product-categories",
    response_model=ApiResponse[List[CategoryRead]],
    summary="List Product Categories",
)
async def list_categories(
    service: CategoryServiceDep,
    page: int = Query(1, ge=1),
    page_size: int = Query(CATEGORY_PAGE_SIZE, ge=1, le=MAX_CATEGORY_PAGE_SIZE, alias="pageSize"),
) -> ApiResponse[List[CategoryRead]]:
    items, pagination = await service.list_page(page, page_size)
    return ApiResponse[List[CategoryRead]](
        data=[CategoryRead.model_validate(c) for c in items],
        pagination=pagination,
    )


# =====================================================================
# Admin: products
# =====================================================================


@router.get(
    "/admin/products",
    response_model=ApiResponse[List[ProductRead]],
    summary="Admin List Products",
)
async def admin_list_products(
    _: AdminDep,
    service: ProductServiceDep,
    paging: PageDep,
    category_id: Optional[str] = Query(None, alias="categoryId"),
) -> ApiResponse[List[ProductRead]]:
    return await list_products(service, paging, category_id)


@router.get(
    "/admin/products/{product_id}",
    response_model=ApiResponse[ProductRead],
    summary="Admin Get Product",
)
async def admin_get_product(product_id: str, _: AdminDep, service: ProductServiceDep) -> ApiResponse[ProductRead]:
    return await get_product(product_id, service)


@router.post(
    "/admin/products",
    response_model=ApiResponse[ProductRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
    description=(
        "Create a product from a multipart form. The optional image is sent as the `file` part "
        "(`image` is accepted too) and stored under /uploads/products."
    ),
    responses={
        201: {"description": "Product created"},
        400: {"description": "Missing name/category, unknown category or rejected image"},
        401: {"description": "Not authenticated"},
    },
)
async def create_product(
    _: AdminDep,
    service: ProductServiceDep,
    name: Optional[str] = Form(None),
    category_id: Optional[str] = Form(None, alias="categoryId"),
    model: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    featured: Optional[str] = Form(None),
    display_order: Optional[str] = Form(None, alias="displayOrder"),
    file: Optional[UploadFile] = File(None),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[ProductRead]:
    """
    Create a product.

    - **name** and **categoryId** are required.
    - **featured**: `true` to show the product on the homepage.
    - **displayOrder**: Homepage position (ascending).
    """
    payload = ProductCreate.model_validate(
        form_values(
            name=name,
            category_id=category_id,
            model=model,
            description=description,
            content=content,
            price=price,
            featured=featured,
            display_order=display_order,
        )
    )
    product = await service.create(payload, product_upload(file, image))
    return ApiResponse[ProductRead](
        code=status.HTTP_201_CREATED,
        message="Product created successfully",
        data=ProductRead.model_validate(product),
    )


@router.put(
    "/admin/products/{product_id}",
    response_model=ApiResponse[ProductRead],
    summary="Update Product",
    description=(
        "Update the fields sent in the form. A new `file` (or `image`) part replaces and deletes the previous "
        "image. Text fields are cleared by sending them empty; blank `price`, `featured` and `displayOrder` "
        "keep their stored values, so a price cannot be removed once set."
    ),
    responses={404: {"description": "Product not found"}},
)
async def update_product(
    product_id: str,
    _: AdminDep,
    service: ProductServiceDep,
    name: Optional[str] = Form(None),
    category_id: Optional[str] = Form(None, alias="categoryId"),
    model: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    featured: Optional[str] = Form(None),
    display_order: Optional[str] = Form(None, alias="displayOrder"),
    file: Optional[UploadFile] = File(None),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[ProductRead]:
    payload = ProductUpdate.model_validate(
        form_values(
            name=name,
            category_id=category_id,
            model=model,
            description=description,
            content=content,
            price=price,
            featured=featured,
            display_order=display_order,
        )
    )
    product = await service.update(product_id, payload, product_upload(file, image))
    return ApiResponse[ProductRead](message="Product updated successfully", data=ProductRead.model_validate(product))


@router.delete(
    "/admin/products/{product_id}",
    response_model=ApiResponse[None],
    summary="Delete Product",
    description="Delete a product and its stored image.",
    responses={404: {"description": "Product not found"}},
)
async def delete_product(product_id: str, _: AdminDep, service: ProductServiceDep) -> ApiResponse[None]:
    await service.delete(product_id)
    return ApiResponse[None](message="Product deleted successfully")


# =====================================================================
# Admin: categories
# =====================================================================


@router.get(
    "/admin/product-categories",
    response_model=ApiResponse[List[CategoryRead]],
    summary="Admin List Product Categories",
)
async def admin_list_categories(
    _: AdminDep,
    service: CategoryServiceDep,
    page: int = Query(1, ge=1),
    page_size: int = Query(CATEGORY_PAGE_SIZE, ge=1, le=MAX_CATEGORY_PAGE_SIZE, alias="pageSize"),
) -> ApiResponse[List[CategoryRead]]:
    return await list_categories(service, page, page_size)


@router.get(
    "/admin/product-categories/{category_id}",
    response_model=ApiResponse[CategoryRead],
    summary="Admin Get Product Category",
    responses={404: {"description": "Category not found"}},
)
async def admin_get_category(category_id: str, _: AdminDep, service: CategoryServiceDep) -> ApiResponse[CategoryRead]:
    return ApiResponse[CategoryRead](data=CategoryRead.model_validate(await service.get(category_id)))


@router.post(
    "/admin/product-categories",
    response_model=ApiResponse[CategoryRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Product Category",
)
async def create_category(body: CategoryCreate, _: AdminDep, service: CategoryServiceDep) -> ApiResponse[CategoryRead]:
    category = await service.create(body)
    return ApiResponse[CategoryRead](
        code=status.HTTP_201_CREATED,
        message="Category created successfully",
        data=CategoryRead.model_validate(category),
    )


@router.put(
    "/admin/product-categories/{category_id}",
    response_model=ApiResponse[CategoryRead],
    summary="Rename Product Category",
    responses={404: {"description": "Category not found"}},
)
async def update_category(
    category_id: str, body: CategoryUpdate, _: AdminDep, service: CategoryServiceDep
) -> ApiResponse[CategoryRead]:
    category = await service.update(category_id, body)
    return ApiResponse[CategoryRead](message="Category updated successfully", data=CategoryRead.model_validate(category))


@router.delete(
    "/admin/product-categories/{category_id}",
    response_model=ApiResponse[None],
    summary="Delete Product Category",
    description="Delete a category together with all of its products.",
    responses={404: {"description": "Category not found"}},
)
async def delete_category(category_id: str, _: AdminDep, service: CategoryServiceDep) -> ApiResponse[None]:
    await service.delete(category_id)
    return ApiResponse[None](message="Category deleted successfully")
