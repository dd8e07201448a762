"""
News Endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, File, Form, UploadFile, status

from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.content import NewsCreate, NewsRead, NewsUpdate
from sitecms.server.core.constant import FEATURED_LIMIT
from sitecms.server.services.deps import AdminDep, NewsServiceDep

from .params import PageDep, form_values

router = APIRouter(tags=["news"])


@router.get(
    "/news",
    response_model=ApiResponse[List[NewsRead]],
    summary="List News",
    description="Paginated news articles, newest first.",
)
async def list_news(service: NewsServiceDep, paging: PageDep) -> ApiResponse[List[NewsRead]]:
    items, pagination = await service.list_page(paging.page, paging.page_size)
    return ApiResponse[List[NewsRead]](data=[NewsRead.model_validate(n) for n in items], pagination=pagination)


@router.get("/news/featured", response_model=ApiResponse[List[NewsRead]], summary="Featured News")
async def list_featured_news(service: NewsServiceDep) -> ApiResponse[List[NewsRead]]:
    items = await service.list_featured(FEATURED_LIMIT)
    return ApiResponse[List[NewsRead]](data=[NewsRead.model_validate(n) for n in items])


@router.get(
    "/news/{news_id}",
    response_model=ApiResponse[NewsRead],
    summary="Get News Article",
    responses={404: {"description": "News not found"}},
)
async def get_news(news_id: str, service: NewsServiceDep) -> ApiResponse[NewsRead]:
    return ApiResponse[NewsRead](data=NewsRead.model_validate(await service.get(news_id)))


@router.get("/admin/news", response_model=ApiResponse[List[NewsRead]], summary="Admin List News")
async def admin_list_news(_: AdminDep, service: NewsServiceDep, paging: PageDep) -> ApiResponse[List[NewsRead]]:
    return await list_news(service, paging)


@router.get("/admin/news/{news_id}", response_model=ApiResponse[NewsRead], summary="Admin Get News Article")
async def admin_get_news(news_id: str, _: AdminDep, service: NewsServiceDep) -> ApiResponse[NewsRead]:
    return await get_news(news_id, service)


@router.post(
    "/admin/news",
    response_model=ApiResponse[NewsRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create News Article",
    responses={400: {"description": "Missing title or rejected image"}},
)
async def create_news(
    _: AdminDep,
    service: NewsServiceDep,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    excerpt: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    featured: Optional[str] = Form(None),
    display_order: Optional[str] = Form(None, alias="displayOrder"),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[NewsRead]:
    """
    Create a news article.

    - **date**: Free-form publication date shown on the site (e.g. `2024-03-01`).
    """
    payload = NewsCreate.model_validate(
        form_values(
            title=title,
            content=content,
            excerpt=excerpt,
            category=category,
            author=author,
            date=date,
            featured=featured,
            display_order=display_order,
        )
    )
    article = await service.create(payload, image)
    return ApiResponse[NewsRead](
        code=status.HTTP_201_CREATED, message="News created successfully", data=NewsRead.model_validate(article)
    )


@router.put(
    "/admin/news/{news_id}",
    response_model=ApiResponse[NewsRead],
    summary="Update News Article",
    responses={404: {"description": "News not found"}},
)
async def update_news(
    news_id: str,
    _: AdminDep,
    service: NewsServiceDep,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    excerpt: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    featured: Optional[str] = Form(None),
    display_order: Optional[str] = Form(None, alias="displayOrder"),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[NewsRead]:
    payload = NewsUpdate.model_validate(
        form_values(
            title=title,
            content=content,
            excerpt=excerpt,
            category=category,
            author=author,
            date=date,
            featured=featured,
            display_order=display_order,
        )
    )
    article = await service.update(news_id, payload, image)
    return ApiResponse[NewsRead](message="News updated successfully", data=NewsRead.model_validate(article))


@router.delete(
    "/admin/news/{news_id}",
    response_model=ApiResponse[None],
    summary="Delete News Article",
    responses={404: {"description": "News not found"}},
)
async def delete_news(news_id: str, _: AdminDep, service: NewsServiceDep) -> ApiResponse[None]:
    await service.delete(news_id)
    return ApiResponse[None](message="News deleted successfully")
