"""
Service Dependencies.

FastAPI dependency providers that build request-scoped services on top of
the request's database session, plus the admin authentication dependency.
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from sitecms.core.database import get_session
from sitecms.core.database.repositories import (
    CaseRepository,
    DocumentRepository,
    GalleryRepository,
    HeroSlideRepository,
    MessageRepository,
    NewsRepository,
    ProductCategoryRepository,
    ProductRepository,
)
from sitecms.core.models.io.auth import TokenPayload
from sitecms.server.exception_handlers.errors import UnauthorizedError

from .auth import AuthService
from .catalog import ProductCategoryService, ProductService
from .content import CaseService, DocumentService, MessageService, NewsService
from .gallery import GalleryService
from .home import HeroSlideService, PageContentService
from .site_settings import SiteSettingsService
from .uploads import UploadManager, get_upload_manager

SessionDep = Annotated[AsyncSession, Depends(get_session)]
UploadManagerDep = Annotated[UploadManager, Depends(get_upload_manager)]

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(session: SessionDep) -> AuthService:
    return AuthService(session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_admin(
    auth: AuthServiceDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenPayload:
    """
    Authenticate the request from its bearer token.

    Every admin request is authenticated on its own; no session state is kept.

    Raises:
        UnauthorizedError: No bearer token, or the token is invalid or expired.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("No token provided")
    return auth.verify_token(credentials.credentials)


AdminDep = Annotated[TokenPayload, Depends(get_current_admin)]


def get_product_service(session: SessionDep, uploads: UploadManagerDep) -> ProductService:
    return ProductService(ProductRepository(session), ProductCategoryRepository(session), uploads)


def get_category_service(session: SessionDep) -> ProductCategoryService:
    return ProductCategoryService(ProductCategoryRepository(session))


def get_case_service(session: SessionDep, uploads: UploadManagerDep) -> CaseService:
    return CaseService(CaseRepository(session), uploads)


def get_news_service(session: SessionDep, uploads: UploadManagerDep) -> NewsService:
    return NewsService(NewsRepository(session), uploads)


def get_document_service(session: SessionDep, uploads: UploadManagerDep) -> DocumentService:
    return DocumentService(DocumentRepository(session), uploads)


def get_message_service(session: SessionDep) -> MessageService:
    return MessageService(MessageRepository(session))


def get_gallery_service(session: SessionDep, uploads: UploadManagerDep) -> GalleryService:
    return GalleryService(GalleryRepository(session), uploads)


def get_hero_slide_service(session: SessionDep, uploads: UploadManagerDep) -> HeroSlideService:
    return HeroSlideService(HeroSlideRepository(session), uploads)


def get_page_content_service(session: SessionDep, uploads: UploadManagerDep) -> PageContentService:
    return PageContentService(session, uploads)


def get_site_settings_service(session: SessionDep) -> SiteSettingsService:
    return SiteSettingsService(session)


ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
CategoryServiceDep = Annotated[ProductCategoryService, Depends(get_category_service)]
CaseServiceDep = Annotated[CaseService, Depends(get_case_service)]
NewsServiceDep = Annotated[NewsService, Depends(get_news_service)]
DocumentServiceDep = Annotated[DocumentService, Depends(get_document_service)]
MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]
GalleryServiceDep = Annotated[GalleryService, Depends(get_gallery_service)]
HeroSlideServiceDep = Annotated[HeroSlideService, Depends(get_hero_slide_service)]
PageContentServiceDep = Annotated[PageContentService, Depends(get_page_content_service)]
SiteSettingsServiceDep = Annotated[SiteSettingsService, Depends(get_site_settings_service)]
