"""
Database entity models organized by business domain.

Importing this package registers every table on ``Base.metadata``.
"""

from .catalog import Product, ProductCategory
from .content import Case, Document, Message, MessageStatus, News
from .gallery import Gallery
from .home import HeroSlide, HomeAbout, PageAbout
from .site_settings import SiteInfo, SiteMeta
from .users import User

__all__ = [
    "Case",
    "Document",
    "Gallery",
    "HeroSlide",
    "HomeAbout",
    "Message",
    "MessageStatus",
    "News",
    "PageAbout",
    "Product",
    "ProductCategory",
    "SiteInfo",
    "SiteMeta",
    "User",
]
