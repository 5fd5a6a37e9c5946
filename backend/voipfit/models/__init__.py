"""SQLAlchemy model package."""

from voipfit.models.site_content import SiteContent
from voipfit.models.contact_message import ContactMessage
from voipfit.models.news_article import NewsArticle
from voipfit.models.service import Service
from voipfit.models.carousel_image import CarouselImage
from voipfit.models.admin_user import AdminUser

__all__ = [
    "SiteContent",
    "ContactMessage",
    "NewsArticle",
    "Service",
    "CarouselImage",
    "AdminUser",
]
