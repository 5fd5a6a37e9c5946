"""Service layer package."""

from voipfit.services import (
    auth_service,
    content_service,
    contact_service,
    news_service,
    catalog_service,
    carousel_service,
    seed_service,
)
