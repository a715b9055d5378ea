from __future__ import annotations

import logging
from typing import Optional

from src.core.config import get_settings
from src.core.errors import NotFoundError
from src.models.hotel_operations import HotelRecord
from src.repositories.hotel_repository import HotelRepository


logger = logging.getLogger(__name__)


class HotelDirectoryService:
    def __init__(self, repository: HotelRepository) -> None:
        self.repository = repository
        self.settings = get_settings()

    def get_hotel(self, hotel_id: str) -> HotelRecord:
        hotel = self.repository.get_hotel(hotel_id)
        if not hotel:
            raise NotFoundError("Hotel not found")
        return hotel

    def ensure_default_hotel(self) -> HotelRecord:
        """Return the default hotel, creating it on first use. Safe to call repeatedly."""
        slug = self.settings.default_hotel_slug
        existing = self.repository.get_hotel_by_slug(slug)
        if existing:
            return existing

        created = self.repository.insert_hotel_if_missing(
            {
                "slug": slug,
                "name": self.settings.default_hotel_name,
                "rating": self.settings.default_hotel_rating,
            }
        )
        if created:
            logger.info("created default hotel %s (%s)", created.id, slug)
            return created
        # Lost the insert race; the row exists now.
        winner = self.repository.get_hotel_by_slug(slug)
        if not winner:
            raise NotFoundError(f"Default hotel {slug} could not be resolved")
        return winner

    def resolve_hotel(self, hotel_id: Optional[str]) -> HotelRecord:
        if hotel_id:
            return self.get_hotel(hotel_id)
        return self.ensure_default_hotel()
