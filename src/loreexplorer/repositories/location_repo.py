"""Repository for saved locations."""

import logging

from sqlalchemy import select

from loreexplorer.domain.errors import StoreUnavailable
from loreexplorer.domain.location import SavedLocation
from loreexplorer.infrastructure.database import SessionFactory
from loreexplorer.infrastructure.models import SavedLocationModel

logger = logging.getLogger(__name__)


class LocationStore:
    """Persists saved locations and lists them by recency.

    Reads degrade to an empty list when the store is unconfigured or
    unreachable. Writes raise StoreUnavailable instead of dropping data.
    """

    def __init__(self, session_factory: SessionFactory | None) -> None:
        """Initialize store with an optional session factory.

        Args:
            session_factory: Factory for AsyncSession, or None if unconfigured
        """
        self.session_factory = session_factory

    @property
    def is_configured(self) -> bool:
        return self.session_factory is not None

    async def list_locations(self) -> list[SavedLocation]:
        """List saved locations, most recent first."""
        if self.session_factory is None:
            logger.warning("Location store is not configured. Returning no saved locations.")
            return []

        stmt = select(SavedLocationModel).order_by(
            SavedLocationModel.created_at.desc(),
            SavedLocationModel.id.desc(),
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                models = result.scalars().all()
        except Exception as e:
            logger.error(f"Error fetching saved locations: {e}")
            return []

        return [self._to_domain(m) for m in models]

    async def add_location(self, name: str, summary: str) -> SavedLocation:
        """Insert a saved location and return it with store-assigned fields.

        Args:
            name: Location name as entered by the user
            summary: AI-generated summary of the location

        Raises:
            StoreUnavailable: Store unconfigured or the write was rejected
        """
        if self.session_factory is None:
            raise StoreUnavailable("Location store is not configured. Cannot save location.")

        model = SavedLocationModel(name=name, summary=summary)
        try:
            async with self.session_factory() as session:
                try:
                    session.add(model)
                    # eager_defaults loads id and created_at during the flush
                    await session.flush()
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except Exception as e:
            logger.error(f"Error saving location '{name}': {e}")
            raise StoreUnavailable(f"Failed to save location '{name}'") from e

        logger.info(f"Saved location id={model.id}: {name}")
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: SavedLocationModel) -> SavedLocation:
        return SavedLocation(
            id=str(model.id),
            name=model.name,
            summary=model.summary,
            created_at=model.created_at,
        )
