"""Repository for catalog metadata rows."""

from sqlmodel import Session

from ..models.catalog import FspecConfig
from .base import BaseRepository


class ConfigRepository(BaseRepository[FspecConfig]):
    """Repository for the ``fspec_config`` table."""

    def __init__(self, session: Session):
        super().__init__(session, FspecConfig)

    def ensure(self, fspec_directory: str) -> tuple[FspecConfig, bool]:
        """Record ``fspec_directory`` unless it is already recorded. Never overwrites."""
        return self.create_if_absent(
            FspecConfig(fspec_directory=fspec_directory), fspec_directory=fspec_directory
        )

