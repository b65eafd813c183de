"""Business configuration service - Business logic for operating hours and catalog"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...config import (
    DEFAULT_OPEN_WEEKDAYS,
    DEFAULT_OPERATING_END,
    DEFAULT_OPERATING_START,
    DEFAULT_SERVICES,
    DEFAULT_SLOT_INTERVAL_MINUTES,
)
from ...errors import ConfigError, NotFoundError, ValidationError
from ...models import BusinessConfig
from ..availability import to_minutes
from .repository import BusinessConfigRepository
from .schemas import BusinessConfigResponse, BusinessConfigUpdate, ServiceItem

logger = logging.getLogger(__name__)


def default_config() -> BusinessConfigResponse:
    return BusinessConfigResponse(
        operating_start=DEFAULT_OPERATING_START,
        operating_end=DEFAULT_OPERATING_END,
        slot_interval_minutes=DEFAULT_SLOT_INTERVAL_MINUTES,
        open_weekdays=list(DEFAULT_OPEN_WEEKDAYS),
        services=[ServiceItem(**s) for s in DEFAULT_SERVICES],
    )


def effective_interval(interval_minutes: Optional[int]) -> int:
    """Slot interval to hand to the calculator; non-positive values fall back to the default"""
    if not interval_minutes or interval_minutes <= 0:
        return DEFAULT_SLOT_INTERVAL_MINUTES
    return interval_minutes


class BusinessConfigService:
    """Service layer for business configuration"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BusinessConfigRepository()

    def get_config(self) -> BusinessConfigResponse:
        """Stored configuration merged over defaults, initializing the row on first use"""
        try:
            stored = self.repo.get_config(self.db)
        except ConfigError as e:
            logger.warning(f"⚠️ {e.message} - storing defaults")
            defaults = default_config()
            stored = self.repo.create_config(self.db, **self._to_fields(defaults))

        return self._merge_over_defaults(stored)

    def set_config(self, data: BusinessConfigUpdate) -> BusinessConfigResponse:
        """Merge a partial update into the current configuration and persist it"""
        current = self.get_config()
        merged = current.model_copy(update=data.model_dump(exclude_none=True))
        # model_copy skips validation, so nested catalog entries may still be dicts
        merged.services = [ServiceItem.model_validate(s) for s in merged.services]

        self._validate(merged)

        logger.info(
            f"🛠️ Saving business configuration: {merged.operating_start}-{merged.operating_end} "
            f"every {merged.slot_interval_minutes}min, days={merged.open_weekdays}"
        )
        stored = self.repo.set_config(self.db, **self._to_fields(merged))
        return self._merge_over_defaults(stored)

    def add_service(self, item: ServiceItem) -> BusinessConfigResponse:
        current = self.get_config()
        services = [s.model_dump() for s in current.services]
        services.append(item.model_dump())

        stored = self.repo.set_config(self.db, services=services)
        logger.info(f"✅ Service added to catalog: {item.name}")
        return self._merge_over_defaults(stored)

    def remove_service(self, index: int) -> BusinessConfigResponse:
        current = self.get_config()
        services = [s.model_dump() for s in current.services]
        if index < 0 or index >= len(services):
            raise NotFoundError("Service not found")

        removed = services.pop(index)
        stored = self.repo.set_config(self.db, services=services)
        logger.info(f"🗑️ Service removed from catalog: {removed['name']}")
        return self._merge_over_defaults(stored)

    def find_service(
        self, name: str, config: Optional[BusinessConfigResponse] = None
    ) -> Optional[ServiceItem]:
        """Catalog entry with this name, if any"""
        wanted = name.strip().lower()
        config = config or self.get_config()
        for service in config.services:
            if service.name.lower() == wanted:
                return service
        return None

    @staticmethod
    def _validate(config: BusinessConfigResponse) -> None:
        if to_minutes(config.operating_end) <= to_minutes(config.operating_start):
            raise ValidationError("Closing time must be later than opening time")
        if not config.open_weekdays:
            raise ValidationError("Select at least one open day")

    @staticmethod
    def _to_fields(config: BusinessConfigResponse) -> dict:
        return {
            "operating_start": config.operating_start,
            "operating_end": config.operating_end,
            "slot_interval_minutes": config.slot_interval_minutes,
            "open_weekdays": list(config.open_weekdays),
            "services": [s.model_dump() for s in config.services],
        }

    @staticmethod
    def _merge_over_defaults(stored: BusinessConfig) -> BusinessConfigResponse:
        defaults = default_config()
        services = stored.services if stored.services else [s.model_dump() for s in defaults.services]
        return BusinessConfigResponse(
            operating_start=stored.operating_start or defaults.operating_start,
            operating_end=stored.operating_end or defaults.operating_end,
            slot_interval_minutes=stored.slot_interval_minutes or defaults.slot_interval_minutes,
            open_weekdays=(
                stored.open_weekdays if stored.open_weekdays is not None else defaults.open_weekdays
            ),
            services=[ServiceItem(**s) for s in services],
            updated_at=stored.updated_at,
        )
