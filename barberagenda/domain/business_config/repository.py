"""Business configuration repository - Database operations for the config row"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...errors import ConfigError
from ...models import BUSINESS_CONFIG_KEY, BusinessConfig
from ...shared.persistence import upstream_guard

logger = logging.getLogger(__name__)


class BusinessConfigRepository:
    """Repository for the single business configuration row"""

    @staticmethod
    def find_config(db: Session) -> Optional[BusinessConfig]:
        with upstream_guard(db, "load business configuration"):
            return (
                db.query(BusinessConfig)
                .filter(BusinessConfig.key == BUSINESS_CONFIG_KEY)
                .first()
            )

    @staticmethod
    def get_config(db: Session) -> BusinessConfig:
        """Get the stored configuration; raises ConfigError when it was never initialized"""
        config = BusinessConfigRepository.find_config(db)
        if config is None:
            raise ConfigError("Business configuration not initialized")
        return config

    @staticmethod
    def create_config(db: Session, **fields) -> BusinessConfig:
        """Insert the configuration row, or return the row a concurrent request inserted first"""
        with upstream_guard(db, "initialize business configuration"):
            config = BusinessConfig(key=BUSINESS_CONFIG_KEY, **fields)
            db.add(config)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                logger.info("Business configuration was initialized by another request")
            else:
                db.refresh(config)
                return config

        return BusinessConfigRepository.get_config(db)

    @staticmethod
    def set_config(db: Session, **fields) -> BusinessConfig:
        """Create or merge the configuration row; fields left out keep their stored value"""
        with upstream_guard(db, "save business configuration"):
            config = (
                db.query(BusinessConfig)
                .filter(BusinessConfig.key == BUSINESS_CONFIG_KEY)
                .first()
            )
            if config is None:
                config = BusinessConfig(key=BUSINESS_CONFIG_KEY)
                db.add(config)

            for key, value in fields.items():
                if value is not None and hasattr(config, key):
                    setattr(config, key, value)

            db.commit()
            db.refresh(config)
            return config
