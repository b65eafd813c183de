"""Business configuration domain - operating hours, open days and service catalog"""

from .router import router
from .service import BusinessConfigService

__all__ = ["router", "BusinessConfigService"]
