"""Dashboard domain - monthly booking statistics"""

from .router import router

__all__ = ["router"]
