"""API routers package"""

from . import vapi

__all__ = ["vapi"]
