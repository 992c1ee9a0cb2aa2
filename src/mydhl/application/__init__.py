"""
Application Layer - Use cases built on top of the domain and ports.

This layer contains:
- services/: Request builders that talk to the carrier API
"""

from .services import ShipmentService

__all__ = ["ShipmentService"]
