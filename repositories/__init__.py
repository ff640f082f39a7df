"""
repositories/ - Data Access Layer
==================================
Each repository wraps the SQLAlchemy queries for one entity. Reads return
``None`` or ``[]`` when nothing is found or the store fails; writes return a
``StoreResult`` naming why they failed. No SQLAlchemy error leaves this package.
"""
from repositories.result import StoreFailure, StoreResult
from repositories.show_repository import ShowRepository
from repositories.ticket_repository import TicketRepository
from repositories.user_repository import UserRepository

__all__ = [
    "ShowRepository",
    "StoreFailure",
    "StoreResult",
    "TicketRepository",
    "UserRepository",
]
