"""
services/ - Domain Service Layer
================================
Services wrap the repositories, turn absent records and failed writes into
domain errors (see ``errors.py``) and enforce the booking rules.
"""
from services.show_service import ShowService
from services.ticket_service import TicketService
from services.user_service import RegistrationCheck, UserService

__all__ = ["RegistrationCheck", "ShowService", "TicketService", "UserService"]
