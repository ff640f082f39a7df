from flask import current_app

from errors import NotFoundError
from repositories import ShowRepository, TicketRepository
from services.common import raise_for_failure


class ShowService:
    def __init__(self, show_repository=None, ticket_repository=None):
        self.show_repository = show_repository or ShowRepository()
        self.ticket_repository = ticket_repository or TicketRepository()

    def find_all(self):
        return self.show_repository.find_all()

    def find_by_id(self, show_id):
        show = self.show_repository.find_by_id(show_id)
        if show is None:
            raise NotFoundError(f"Show with id = {show_id} not found")
        return show

    def save(self, show):
        result = self.show_repository.save(show)
        raise_for_failure(result, "Show was not saved")
        return result.value

    def update(self, show):
        result = self.show_repository.update(show)
        raise_for_failure(result, "Show was not updated", missing_message=f"Show with id = {show.id} not found")
        return True

    def delete_by_id(self, show_id):
        # tickets go first and commit with the show; the schema has no ON DELETE CASCADE
        tickets = self.ticket_repository.delete_tickets_by_show_id(show_id, commit=False)
        raise_for_failure(tickets, f"Tickets of show {show_id} were not deleted")
        result = self.show_repository.delete_by_id(show_id)
        raise_for_failure(result, f"Show with id = {show_id} not found")
        current_app.logger.info("Deleted show %s and %s ticket(s)", show_id, tickets.value)
        return True
