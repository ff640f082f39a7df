from errors import InvalidArgumentError, NotFoundError, SeatTakenError
from models import Ticket
from repositories import ShowRepository, TicketRepository
from services.common import raise_for_failure


class TicketService:
    def __init__(self, ticket_repository=None, show_repository=None):
        self.ticket_repository = ticket_repository or TicketRepository()
        self.show_repository = show_repository or ShowRepository()

    def find_all(self):
        return self.ticket_repository.find_all()

    def find_by_id(self, ticket_id):
        ticket = self.ticket_repository.find_by_id(ticket_id)
        if ticket is None:
            raise NotFoundError(f"Ticket with id = {ticket_id} not found")
        return ticket

    def find_all_by_show_id(self, show_id):
        return self.ticket_repository.find_all_tickets_by_show_id(show_id)

    def find_all_by_user_id(self, user_id):
        return self.ticket_repository.find_all_tickets_by_user_id(user_id)

    def save(self, ticket):
        result = self.ticket_repository.save(ticket)
        raise_for_failure(
            result,
            f"Row {ticket.row}, seat {ticket.cell} is already booked",
            conflict_error=SeatTakenError,
        )
        return result.value

    def reserve(self, show_id, row, cell, user):
        show = self.show_repository.find_by_id(show_id)
        if show is None:
            raise NotFoundError(f"Show with id = {show_id} not found")
        if not (1 <= row <= show.rows and 1 <= cell <= show.cells):
            raise InvalidArgumentError(f"Row {row}, seat {cell} is not in hall {show.hall}")
        return self.save(Ticket(show_id=show.id, user_id=user.id, row=row, cell=cell))

    def update(self, ticket):
        result = self.ticket_repository.update(ticket)
        raise_for_failure(
            result,
            f"Row {ticket.row}, seat {ticket.cell} is already booked",
            missing_message=f"Ticket with id = {ticket.id} not found",
            conflict_error=SeatTakenError,
        )
        return True

    def delete_by_id(self, ticket_id):
        result = self.ticket_repository.delete_by_id(ticket_id)
        raise_for_failure(result, f"Ticket with id = {ticket_id} not found")
        return True

    def delete_tickets_by_show_id(self, show_id):
        result = self.ticket_repository.delete_tickets_by_show_id(show_id)
        raise_for_failure(result, f"Tickets of show {show_id} were not deleted")
        return result.value

    def seat_map(self, show):
        """Rows of ``(cell, taken)`` pairs for the show's hall."""
        taken = {(t.row, t.cell) for t in self.find_all_by_show_id(show.id)}
        return [
            [(cell, (row, cell) in taken) for cell in range(1, show.cells + 1)]
            for row in range(1, show.rows + 1)
        ]
