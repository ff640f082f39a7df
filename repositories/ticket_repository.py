from models import Ticket
from repositories.base import SqlRepository


class TicketRepository(SqlRepository):
    model = Ticket
    mutable_columns = ("show_id", "user_id", "row", "cell")

    def find_all_tickets_by_show_id(self, show_id):
        query = Ticket.query.filter_by(show_id=show_id).order_by(Ticket.row, Ticket.cell)
        return self._query_all("find_all_tickets_by_show_id", query)

    def find_all_tickets_by_user_id(self, user_id):
        query = Ticket.query.filter_by(user_id=user_id).order_by(Ticket.id)
        return self._query_all("find_all_tickets_by_user_id", query)

    def delete_tickets_by_show_id(self, show_id, commit=True):
        # succeeds with the number of removed rows, zero included
        return self._delete_where("delete_tickets_by_show_id", commit=commit, show_id=show_id)

    def delete_tickets_by_user_id(self, user_id, commit=True):
        return self._delete_where("delete_tickets_by_user_id", commit=commit, user_id=user_id)
