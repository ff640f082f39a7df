from models import Show
from repositories.base import SqlRepository


class ShowRepository(SqlRepository):
    model = Show
    mutable_columns = ("title", "description", "hall", "start_at", "rows", "cells")

    def find_all(self):
        return self._query_all("find_all", Show.query.order_by(Show.start_at, Show.id))
