from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from models import db
from repositories.result import StoreFailure, StoreResult, classify


class SqlRepository:
    """Shared CRUD for one mapped model.

    Every method finishes its own unit of work: writes commit, and any
    SQLAlchemy error is rolled back, logged and turned into an empty result.
    Bulk deletes called with ``commit=False`` only flush, so the next
    committing write of the same session carries them along (or rolls them back).
    """

    model = None
    # columns rewritten by update(); the primary key is never one of them
    mutable_columns = ()

    def _log_failure(self, operation, exc, failure=None):
        current_app.logger.warning(
            "%s.%s() failed (%s)",
            type(self).__name__,
            operation,
            failure.value if failure else "read",
            exc_info=exc,
        )

    def _query_all(self, operation, query):
        try:
            return query.all()
        except SQLAlchemyError as exc:
            db.session.rollback()
            self._log_failure(operation, exc)
            return []

    def _query_one(self, operation, query):
        try:
            return query.first()
        except SQLAlchemyError as exc:
            db.session.rollback()
            self._log_failure(operation, exc)
            return None

    def _write(self, operation, action, commit=True):
        try:
            value = action()
            if commit:
                db.session.commit()
            else:
                db.session.flush()
        except SQLAlchemyError as exc:
            db.session.rollback()
            failure = classify(exc)
            self._log_failure(operation, exc, failure)
            return StoreResult.failed(failure)
        return StoreResult.success(value)

    def find_all(self):
        return self._query_all("find_all", self.model.query.order_by(self.model.id))

    def find_by_id(self, entity_id):
        return self._query_one("find_by_id", self.model.query.filter_by(id=entity_id))

    def save(self, entity):
        def insert():
            db.session.add(entity)
            db.session.flush()
            return entity

        return self._write("save", insert)

    def update(self, entity):
        def update_row():
            values = {column: getattr(entity, column) for column in self.mutable_columns}
            return self.model.query.filter_by(id=entity.id).update(values)

        result = self._write("update", update_row)
        if result and result.value != 1:
            return StoreResult.failed(StoreFailure.MISSING)
        if result:
            result.value = entity
        return result

    def delete_by_id(self, entity_id):
        return self._delete_where("delete_by_id", required=True, id=entity_id)

    def _delete_where(self, operation, required=False, commit=True, **criteria):
        result = self._write(
            operation, lambda: self.model.query.filter_by(**criteria).delete(), commit=commit
        )
        if required and result and result.value == 0:
            return StoreResult.failed(StoreFailure.MISSING)
        return result
