from models import User
from repositories.base import SqlRepository


class UserRepository(SqlRepository):
    model = User
    mutable_columns = ("username", "email", "phone", "password_hash", "role")

    def find_user_by_email(self, email):
        return self._query_one("find_user_by_email", User.query.filter_by(email=email))

    def find_user_by_phone(self, phone):
        return self._query_one("find_user_by_phone", User.query.filter_by(phone=phone))
