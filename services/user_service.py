import enum

from flask import current_app

from errors import InvalidArgumentError, NotFoundError
from repositories import TicketRepository, UserRepository
from security import hash_password, verify_password
from services.common import raise_for_failure


class RegistrationCheck(enum.Enum):
    OK = "ok"
    PASSWORD_MISMATCH = "password"
    DUPLICATE_ACCOUNT = "account"


class UserService:
    def __init__(self, user_repository=None, ticket_repository=None):
        self.user_repository = user_repository or UserRepository()
        self.ticket_repository = ticket_repository or TicketRepository()

    def find_all(self):
        return self.user_repository.find_all()

    def find_by_id(self, user_id):
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with id = {user_id} not found")
        return user

    def save(self, user):
        result = self.user_repository.save(user)
        raise_for_failure(result, "User was not saved")
        return result.value

    def register(self, user, password):
        user.password_hash = hash_password(password)
        return self.save(user)

    def update(self, user):
        result = self.user_repository.update(user)
        raise_for_failure(
            result,
            "A user with this email or phone number is already registered",
            missing_message=f"User with id = {user.id} not found",
        )
        return True

    def delete_by_id(self, user_id):
        tickets = self.ticket_repository.delete_tickets_by_user_id(user_id, commit=False)
        raise_for_failure(tickets, f"Tickets of user {user_id} were not deleted")
        result = self.user_repository.delete_by_id(user_id)
        raise_for_failure(result, f"User with id = {user_id} not found")
        current_app.logger.info("Deleted user %s and %s ticket(s)", user_id, tickets.value)
        return True

    def find_user_by_email(self, email):
        user = self.user_repository.find_user_by_email(email)
        if user is None:
            raise NotFoundError(f"User with email = {email} not found")
        return user

    def find_user_by_phone(self, phone):
        user = self.user_repository.find_user_by_phone(phone)
        if user is None:
            raise NotFoundError(f"User with phone = {phone} not found")
        return user

    def validate_user_login(self, email, password):
        """Return the stored user when ``password`` matches its hash.

        Raises NotFoundError for an unknown email and InvalidArgumentError for a
        wrong password.
        """
        user = self.find_user_by_email(email)
        if not verify_password(password, user.password_hash):
            raise InvalidArgumentError("Password is incorrect")
        return user

    def validate_user_reg(self, user, password, repassword):
        """Check a registration before saving it.

        The password confirmation is checked first, then whether the email or
        phone already belongs to a different user.
        """
        if password != repassword:
            return RegistrationCheck.PASSWORD_MISMATCH
        for existing in (
            self.user_repository.find_user_by_email(user.email),
            self.user_repository.find_user_by_phone(user.phone),
        ):
            if existing is not None and existing.id != user.id:
                return RegistrationCheck.DUPLICATE_ACCOUNT
        return RegistrationCheck.OK
