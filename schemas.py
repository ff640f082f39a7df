import re
from typing import Any, Dict

from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_load, validates, validate


def _strip_fields(data, names):
    for name in names:
        value = data.get(name)
        if isinstance(value, str):
            data[name] = value.strip()
    return data


def error_list(exc: ValidationError):
    """Flatten marshmallow messages into ``[{"field": ..., "msg": ...}]``."""
    errors = []
    for field, messages in (exc.messages or {}).items():
        for message in messages:
            errors.append({"field": field, "msg": message})
    return errors


class RegistrationSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    email = fields.Email(required=True, validate=validate.Length(max=120))
    phone = fields.Str(required=True)
    # only presence here; password == repassword is decided by UserService.validate_user_reg
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=1))
    repassword = fields.Str(required=True, load_only=True)

    @pre_load
    def strip_fields(self, data: Dict[str, Any], **kwargs):
        return _strip_fields(dict(data), ("username", "email", "phone"))

    @validates("phone")
    def validate_phone(self, value: str, **kwargs):
        if not re.fullmatch(r"\+?[0-9]{3,15}", value):
            raise ValidationError("Phone may only contain 3 to 15 digits and a leading +")


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=1))

    @pre_load
    def strip_email(self, data: Dict[str, Any], **kwargs):
        return _strip_fields(dict(data), ("email",))


class UserSchema(Schema):
    id = fields.Int(dump_only=True)
    username = fields.Str()
    email = fields.Email()
    phone = fields.Str()
    role = fields.Str()


class ShowSchema(Schema):
    id = fields.Int(dump_only=True)
    title = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    description = fields.Str(load_default="")
    hall = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    start_at = fields.DateTime(required=True)
    rows = fields.Int(required=True, strict=True, validate=validate.Range(min=1, max=50))
    cells = fields.Int(required=True, strict=True, validate=validate.Range(min=1, max=50))

    @pre_load
    def strip_title(self, data: Dict[str, Any], **kwargs):
        return _strip_fields(dict(data), ("title", "hall"))


class TicketSchema(Schema):
    id = fields.Int(dump_only=True)
    show_id = fields.Int(dump_only=True)
    user_id = fields.Int(dump_only=True)
    row = fields.Int(required=True, validate=validate.Range(min=1))
    cell = fields.Int(required=True, validate=validate.Range(min=1))

    class Meta:
        unknown = EXCLUDE


registration_schema = RegistrationSchema()
login_schema = LoginSchema()
user_schema = UserSchema()
show_schema = ShowSchema()
ticket_schema = TicketSchema()
