from flask import Blueprint, current_app, redirect, render_template, request, url_for
from flask_jwt_extended import create_access_token, set_access_cookies, unset_jwt_cookies
from marshmallow import ValidationError

from errors import InvalidArgumentError, NotFoundError
from models import User
from routes.context import user_service, with_session_user
from schemas import error_list, login_schema, registration_schema
from services import RegistrationCheck

auth_bp = Blueprint("auth", __name__)

PASSWORD_MISMATCH_MESSAGE = "Passwords must match!"
ACCOUNT_EXISTS_MESSAGE = "A user with this email or phone number is already registered!"
LOGIN_FAILED_MESSAGE = "Wrong email or password"


@auth_bp.route("/registration", methods=["GET"])
@with_session_user
def registration_page(session_user):
    error_message = None
    if request.args.get("password") is not None:
        error_message = PASSWORD_MISMATCH_MESSAGE
    elif request.args.get("account") is not None:
        error_message = ACCOUNT_EXISTS_MESSAGE

    form = {}
    if session_user is not None:
        form = {
            "username": session_user.username,
            "email": session_user.email,
            "phone": session_user.phone,
        }
    return render_template(
        "registration.html",
        error_message=error_message,
        errors=[],
        form=form,
        session_user=session_user,
    )


@auth_bp.route("/registration", methods=["POST"])
@with_session_user
def registration_save(session_user):
    form = request.form.to_dict()
    try:
        payload = registration_schema.load(form)
    except ValidationError as exc:
        form.pop("password", None)
        form.pop("repassword", None)
        return render_template(
            "registration.html",
            error_message=None,
            errors=error_list(exc),
            form=form,
            session_user=session_user,
        ), 400

    user = User(username=payload["username"], email=payload["email"], phone=payload["phone"])
    check = user_service.validate_user_reg(user, payload["password"], payload["repassword"])
    if check is RegistrationCheck.PASSWORD_MISMATCH:
        current_app.logger.info("Registration rejected for %s: passwords differ", user.email)
        return redirect(url_for("auth.registration_page", password="true"))
    if check is RegistrationCheck.DUPLICATE_ACCOUNT:
        current_app.logger.info("Registration rejected for %s: account exists", user.email)
        return redirect(url_for("auth.registration_page", account="true"))

    try:
        user_service.register(user, payload["password"])
    except InvalidArgumentError as exc:
        # another request inserted the same email or phone after the check
        current_app.logger.info("Registration rejected for %s: %s", user.email, exc)
        return redirect(url_for("auth.registration_page", account="true"))
    return redirect(url_for("auth.login"))


@auth_bp.route("/login", methods=["GET"])
@with_session_user
def login(session_user):
    error_message = LOGIN_FAILED_MESSAGE if request.args.get("fail") is not None else None
    return render_template(
        "login.html", error_message=error_message, errors=[], form={}, session_user=session_user
    )


@auth_bp.route("/login", methods=["POST"])
def login_submit():
    form = request.form.to_dict()
    try:
        payload = login_schema.load(form)
    except ValidationError as exc:
        form.pop("password", None)
        return render_template(
            "login.html", error_message=None, errors=error_list(exc), form=form, session_user=None
        ), 400

    try:
        user = user_service.validate_user_login(payload["email"], payload["password"])
    except (NotFoundError, InvalidArgumentError) as exc:
        current_app.logger.info("Login failed for %s: %s", payload["email"], exc)
        response = redirect(url_for("auth.login", fail="true"))
        unset_jwt_cookies(response)
        return response

    token = create_access_token(identity=str(user.id))
    response = redirect(url_for("shows.show_list"))
    set_access_cookies(response, token)
    return response


@auth_bp.route("/logout", methods=["GET"])
def logout():
    response = redirect(url_for("auth.login"))
    unset_jwt_cookies(response)
    return response
