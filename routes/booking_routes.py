from flask import Blueprint, abort, current_app, redirect, render_template, request, url_for
from marshmallow import ValidationError

from errors import InvalidArgumentError, NotFoundError, SeatTakenError
from routes.context import login_required_view, with_session_user
from schemas import ticket_schema
from services import ShowService, TicketService

booking_bp = Blueprint("shows", __name__)

show_service = ShowService()
ticket_service = TicketService()

SEAT_MESSAGES = {
    "taken": "This seat has already been booked, please choose another one.",
    "invalid": "Please choose a row and a seat inside the hall.",
}


@booking_bp.route("/")
def index():
    return redirect(url_for("shows.show_list"))


@booking_bp.route("/shows")
@with_session_user
def show_list(session_user):
    return render_template("shows.html", shows=show_service.find_all(), session_user=session_user)


@booking_bp.route("/shows/<int:show_id>")
@with_session_user
def show_detail(show_id, session_user):
    try:
        show = show_service.find_by_id(show_id)
    except NotFoundError:
        return "Show not found", 404

    return render_template(
        "show.html",
        show=show,
        seats=ticket_service.seat_map(show),
        error_message=SEAT_MESSAGES.get(request.args.get("seat")),
        session_user=session_user,
    )


@booking_bp.route("/shows/<int:show_id>/tickets", methods=["POST"])
@login_required_view
def reserve_ticket(show_id, session_user):
    try:
        payload = ticket_schema.load(request.form.to_dict())
    except ValidationError:
        return redirect(url_for("shows.show_detail", show_id=show_id, seat="invalid"))

    try:
        ticket = ticket_service.reserve(show_id, payload["row"], payload["cell"], session_user)
    except NotFoundError:
        return "Show not found", 404
    except SeatTakenError as exc:
        current_app.logger.info("Booking rejected for user %s: %s", session_user.id, exc)
        return redirect(url_for("shows.show_detail", show_id=show_id, seat="taken"))
    except InvalidArgumentError as exc:
        current_app.logger.info("Booking rejected for user %s: %s", session_user.id, exc)
        return redirect(url_for("shows.show_detail", show_id=show_id, seat="invalid"))

    current_app.logger.info("User %s booked ticket %s", session_user.id, ticket.id)
    return redirect(url_for("shows.my_tickets", booked=ticket.id))


@booking_bp.route("/tickets")
@login_required_view
def my_tickets(session_user):
    tickets = ticket_service.find_all_by_user_id(session_user.id)
    shows = {show.id: show for show in show_service.find_all()}
    return render_template(
        "tickets.html",
        tickets=tickets,
        shows=shows,
        booked=request.args.get("booked", type=int),
        session_user=session_user,
    )


@booking_bp.route("/tickets/<int:ticket_id>/cancel", methods=["POST"])
@login_required_view
def cancel_ticket(ticket_id, session_user):
    # Cancel a ticket owned by the session user; admins may cancel any ticket
    try:
        ticket = ticket_service.find_by_id(ticket_id)
    except NotFoundError:
        abort(404)
    if not session_user.is_admin and ticket.user_id != session_user.id:
        abort(403)

    try:
        ticket_service.delete_by_id(ticket_id)
    except NotFoundError:
        abort(404)
    return redirect(url_for("shows.my_tickets"))
