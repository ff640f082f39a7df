import os
from datetime import datetime, time, timedelta

from app import create_app
from errors import InvalidArgumentError
from models import Show, User
from services import ShowService, UserService

seed_shows = [
    ("Wicked: For Good", "Hall 1", time(14, 0)),
    ("Zootopia 2", "Hall 2", time(17, 30)),
    ("Predator: Badlands", "Hall 1", time(20, 0)),
]

app = create_app()

with app.app_context():
    user_service = UserService()
    show_service = ShowService()

    # ------------------------------
    # Seed Admin User
    # ------------------------------
    admin_email = os.getenv("ADMIN_EMAIL", "admin@cinema.local")
    admin_phone = os.getenv("ADMIN_PHONE", "+10000000000")
    admin_password = os.getenv("ADMIN_PASSWORD", "Admin12345")

    admin = User(username="admin", email=admin_email, phone=admin_phone, role="admin")
    try:
        user_service.register(admin, admin_password)
        print("Admin user created!")
    except InvalidArgumentError:
        print("Admin user already exists")

    # ------------------------------
    # Seed Shows
    # ------------------------------
    tomorrow = datetime.now().date() + timedelta(days=1)
    existing = {(show.title, show.hall) for show in show_service.find_all()}
    for title, hall, start in seed_shows:
        if (title, hall) in existing:
            print(f"Skipping {title} (already in DB)")
            continue

        show_service.save(Show(
            title=title,
            description="",
            hall=hall,
            start_at=datetime.combine(tomorrow, start),
            rows=8,
            cells=12,
        ))
        print(f"Added show: {title}")

    print("Seeding complete!")
