import os
import uuid
from datetime import datetime, timedelta

import requests
from seleniumbase import BaseCase


class BookingFlowTests(BaseCase):
    base_url = os.getenv("E2E_BASE_URL", "http://localhost:5000").rstrip("/")
    # seeded by seed.py
    admin_email = os.getenv("ADMIN_EMAIL", "admin@cinema.local")
    admin_password = os.getenv("ADMIN_PASSWORD", "Admin12345")
    stored_email = None
    stored_password = "Password123"
    show_id = None

    # helper function that creates a show through the admin API
    def _create_show(self):
        admin = requests.Session()
        login_resp = admin.post(
            f"{self.base_url}/login",
            data={"email": self.admin_email, "password": self.admin_password},
            allow_redirects=False,
        )
        assert login_resp.status_code == 302, f"Admin login failed: {login_resp.status_code}"
        assert login_resp.headers["Location"].endswith("/shows"), "Admin login was rejected"

        payload = {
            "title": f"E2E_{uuid.uuid4().hex[:6]}",
            "hall": "Hall 1",
            "start_at": (datetime.now() + timedelta(days=2)).replace(microsecond=0).isoformat(),
            "rows": 3,
            "cells": 4,
        }
        resp = admin.post(f"{self.base_url}/api/shows", json=payload)
        assert resp.status_code == 201, f"Show creation failed: {resp.status_code} {resp.text}"
        return resp.json()["show"]

    def test_01_register_and_login(self):
        suffix = uuid.uuid4().hex[:8]
        email = f"booking_{suffix}@example.com"
        BookingFlowTests.stored_email = email

        # Register
        self.open(f"{self.base_url}/registration")
        self.type('input[name="username"]', f"booking_{suffix}")
        self.type('input[name="email"]', email)
        self.type('input[name="phone"]', str(uuid.uuid4().int)[:10])
        self.type('input[name="password"]', self.stored_password)
        self.type('input[name="repassword"]', self.stored_password)
        self.click('button[type="submit"]')
        self.wait_for_element_visible("#login-form", timeout=10)

        # Login
        self.type('input[name="email"]', email)
        self.type('input[name="password"]', self.stored_password)
        self.click('button[type="submit"]')
        self.assert_text("Now Showing", "body")

    def test_02_book_and_cancel_seat(self):
        email = BookingFlowTests.stored_email
        assert email, "Previous tests did not store an email."
        show = self._create_show()

        self.open(f"{self.base_url}/login")
        self.type('input[name="email"]', email)
        self.type('input[name="password"]', self.stored_password)
        self.click('button[type="submit"]')
        self.assert_text("Now Showing", "body")

        # Book row 2, seat 3
        self.open(f"{self.base_url}/shows/{show['id']}")
        self.assert_text(show["title"], "h1.page__title")
        self.type("#booking-form #row", "2")
        self.type("#booking-form #cell", "3")
        self.click("#booking-form button.booking-button")
        self.assert_text("Ticket booked successfully.", "#tickets-message")
        self.assert_text("Row 2, seat 3", ".ticket-card")

        # The same seat cannot be booked twice
        self.open(f"{self.base_url}/shows/{show['id']}")
        self.assert_element('.seat--taken[data-row="2"][data-cell="3"]')
        self.type("#booking-form #row", "2")
        self.type("#booking-form #cell", "3")
        self.click("#booking-form button.booking-button")
        self.assert_text("already been booked", "#form-message")

        # Cancel it again
        self.open(f"{self.base_url}/tickets")
        self.click(".ticket-card .ticket-card__button--cancel")
        self.assert_text("You have no tickets yet.", "main")
