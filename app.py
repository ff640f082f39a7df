import os

from dotenv import load_dotenv
from flask import Flask
from flask_jwt_extended import JWTManager

from models import db
from routes.auth_routes import auth_bp
from routes.booking_routes import booking_bp
from routes.user_routes import admin_bp

jwt = JWTManager()


def create_app(test_config=None):
    load_dotenv()

    app = Flask(__name__)
    # Configure database, defaults to a local SQLite file
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite:///cinema.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config['SECRET_KEY'] = os.getenv("SECRET_KEY")
    app.config["JWT_SECRET_KEY"] = os.getenv("JWT_SECRET_KEY")
    app.config["JWT_TOKEN_LOCATION"] = ["cookies", "headers"]
    app.config["JWT_COOKIE_SECURE"] = False
    app.config["JWT_COOKIE_CSRF_PROTECT"] = False
    app.config["PEPPER"] = os.getenv("PEPPER")
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")

    if test_config is not None:
        app.config.update(test_config)

    if not app.config["PEPPER"]:
        raise RuntimeError("PEPPER environment variable is not set.")

    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    jwt.init_app(app)
    app.register_blueprint(auth_bp)
    app.register_blueprint(booking_bp)
    app.register_blueprint(admin_bp)

    with app.app_context():
        db.create_all()

    return app


if __name__ == '__main__':
    create_app().run(debug=True)
