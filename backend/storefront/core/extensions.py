"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
migrate = Migrate(render_as_batch=True)


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, migrations and the outgoing mailer.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`storefront.models` package to ensure SQLAlchemy metadata is
        ready for migrations.
    """
    db.init_app(app)

    # Ensure models are imported so Alembic sees metadata
    from storefront import models as _models  # noqa: F401

    migrate.init_app(app, db)

    app.extensions["mailer"] = build_mailer(app)


def build_mailer(app: Flask):
    """Instantiate the mail adapter selected by ``MAIL_BACKEND``."""
    backend = str(app.config.get("MAIL_BACKEND", "smtp")).strip().lower()
    if backend == "memory":
        from storefront.services._shared.ports.mailer import InMemoryMailer

        return InMemoryMailer()
    if backend == "smtp":
        from storefront.infra.mail.smtp_mailer import SMTPMailer, SMTPSettings

        return SMTPMailer(
            SMTPSettings(
                host=app.config["SMTP_HOST"],
                port=int(app.config["SMTP_PORT"]),
                username=app.config.get("SMTP_USERNAME"),
                password=app.config.get("SMTP_PASSWORD"),
                start_tls=bool(app.config.get("SMTP_STARTTLS", True)),
                timeout=float(app.config.get("SMTP_TIMEOUT", 30)),
            )
        )
    raise RuntimeError(f"Unknown MAIL_BACKEND {backend!r}")


def get_mailer(app: Flask):
    """Return the mailer bound by :func:`init_app`."""
    mailer = app.extensions.get("mailer")
    if mailer is None:
        raise RuntimeError("Mailer is not initialized. Call init_app() first.")
    return mailer
