"""API v1 blueprint package bundling the storefront routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .addresses import bp as addresses_bp  # noqa: E402
from .auth import bp as auth_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .saved_items import bp as saved_items_bp  # noqa: E402
from .users import bp as users_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_base). Storefront clients
# call the legacy unversioned paths, so every blueprint mounts at the base.
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),
    (auth_bp, ""),
    (users_bp, ""),
    (addresses_bp, ""),
    (saved_items_bp, ""),
]
