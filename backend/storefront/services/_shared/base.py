# storefront/services/_shared/base.py
from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from storefront.core import errors as api_errors
from storefront.services._shared.errors import (
    AlreadySavedError,
    AuthenticationError,
    ConflictError,
    MailDeliveryError,
    NotFoundError,
    RefreshRejectedError,
    ServiceError,
    UserExistsError,
)
from storefront.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Centralize error translation.
    * Provide a single clock so tests can pin "now".

    Notes
    -----
    - Services must never touch the global session; always use a Unit of Work.
    - Services receive their configuration explicitly (constructor kwargs).
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize the base service.

        :param clock: Callable returning the current UTC instant.
        :type clock: Callable[[], datetime] | None
        """
        self._clock = clock or (lambda: datetime.now(UTC))

    def now_utc(self) -> datetime:
        return self._clock()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW instance.
        :rtype: SQLAlchemyUnitOfWork
        """
        return SQLAlchemyUnitOfWork()

    def ro_uow(self) -> SQLAlchemyReadOnlyUnitOfWork:
        """
        Create a read-only Unit of Work.

        :returns: Read-only UoW instance.
        :rtype: SQLAlchemyReadOnlyUnitOfWork
        """
        return SQLAlchemyReadOnlyUnitOfWork()

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        Status codes follow the storefront's published contract: duplicate
        registrations and saved items are ``400``, duplicate addresses
        ``409``.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound(str(exc))

        if isinstance(exc, UserExistsError | AlreadySavedError):
            # → 400 (legacy precedent)
            return api_errors.BadRequest(str(exc), code="conflict")

        if isinstance(exc, ConflictError):
            # → 409 Conflict
            return api_errors.Conflict(str(exc))

        if isinstance(exc, AuthenticationError):
            # → 401 Unauthorized
            return api_errors.Unauthorized(str(exc))

        if isinstance(exc, RefreshRejectedError):
            # → 403 Forbidden
            return api_errors.Forbidden(str(exc))

        if isinstance(exc, MailDeliveryError):
            # → 500, transport failures are not the client's fault
            return api_errors.InternalFailure(str(exc))

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.BadRequest(str(exc))

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
