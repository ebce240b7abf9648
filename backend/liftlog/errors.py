# liftlog/errors.py
"""
Typed conditions raised by the repositories.

Routers let these propagate; create_app() installs the handlers that turn
them into HTTP responses. Anything else coming out of SQLAlchemy is treated
as a storage failure and reported generically.
"""


class DomainError(Exception):
    status_code = 400
    default_detail = "Bad request"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFoundError(DomainError):
    status_code = 404
    default_detail = "Not found"


class AccessDeniedError(DomainError):
    status_code = 403
    default_detail = "Access denied"


class AlreadyExistsError(DomainError):
    status_code = 409
    default_detail = "Already exists"
