"""
Service-layer exceptions.

Services raise these instead of HTTPException so they stay usable outside
FastAPI (CLI, scripts). The API renders them as {"error": message}.
"""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ServiceError):
    status_code = 400


class ForbiddenError(ServiceError):
    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404
