from fastapi import HTTPException, status

from app.core.exceptions import (
    EnergyMonitorError,
    NotFoundError,
    ConflictError,
    PermissionDeniedError,
)

_STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
}


def http_error(error: EnergyMonitorError) -> HTTPException:
    """Translate a service error into the matching HTTP error"""
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error"
    )
