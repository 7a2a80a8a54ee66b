"""FastAPI dependencies guarding the admin endpoints."""

from fastapi import HTTPException

from restaurant_ordering_service.auth.api_key_validator import AdminKeyValidator


def require_admin_key(x_api_key: str | None, validator: AdminKeyValidator) -> str:
    """Validate the X-API-Key header of an admin request.

    Args:
        x_api_key: Value of the X-API-Key header, if any
        validator: Validator holding the configured admin keys

    Returns:
        str: The validated key

    Raises:
        HTTPException: 401 if the key is missing or not accepted
    """
    if not x_api_key:
        raise HTTPException(status_code=401, detail="Missing admin key")

    if not validator.validate(x_api_key):
        raise HTTPException(status_code=401, detail="Invalid admin key")

    return x_api_key
