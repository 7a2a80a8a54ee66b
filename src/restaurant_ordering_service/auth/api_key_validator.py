"""Shared admin key validation for the admin endpoints.

The admin panel is protected by a single shared secret, configured through
ADMIN_API_KEY and sent by the panel in the X-API-Key header.
"""

import hmac


class AdminKeyValidator:
    """Validates admin keys against the configured set of shared keys."""

    def __init__(self, api_keys: list[str]) -> None:
        """Initialize validator with the accepted admin keys.

        Args:
            api_keys: Accepted admin key strings

        Raises:
            ValueError: If api_keys is empty
        """
        if not api_keys:
            raise ValueError("At least one admin key must be provided")

        self.api_keys = tuple(api_keys)

    def validate(self, api_key: str) -> bool:
        """Check a presented key against every configured key.

        Args:
            api_key: The key from the request

        Returns:
            bool: True if it matches a configured key, False otherwise
        """
        presented = api_key.encode()
        return any(hmac.compare_digest(presented, key.encode()) for key in self.api_keys)
