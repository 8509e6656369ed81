"""Users module"""

from .models import User, Role
from .auth import AuthService, TokenData, get_current_user, require_retailer, require_wholesaler

__all__ = [
    "User",
    "Role",
    "AuthService",
    "TokenData",
    "get_current_user",
    "require_retailer",
    "require_wholesaler",
]
