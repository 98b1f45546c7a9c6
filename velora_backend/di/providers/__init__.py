from .settings_provider import SettingsProvider
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .review_provider import ReviewProvider


__all__ = [
    "SettingsProvider",
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "ReviewProvider",
]
