"""User-facing messages, one catalog per supported locale"""

# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class Messages:
    """Catalog of every message the API returns to clients"""
    # Registration
    register_fields_required: str
    password_too_short: str
    invalid_email: str
    user_exists: str
    register_failed: str

    # Login
    login_fields_required: str
    invalid_credentials: str
    login_failed: str

    # Identity check
    authorization_required: str
    token_expired: str
    invalid_token: str
    user_not_found: str
    token_check_failed: str

    # Reviews
    review_fields_required: str
    author_too_short: str
    text_too_short: str
    review_save_failed: str
    reviews_load_failed: str

    # Generic
    invalid_request: str
    route_not_found: str
    internal_error: str


EN = Messages(
    register_fields_required="All fields are required",
    password_too_short="Password must be at least 6 characters long",
    invalid_email="Invalid email format",
    user_exists="User with this email already exists",
    register_failed="An error occurred during registration",
    login_fields_required="Email and password are required",
    invalid_credentials="Invalid credentials",
    login_failed="An error occurred during login",
    authorization_required="Authorization required",
    token_expired="Token expired",
    invalid_token="Invalid token",
    user_not_found="User not found",
    token_check_failed="An error occurred while verifying the token",
    review_fields_required="All fields are required",
    author_too_short="Name must be at least 2 characters long",
    text_too_short="Review text must be at least 10 characters long",
    review_save_failed="Failed to save review",
    reviews_load_failed="Failed to load reviews",
    invalid_request="Invalid request body",
    route_not_found="Route not found",
    internal_error="Internal server error",
)

RU = Messages(
    register_fields_required="Все поля обязательны для заполнения",
    password_too_short="Пароль должен содержать минимум 6 символов",
    invalid_email="Неверный формат email",
    user_exists="Пользователь с таким email уже существует",
    register_failed="Произошла ошибка при регистрации",
    login_fields_required="Email и пароль обязательны",
    invalid_credentials="Неверные учетные данные",
    login_failed="Произошла ошибка при авторизации",
    authorization_required="Требуется авторизация",
    token_expired="Срок действия токена истек",
    invalid_token="Неверный токен",
    user_not_found="Пользователь не найден",
    token_check_failed="Произошла ошибка при проверке токена",
    review_fields_required="Все поля обязательны",
    author_too_short="Имя должно содержать минимум 2 символа",
    text_too_short="Текст отзыва должен содержать минимум 10 символов",
    review_save_failed="Не удалось сохранить отзыв",
    reviews_load_failed="Не удалось загрузить отзывы",
    invalid_request="Некорректное тело запроса",
    route_not_found="Маршрут не найден",
    internal_error="Внутренняя ошибка сервера",
)

CATALOGS = {
    "en": EN,
    "ru": RU,
}


def get_messages(locale: str) -> Messages:
    """
    Get the message catalog for a locale

    Args:
        locale: Locale code such as "en" or "ru"; region suffixes are ignored

    Returns:
        Matching catalog, English when the locale is unknown
    """
    language = (locale or "").split("-")[0].split("_")[0].lower()
    return CATALOGS.get(language, EN)
