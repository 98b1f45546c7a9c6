from typing import TYPE_CHECKING
from ...core.config import Settings, get_settings
from ...core.messages import Messages, get_messages

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SettingsProvider:
    """Registers the process-wide settings and the message catalog for the configured locale"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()
        container.register_singleton(Settings, settings)
        container.register_singleton(Messages, get_messages(settings.locale))
