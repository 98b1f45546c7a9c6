"""Run the API with uvicorn: python -m velora_backend"""
# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings
from .main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
