"""Application entrypoint for the dealership UI."""

from dotenv import find_dotenv, load_dotenv

from app.infrastructure.config.settings import Settings
from app.infrastructure.wiring.container import Container


def bootstrap() -> Container:
    """
    Load environment variables and wire the application.

    Returns:
        Container exposing the manage cars use case the UI binds to
    """
    # Load the working directory .env file, then read settings from the environment
    load_dotenv(find_dotenv(usecwd=True))
    return Container(Settings())
