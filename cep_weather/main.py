"""Main FastAPI application entry point."""

from dotenv import load_dotenv

from cep_weather.config import get_settings
from cep_weather.core.app_factory import create_app
from cep_weather.logging_config import setup_logging

# Load environment variables from .env file in the working directory
load_dotenv()

settings = get_settings()

# Configure structured logging (JSON to file + console)
setup_logging(settings.log_level, settings.log_dir)

app = create_app(settings)


def run() -> None:
    """Serve the application with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
