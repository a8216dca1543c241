# run it with uvicorn contact_relay.main:app --reload
# or: python -m contact_relay.main
import logging

from dotenv import load_dotenv

from contact_relay.core.config import get_settings
from contact_relay.factory import configure_logging, create_app

# Load environment variables from .env file
load_dotenv()

configure_logging(get_settings())
logger = logging.getLogger(__name__)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"✅ Contact API Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
