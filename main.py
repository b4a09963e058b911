"""Entry point: resolve the configured event bridge and report it."""

import os
import sys

from dotenv import load_dotenv

from src.bridge.helper import get_bridge_helper
from src.models import NO_TOKEN
from src.utils.logging import get_logger, setup_logging

logger = get_logger("main")


def main():
    """Main entry point."""
    try:
        # Load environment variables
        env_path = '.env'
        load_dotenv(env_path)
        # Reconfigure so a LOG_LEVEL from .env takes effect
        setup_logging(level=os.getenv("LOG_LEVEL", "INFO"))

        helper = get_bridge_helper()
        bridge = helper.get_bridge()
        logger.info(f"Bridge {bridge.id} ({bridge.name}) endpoint: {bridge.endpoint}")

        token = helper.get_auth_token()
        if token == NO_TOKEN:
            logger.warning("No auth token could be obtained")
        else:
            logger.info("Auth token available")

    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception as e:
        logger.error(f"Bridge resolution failed: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
