from __future__ import annotations
import logging

from hotelres.channels import run_console
from hotelres.config import get_config
from hotelres.exceptions import HotelResError

logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    try:
        config = get_config()
        logging.getLogger().setLevel(getattr(logging, config.get_log_level(), logging.INFO))
        system = config.create_system()
        run_console(system, hotel_name=config.get_hotel_display_name())
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except HotelResError as e:
        logger.error(f"System Error: {e}", exc_info=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
