"""GET /restaurants handler: returns up to defaultResults restaurants as a JSON array."""

import logging
from typing import Any

from core.clients import get_dynamo_client
from core.config import get_config
from core.services.restaurants import RestaurantLister


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    for name in ("core", "handlers"):
        logging.getLogger(name).setLevel(config.log_level)

    lister = RestaurantLister(config, get_dynamo_client())
    return lister.handle(event)
