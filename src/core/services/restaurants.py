"""Restaurant listing service: one bounded scan against the restaurants table."""

import json
import logging
from typing import Any

import pydantic

from core.config import Config
from core.errors import ConfigurationError, RecordValidationError
from core.models.restaurant import Restaurant
from core.services.codec import unmarshall

logger = logging.getLogger(__name__)


def parse_restaurant(record: dict[str, Any]) -> dict[str, Any]:
    """Check a plain record against the Restaurant schema and return it unchanged."""
    try:
        Restaurant.model_validate(record)
    except pydantic.ValidationError as e:
        raise RecordValidationError(f"Record does not match restaurant schema: {e.error_count()} error(s)") from e
    return record


def serialize(records: list[dict[str, Any]]) -> str:
    return json.dumps(records)


class RestaurantLister:
    """Reads up to `config.default_results` restaurants and wraps them in an API Gateway response.

    There is no pagination loop and no retry: datastore errors propagate
    to the Lambda runtime unchanged.
    """

    def __init__(self, config: Config, dynamo_client: Any):
        self._config = config
        self._dynamo_client = dynamo_client

    def handle(self, event: Any) -> dict[str, Any]:
        restaurants = self.list_restaurants(self._config.default_results)
        return {"statusCode": 200, "body": serialize(restaurants)}

    def list_restaurants(self, count: int) -> list[dict[str, Any]]:
        table_name = self._config.restaurants_table
        if not table_name:
            raise ConfigurationError("restaurants_table is not set")

        logger.info("fetching %d restaurants from %s...", count, table_name)
        # DynamoDB rejects Limit=0
        if count <= 0:
            logger.info("found 0 restaurants")
            return []

        response = self._dynamo_client.scan(TableName=table_name, Limit=count)
        items = response.get("Items", [])
        logger.info("found %d restaurants", len(items))

        if response.get("LastEvaluatedKey") and len(items) < count:
            logger.warning("Scan page of %s truncated at %d of %d requested items", table_name, len(items), count)

        restaurants = []
        for item in items[:count]:
            try:
                restaurants.append(parse_restaurant(unmarshall(item)))
            except RecordValidationError as e:
                logger.warning("Skipping restaurant record: %s", e.message)
        return restaurants
