#!/usr/bin/env python3
"""Create and seed the restaurants table for local development.

This script creates the DynamoDB table read by the GET /restaurants handler,
configured against DynamoDB Local, and writes a small set of sample
restaurants into it.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config

LOCAL_TABLE_NAME = "Restaurants"

SEED_RESTAURANTS = [
    {"name": "Fangtasia", "image": "https://d2qt42rcwzspd6.cloudfront.net/manning/fangtasia.png", "themes": ["true blood"]},
    {"name": "Shoney's", "image": "https://d2qt42rcwzspd6.cloudfront.net/manning/shoney's.png", "themes": ["cartoon", "rick and morty"]},
    {"name": "Freddy's BBQ Joint", "image": "https://d2qt42rcwzspd6.cloudfront.net/manning/freddy's+bbq+joint.png", "themes": ["netflix", "house of cards"]},
    {"name": "Pizza Planet", "image": "https://d2qt42rcwzspd6.cloudfront.net/manning/pizza+planet.png", "themes": ["netflix", "toy story"]},
    {"name": "Leaky Cauldron", "image": "https://d2qt42rcwzspd6.cloudfront.net/manning/leaky+cauldron.png", "themes": ["movie", "harry potter"]},
    {"name": "Lil' Bits", "image": "https://d2qt42rcwzspd6.cloudfront.net/manning/lil+bits.png", "themes": ["cartoon", "rick and morty"]},
    {"name": "Fancy Eats", "image": "https://d2qt42rcwzspd6.cloudfront.net/manning/fancy+eats.png", "themes": ["cartoon", "rick and morty"]},
    {"name": "Don Cuco", "image": "https://d2qt42rcwzspd6.cloudfront.net/manning/don%20cuco.png", "themes": ["cartoon", "rick and morty"]},
]


def create_restaurants_table(dynamodb, table_name: str):
    """Create the restaurants table, keyed by name."""
    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "name", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "name", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def seed_restaurants(dynamodb, table_name: str):
    """Write the sample restaurants in a single batch."""
    requests = [
        {
            "PutRequest": {
                "Item": {
                    "name": {"S": r["name"]},
                    "image": {"S": r["image"]},
                    "themes": {"L": [{"S": theme} for theme in r["themes"]]},
                }
            }
        }
        for r in SEED_RESTAURANTS
    ]
    dynamodb.batch_write_item(RequestItems={table_name: requests})
    print(f"✓ Seeded {len(requests)} restaurants")


def main():
    """Create and seed the restaurants table."""
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"
    table_name = config.restaurants_table or LOCAL_TABLE_NAME

    print(f"Creating DynamoDB tables at {endpoint_url}...")
    print()

    # For DynamoDB Local, use dummy credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    create_restaurants_table(dynamodb, table_name)
    dynamodb.get_waiter("table_exists").wait(TableName=table_name)
    seed_restaurants(dynamodb, table_name)

    print()
    print("✅ Restaurants table ready")


if __name__ == "__main__":
    main()
