"""Test that integration test fixtures are working."""

import pytest


@pytest.mark.integration
def test_dynamodb_resource_fixture(dynamodb_resource):
    """Test that DynamoDB resource fixture works."""
    dynamodb_resource.meta.client.list_tables()


@pytest.mark.integration
def test_restaurants_table_fixture(restaurants_table):
    """Test that restaurants table fixture works."""
    assert restaurants_table.name.startswith("RestaurantsTest-")
    assert restaurants_table.key_schema[0]["AttributeName"] == "name"
    assert restaurants_table.table_status == "ACTIVE"
