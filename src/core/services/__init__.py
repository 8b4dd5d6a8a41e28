"""
Business services for the restaurant store.

- codec.py: DynamoDB attribute-value decoding into plain Python values
- restaurants.py: RestaurantLister, the bounded scan behind the list endpoint
"""

__all__: list[str] = []
