from .dynamodb_product_store import DynamoDbProductStore, create_dynamodb_client

__all__ = ["DynamoDbProductStore", "create_dynamodb_client"]
