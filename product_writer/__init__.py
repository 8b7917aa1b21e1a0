"""Product batch writer: validates product batches and persists them to DynamoDB."""
