"""Base repository class for DynamoDB single-table access."""

import os
from typing import Any, Generic, TypeVar

import boto3
import structlog
from botocore.exceptions import ClientError

from pagesmith.models.base import BaseModel
from pagesmith.utils.exceptions import ConflictError, NotFoundError

logger = structlog.get_logger()

T = TypeVar("T", bound=BaseModel)

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


class BaseRepository(Generic[T]):
    """Typed CRUD over one DynamoDB table with optimistic locking."""

    def __init__(
        self,
        model_class: type[T],
        table_name: str | None = None,
    ):
        """Initialize repository.

        Args:
            model_class: The Pydantic model class stored by this repository.
            table_name: DynamoDB table name. Defaults to TABLE_NAME env var.
        """
        self.model_class = model_class
        self.table_name = table_name or os.environ.get("TABLE_NAME", "pagesmith-dev")
        self._table = None

    @property
    def table(self):
        """DynamoDB table, created on first use."""
        if self._table is None:
            self._table = boto3.resource("dynamodb").Table(self.table_name)
        return self._table

    def get(self, pk: str, sk: str) -> T | None:
        try:
            response = self.table.get_item(Key={"PK": pk, "SK": sk})
        except ClientError as e:
            logger.error("DynamoDB get_item failed", error=str(e), pk=pk, sk=sk)
            raise

        item = response.get("Item")
        return self.model_class.from_dynamodb(item) if item else None

    def get_or_raise(self, pk: str, sk: str, resource_type: str) -> T:
        """Get an item or raise NotFoundError.

        Raises:
            NotFoundError: If no item has this key.
        """
        item = self.get(pk, sk)
        if not item:
            resource_id = sk.split("#", 1)[-1]
            raise NotFoundError(resource_type, resource_id)
        return item

    def _write(self, item: T, **kwargs: Any) -> None:
        db_item = item.to_dynamodb()
        db_item.update(item.get_keys())
        self.table.put_item(Item=db_item, **kwargs)

    def create(self, item: T) -> T:
        """Store a new item.

        Raises:
            ConflictError: If an item with the same key exists.
        """
        item.update_timestamp()
        try:
            self._write(item, ConditionExpression="attribute_not_exists(PK)")
        except ClientError as e:
            if e.response["Error"]["Code"] == CONDITIONAL_CHECK_FAILED:
                raise ConflictError("Item already exists")
            logger.error("DynamoDB put_item failed", error=str(e))
            raise

        logger.debug("Item created", pk=item.get_pk(), sk=item.get_sk(), model=self.model_class.__name__)
        return item

    def update(self, item: T, check_version: bool = True) -> T:
        """Replace an existing item, bumping its version.

        Raises:
            ConflictError: If another writer changed the item first.
        """
        old_version = item.version
        item.increment_version()
        item.update_timestamp()

        kwargs: dict[str, Any] = {}
        if check_version:
            kwargs["ConditionExpression"] = "version = :old_version"
            kwargs["ExpressionAttributeValues"] = {":old_version": old_version}

        try:
            self._write(item, **kwargs)
        except ClientError as e:
            item.version = old_version
            if e.response["Error"]["Code"] == CONDITIONAL_CHECK_FAILED:
                raise ConflictError("Item was modified by another process")
            logger.error("DynamoDB update failed", error=str(e))
            raise

        logger.debug("Item updated", pk=item.get_pk(), sk=item.get_sk(), version=item.version)
        return item

    def query(
        self,
        pk: str,
        sk_prefix: str | None = None,
        limit: int | None = None,
        scan_forward: bool = True,
        last_key: dict | None = None,
    ) -> tuple[list[T], dict | None]:
        """Query items under one partition key.

        Args:
            pk: Partition key value.
            sk_prefix: Sort key prefix for a begins_with condition.
            limit: Maximum items to return.
            scan_forward: Sort direction (True = ascending).
            last_key: Last evaluated key for pagination.

        Returns:
            Tuple of (items, last_evaluated_key).
        """
        if sk_prefix:
            key_condition = "PK = :pk AND begins_with(SK, :sk_prefix)"
            values = {":pk": pk, ":sk_prefix": sk_prefix}
        else:
            key_condition = "PK = :pk"
            values = {":pk": pk}

        kwargs: dict[str, Any] = {
            "KeyConditionExpression": key_condition,
            "ExpressionAttributeValues": values,
            "ScanIndexForward": scan_forward,
        }
        if limit:
            kwargs["Limit"] = limit
        if last_key:
            kwargs["ExclusiveStartKey"] = last_key

        try:
            response = self.table.query(**kwargs)
        except ClientError as e:
            logger.error("DynamoDB query failed", error=str(e), pk=pk)
            raise

        items = [self.model_class.from_dynamodb(item) for item in response.get("Items", [])]
        return items, response.get("LastEvaluatedKey")
