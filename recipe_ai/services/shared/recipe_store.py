import os
import json
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import StoreError
from .service_config import ServiceConfig


class RecipeStore(ABC):
    """Saved AI recipes, newest first."""

    @abstractmethod
    def save(self, recipe: Dict[str, Any]) -> None: ...

    @abstractmethod
    def get(self, recipe_id: str) -> Optional[Dict[str, Any]]: ...

    @abstractmethod
    def list(self, limit: int = 20) -> List[Dict[str, Any]]: ...

    @abstractmethod
    def delete(self, recipe_id: str) -> bool: ...


class LocalRecipeStore(RecipeStore):
    """All recipes in one JSON file under DATA_DIR, capped at ``max_items``."""

    FILENAME = "ai_recipes.json"

    def __init__(self, data_dir: str, max_items: int = 100) -> None:
        self._path = os.path.join(data_dir, self.FILENAME)
        self._max_items = max_items
        self._lock = threading.Lock()

    def _read(self) -> List[Dict[str, Any]]:
        if not os.path.exists(self._path):
            return []
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreError(f"cannot read {self._path}: {e}")
        return data if isinstance(data, list) else []

    def _write(self, recipes: List[Dict[str, Any]]) -> None:
        tmp = self._path + ".tmp"
        try:
            os.makedirs(os.path.dirname(self._path), exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(recipes, f, ensure_ascii=False)
            os.replace(tmp, self._path)
        except OSError as e:
            raise StoreError(f"cannot write {self._path}: {e}")

    def save(self, recipe: Dict[str, Any]) -> None:
        with self._lock:
            recipes = [r for r in self._read() if r.get("id") != recipe.get("id")]
            recipes.insert(0, recipe)
            self._write(recipes[: self._max_items])

    def get(self, recipe_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return next((r for r in self._read() if r.get("id") == recipe_id), None)

    def list(self, limit: int = 20) -> List[Dict[str, Any]]:
        with self._lock:
            return self._read()[: max(0, limit)]

    def delete(self, recipe_id: str) -> bool:
        with self._lock:
            recipes = self._read()
            kept = [r for r in recipes if r.get("id") != recipe_id]
            if len(kept) == len(recipes):
                return False
            self._write(kept)
            return True


class DynamoRecipeStore(RecipeStore):
    """DynamoDB-backed recipe store.

    Table schema (provision this once):
      - TableName: ROYCO_AI_RECIPES (configurable via env RECIPES_TABLE)
      - Partition key: recipe_id (S)
    Item shape:
      {
        recipe_id: str,
        generated_at: str,
        data: str (recipe JSON)
      }
    """

    def __init__(self, table_name: str, region: str, client=None) -> None:
        self._table_name = table_name
        self._client = client or boto3.client("dynamodb", region_name=region)

    def save(self, recipe: Dict[str, Any]) -> None:
        item = {
            "recipe_id": {"S": recipe["id"]},
            "generated_at": {"S": recipe.get("generated_at") or ""},
            "data": {"S": json.dumps(recipe, ensure_ascii=False)},
        }
        try:
            self._client.put_item(TableName=self._table_name, Item=item)
        except (BotoCoreError, ClientError) as e:
            raise StoreError(f"dynamodb put_item failed: {e}")

    def get(self, recipe_id: str) -> Optional[Dict[str, Any]]:
        try:
            res = self._client.get_item(TableName=self._table_name, Key={"recipe_id": {"S": recipe_id}})
        except (BotoCoreError, ClientError) as e:
            raise StoreError(f"dynamodb get_item failed: {e}")
        item = res.get("Item")
        if not item:
            return None
        return json.loads(item.get("data", {}).get("S", "{}") or "{}")

    def list(self, limit: int = 20) -> List[Dict[str, Any]]:
        items: List[Dict[str, Any]] = []
        kwargs: Dict[str, Any] = {"TableName": self._table_name}
        try:
            while True:
                res = self._client.scan(**kwargs)
                items.extend(res.get("Items") or [])
                if "LastEvaluatedKey" not in res:
                    break
                kwargs["ExclusiveStartKey"] = res["LastEvaluatedKey"]
        except (BotoCoreError, ClientError) as e:
            raise StoreError(f"dynamodb scan failed: {e}")
        # scan order is arbitrary
        items.sort(key=lambda it: it.get("generated_at", {}).get("S", ""), reverse=True)
        return [json.loads(it["data"]["S"]) for it in items[: max(0, limit)] if "data" in it]

    def delete(self, recipe_id: str) -> bool:
        try:
            res = self._client.delete_item(
                TableName=self._table_name,
                Key={"recipe_id": {"S": recipe_id}},
                ReturnValues="ALL_OLD",
            )
        except (BotoCoreError, ClientError) as e:
            raise StoreError(f"dynamodb delete_item failed: {e}")
        return bool(res.get("Attributes"))


def create_recipe_store(config: ServiceConfig) -> RecipeStore:
    backend = (config.recipe_store or "local").lower()
    if backend == "dynamodb":
        return DynamoRecipeStore(config.recipes_table, config.aws_region)
    if backend == "local":
        return LocalRecipeStore(config.data_dir, config.max_saved_recipes)
    raise ValueError(f"Unsupported recipe store: {backend}")
