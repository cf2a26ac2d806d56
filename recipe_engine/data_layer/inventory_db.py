"""Inventory database for loading what the user has in stock from JSON."""
import json
import logging
from pathlib import Path
from typing import List

from recipe_engine.data_layer.exceptions import DataFileError
from recipe_engine.data_layer.models import InventoryItem, require_mapping

logger = logging.getLogger(__name__)


class InventoryDB:
    """Database for managing inventory items loaded from JSON."""

    def __init__(self, json_path: str):
        """Initialize inventory database from JSON file.

        Args:
            json_path: Path to JSON file with an "inventory" list
        """
        self.json_path = Path(json_path)
        self._items: List[InventoryItem] = []
        self._load_items()

    def _load_items(self):
        """Load inventory items from JSON file."""
        with open(self.json_path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise DataFileError(str(self.json_path), str(exc)) from exc

        items_data = data.get("inventory", []) if isinstance(data, dict) else None
        if not isinstance(items_data, list):
            raise DataFileError(str(self.json_path), "'inventory' must be a list")

        try:
            self._items = [self._parse_item(item) for item in items_data]
        except (KeyError, TypeError, ValueError) as exc:
            raise DataFileError(str(self.json_path), f"bad inventory entry: {exc!r}") from exc

        logger.info("Loaded %d inventory items from %s", len(self._items), self.json_path)

    def _parse_item(self, item: dict) -> InventoryItem:
        require_mapping(item, "inventory entry")
        return InventoryItem(
            item_name=item["item_name"],
            quantity=float(item.get("quantity", 0.0)),
            unit=item.get("unit", ""),
            category=item.get("category", ""),
            location=item.get("location", "pantry"),
            expiry_date=item.get("expiry_date"),
        )

    def get_all_items(self) -> List[InventoryItem]:
        """Get all inventory items."""
        return self._items.copy()

    def get_items_by_location(self, location: str) -> List[InventoryItem]:
        """Get items stored in one place ("fridge", "pantry" or "freezer")."""
        return [item for item in self._items if item.location == location]
