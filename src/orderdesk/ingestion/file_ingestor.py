import json
from pathlib import Path
from typing import Any, Dict, List

from ..orders.models import OrderRecord
from ..utils.logging import get_logger

logger = get_logger(__name__)


def load_orders_from_json(json_path: Path) -> List[Dict[str, Any]]:
    """
    Load raw order dicts from a JSON file.

    Expected content: the orders API list response, a JSON array of objects
    with keys id, customerName, product, quantity, unitPrice, orderDate, status.
    Entries that are not objects are skipped.

    Raises:
        ValueError: If the file is not valid JSON or not a JSON array
    """
    if not json_path.exists():
        logger.warning(f"Orders file not found: {json_path}")
        return []

    with json_path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Orders file is not valid JSON: {json_path}: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"Orders file must contain a JSON array: {json_path}")

    orders = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping entry {index} in {json_path}: not an object")
            continue
        orders.append(entry)

    logger.info(f"Loaded {len(orders)} orders from {json_path}")
    return orders


def load_order_records(json_path: Path) -> List[OrderRecord]:
    """Load orders from a JSON file as OrderRecord models (order dates classified)."""
    return [OrderRecord.model_validate(entry) for entry in load_orders_from_json(json_path)]


def load_draft_from_json(json_path: Path) -> Dict[str, Any]:
    """
    Load a single order object (form input) from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not a JSON object
    """
    if not json_path.exists():
        raise FileNotFoundError(f"Order file not found: {json_path}")
    with json_path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Order file is not valid JSON: {json_path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Order file must contain a JSON object: {json_path}")
    return data
