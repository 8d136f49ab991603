"""Receipt workflows."""

from larder.application.receipts.normalize import normalize_item_name, normalize_item_names, normalize_receipt

__all__ = [
    "normalize_item_name",
    "normalize_item_names",
    "normalize_receipt",
]
