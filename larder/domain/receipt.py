"""Data models for extracted receipts."""

from dataclasses import dataclass, field
from decimal import Decimal

from larder.domain.item_normalization import NormalizationResult

# Items scoring below this are surfaced for manual correction before import.
LOW_CONFIDENCE_THRESHOLD = 0.7


@dataclass
class ReceiptItem:
    """A single line item extracted from a receipt."""

    name: str
    price: Decimal | None = None
    quantity: Decimal = Decimal("1")
    normalization: NormalizationResult | None = None

    @property
    def needs_review(self) -> bool:
        if self.normalization is None:
            return True
        return self.normalization.confidence < LOW_CONFIDENCE_THRESHOLD


@dataclass
class Receipt:
    """Receipt as returned by the extraction service."""

    store: str | None = None
    currency: str | None = None
    items: list[ReceiptItem] = field(default_factory=list)

    @property
    def review_items(self) -> list[ReceiptItem]:
        return [item for item in self.items if item.needs_review]
