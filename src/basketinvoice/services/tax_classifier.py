"""Decide which tax rules apply to a basket item."""

from __future__ import annotations

from dataclasses import dataclass

from basketinvoice.config.schema import TaxCategories
from basketinvoice.models import Item, TaxClassification


def classify(name: str, categories: TaxCategories) -> TaxClassification:
    """Return the VAT and import flags for ``name``.

    Membership is an exact, case-sensitive lookup of the full item name. The
    word "imported" appearing in a name has no effect on its own.
    """

    return TaxClassification(
        vat_applicable=categories.is_vat_applicable(name),
        imported=categories.is_imported(name),
    )


@dataclass(frozen=True)
class TaxClassifier:
    """Classifier bound to one set of tax categories."""

    categories: TaxCategories

    def classify(self, item: Item | str) -> TaxClassification:
        name = item.name if isinstance(item, Item) else item
        return classify(name, self.categories)


__all__ = ["TaxClassifier", "classify"]
