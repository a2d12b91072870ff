"""
Catalog builder.

Merges the card records of every locale, orders them by name and renders
each one into a CatalogRow.

Output contract:
- Ascending by raw name (case-sensitive code point order), stable: cards
  sharing a name keep their input order.
- No deduplication. A printing present twice is emitted twice.
- Only names containing a comma are quoted. Nothing else is escaped;
  quotes and newlines pass through and multiple types add extra
  comma-separated fields.
"""

from collections.abc import Iterable, Mapping, Sequence

from fabcatalog.models.card import CardRecord
from fabcatalog.models.catalog import CatalogRow
from fabcatalog.services.identity import resolve_edition, resolve_foiling, unique_id


def quote_name(name: str) -> str:
    """Wrap a name in double quotes if it contains a comma."""
    if "," in name:
        return f'"{name}"'
    return name


def merge_locales(records_by_locale: Mapping[str, Sequence[CardRecord]]) -> list[CardRecord]:
    """Concatenate records of all locales in locale order."""
    merged: list[CardRecord] = []
    for records in records_by_locale.values():
        merged.extend(records)
    return merged


def render_row(card: CardRecord) -> CatalogRow:
    """Map a card record to its catalog row."""
    return CatalogRow(
        unique_id=unique_id(card),
        card_id=card.card_id,
        name=quote_name(card.name),
        pitch=card.pitch,
        foiling=resolve_foiling(card.foiling),
        edition=resolve_edition(card.edition),
        rarity=card.rarity,
        cost=card.cost,
        power=card.power,
        defense=card.defense,
        image_url=card.image_url,
        types=",".join(card.types),
    )


def build_catalog(records_by_locale: Mapping[str, Sequence[CardRecord]]) -> list[CatalogRow]:
    """
    Build the ordered catalog.

    Args:
        records_by_locale: Decoded records keyed by locale code

    Returns:
        Rows sorted by card name
    """
    cards = sorted(merge_locales(records_by_locale), key=lambda card: card.name)
    return [render_row(card) for card in cards]


def format_line(row: CatalogRow) -> str:
    """Render a row as one newline-terminated CSV line."""
    return ",".join(row.fields()) + "\n"


def render_catalog(rows: Iterable[CatalogRow]) -> str:
    """Render rows into the catalog document. No header row."""
    return "".join(format_line(row) for row in rows)
