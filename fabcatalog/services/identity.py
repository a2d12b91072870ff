"""
Printing identity.

A card id alone does not identify a physical printing: the same id is
printed in several foilings and editions. The unique id used as the
catalog key is:

    <card id>.<foiling label>[.<edition label>]

The edition part is omitted when the edition label is empty (no-edition
printings). Unknown codes resolve to an empty label rather than failing;
downstream consumers already rely on that.
"""

from types import MappingProxyType

from fabcatalog.models.card import CardRecord

# A: Alpha, F: First, U: Unlimited, N: no specified edition (promos etc.)
EDITION_LABELS = MappingProxyType(
    {
        "A": "Alpha",
        "F": "1st",
        "U": "Unl",
        "N": "",
    }
)

# S: Standard, R: Rainbow Foil, C: Cold Foil, G: Gold Cold Foil
FOILING_LABELS = MappingProxyType(
    {
        "S": "NF",
        "R": "RF",
        "C": "CF",
        "G": "GF",
    }
)


def resolve_edition(code: str) -> str:
    """Edition label for a code, empty if unknown."""
    return EDITION_LABELS.get(code, "")


def resolve_foiling(code: str) -> str:
    """Foiling label for a code, empty if unknown."""
    return FOILING_LABELS.get(code, "")


def unique_id(card: CardRecord) -> str:
    """
    Stable identity of a card printing.

    Depends only on (card_id, foiling, edition).

    Example:
        WTR001 / R / A -> "WTR001.RF.Alpha"
        WTR001 / S / N -> "WTR001.NF"
    """
    uid = f"{card.card_id}.{resolve_foiling(card.foiling)}"
    edition = resolve_edition(card.edition)
    if not edition:
        return uid
    return f"{uid}.{edition}"
