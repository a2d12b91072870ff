from dataclasses import astuple, dataclass


@dataclass(frozen=True, slots=True)
class CatalogRow:
    """
    One rendered catalog line, fields in output order.

    `name` is already quoted when needed and `types` is already joined,
    so every field is emitted verbatim.
    """

    unique_id: str
    card_id: str
    name: str
    pitch: str
    foiling: str
    edition: str
    rarity: str
    cost: str
    power: str
    defense: str
    image_url: str
    types: str

    def fields(self) -> tuple[str, ...]:
        return astuple(self)
