"""
Card printing record as published in the flattened card dataset.

One record is one physical printing: the same card id appears once per
foiling and edition it was printed in. Only a handful of fields feed the
catalog; the rest are decoded so that the source shape is validated, and
are never read afterwards.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Fields that are plain strings in the dataset but occasionally arrive as
# numbers or null. Normalized to strings, blank meaning "no value".
_STRING_FIELDS = (
    "pitch",
    "cost",
    "power",
    "defense",
    "health",
    "intelligence",
    "rarity",
    "image_url",
    "unique_id",
    "functional_text",
    "functional_text_plain",
    "type_text",
    "printing_unique_id",
    "set_printing_unique_id",
    "set_id",
    "artist",
    "flavor_text",
    "flavor_text_plain",
    "tcgplayer_product_id",
    "tcgplayer_url",
)


class CardRecord(BaseModel):
    """
    A single card printing decoded from the dataset.

    Attributes:
        card_id: Set/number id of the card (e.g., "WTR001")
        name: Display name, may contain commas
        pitch, cost, power, defense: Stat values, blank if the card has none
        types: Ordered type list (e.g., ["Action", "Attack"])
        edition: Edition code (A, F, U, N)
        foiling: Foiling code (S, R, C, G)
        rarity: Rarity code
        image_url: Absolute image URL, may be blank
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    card_id: str = Field(alias="id")
    name: str
    edition: str
    foiling: str

    pitch: str = ""
    cost: str = ""
    power: str = ""
    defense: str = ""
    types: list[str] = Field(default_factory=list)
    rarity: str = ""
    image_url: str = ""

    # Passengers: decoded, never emitted
    unique_id: str = ""
    health: str = ""
    intelligence: str = ""
    card_keywords: list[Any] = Field(default_factory=list)
    abilities_and_effects: list[Any] = Field(default_factory=list)
    ability_and_effect_keywords: list[Any] = Field(default_factory=list)
    granted_keywords: list[Any] = Field(default_factory=list)
    removed_keywords: list[Any] = Field(default_factory=list)
    interacts_with_keywords: list[Any] = Field(default_factory=list)
    functional_text: str = ""
    functional_text_plain: str = ""
    type_text: str = ""
    played_horizontally: bool | None = None
    blitz_legal: bool | None = None
    cc_legal: bool | None = None
    commoner_legal: bool | None = None
    blitz_living_legend: bool | None = None
    cc_living_legend: bool | None = None
    blitz_banned: bool | None = None
    cc_banned: bool | None = None
    commoner_banned: bool | None = None
    upf_banned: bool | None = None
    blitz_suspended: bool | None = None
    cc_suspended: bool | None = None
    commoner_suspended: bool | None = None
    printing_unique_id: str = ""
    set_printing_unique_id: str = ""
    set_id: str = ""
    artist: str = ""
    art_variation: Any = None
    flavor_text: str = ""
    flavor_text_plain: str = ""
    tcgplayer_product_id: str = ""
    tcgplayer_url: str = ""

    @field_validator(*_STRING_FIELDS, mode="before")
    @classmethod
    def _loose_string(cls, value: Any) -> Any:
        """Accept null and bare numbers where the dataset expects strings."""
        if value is None:
            return ""
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator(
        "types",
        "card_keywords",
        "abilities_and_effects",
        "ability_and_effect_keywords",
        "granted_keywords",
        "removed_keywords",
        "interacts_with_keywords",
        mode="before",
    )
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value
