from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from fabcatalog.models.card import CardRecord


@pytest.fixture
def sample_dataset_path() -> Path:
    return Path(__file__).parent / "fixtures" / "cards_sample.json"


@pytest.fixture
def sample_dataset_bytes(sample_dataset_path: Path) -> bytes:
    return sample_dataset_path.read_bytes()


@pytest.fixture
def make_card() -> Callable[..., CardRecord]:
    """Factory for card records with sensible defaults."""

    def _make(**overrides: Any) -> CardRecord:
        data: dict[str, Any] = {
            "id": "WTR001",
            "name": "Rhinar, Reckless Rampage",
            "edition": "A",
            "foiling": "S",
            "pitch": "",
            "cost": "",
            "power": "",
            "defense": "",
            "types": ["Brute", "Hero"],
            "rarity": "T",
            "image_url": "https://example.com/WTR001.png",
        }
        data.update(overrides)
        return CardRecord.model_validate(data)

    return _make
