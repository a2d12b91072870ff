from fabcatalog.models.card import CardRecord
from fabcatalog.models.catalog import CatalogRow
from fabcatalog.models.failure import CatalogError, DecodeError, FetchError, WriteError
from fabcatalog.models.locale import Locale

__all__ = [
    "CardRecord",
    "CatalogError",
    "CatalogRow",
    "DecodeError",
    "FetchError",
    "Locale",
    "WriteError",
]
