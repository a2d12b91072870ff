from fabcatalog.parsers.card_json import decode_cards, load_cached_cards

__all__ = [
    "decode_cards",
    "load_cached_cards",
]
