from .json import LAST_UPDATED_FORMAT, DocumentSpec, JsonDocumentStore, parse_last_updated

__all__ = [
    "LAST_UPDATED_FORMAT",
    "DocumentSpec",
    "JsonDocumentStore",
    "parse_last_updated",
]
