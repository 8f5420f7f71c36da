from vidfeed.client.models import Item, SearchPage
from vidfeed.client.http_client import NetworkError, SearchAPI, SearchApiClient

__all__ = [
    "Item",
    "SearchPage",
    "NetworkError",
    "SearchAPI",
    "SearchApiClient",
]
