"""Pydantic models for the upstream search API's JSON response."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from vidfeed.client.models import Item, SearchPage


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ResourceId(_ApiModel):
    """Structured id of a search result."""

    kind: str = ""
    video_id: Optional[str] = Field(default=None, alias="videoId")
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    playlist_id: Optional[str] = Field(default=None, alias="playlistId")

    def value(self) -> str:
        return self.video_id or self.channel_id or self.playlist_id or ""


class Thumbnail(_ApiModel):
    url: str = ""


class Snippet(_ApiModel):
    title: str = ""
    description: str = ""
    channel_title: str = Field(default="", alias="channelTitle")
    published_at: str = Field(default="", alias="publishedAt")
    thumbnails: dict[str, Thumbnail] = Field(default_factory=dict)


class SearchResult(_ApiModel):
    """A single entry of ``items``."""

    id: Union[ResourceId, str]
    snippet: Snippet = Field(default_factory=Snippet)

    def to_item(self, thumbnail_preference: tuple[str, ...]) -> Item:
        item_id = self.id if isinstance(self.id, str) else self.id.value()
        thumbnail_url = ""
        for size in thumbnail_preference:
            thumb = self.snippet.thumbnails.get(size)
            if thumb is not None and thumb.url:
                thumbnail_url = thumb.url
                break
        return Item(
            id=item_id,
            title=self.snippet.title,
            thumbnail_url=thumbnail_url,
            channel_title=self.snippet.channel_title,
            published_at=self.snippet.published_at,
            description=self.snippet.description,
        )


class SearchListResponse(_ApiModel):
    """Top-level body of a successful ``search`` call."""

    items: list[SearchResult] = Field(default_factory=list)
    next_page_token: Optional[str] = Field(default=None, alias="nextPageToken")

    def to_page(self, thumbnail_preference: tuple[str, ...]) -> SearchPage:
        return SearchPage(
            items=[result.to_item(thumbnail_preference) for result in self.items],
            # An empty token is the same as none
            next_cursor=self.next_page_token or None,
        )
