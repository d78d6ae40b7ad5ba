"""
Schemas for the Neynar cast search API and the cleaned cast records built
from it.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class NeynarBio(BaseModel):
    text: Optional[str] = None


class NeynarProfile(BaseModel):
    bio: Optional[NeynarBio] = None


class NeynarAuthor(BaseModel):
    """Author of a cast."""
    object: Literal["user"]
    fid: int
    display_name: str
    profile: Optional[NeynarProfile] = None
    follower_count: Optional[int] = None
    following_count: Optional[int] = None
    power_badge: Optional[bool] = None


class NeynarReactions(BaseModel):
    likes_count: int
    recasts_count: int


class NeynarReplies(BaseModel):
    count: int


class NeynarCast(BaseModel):
    """A single Farcaster cast as returned by ``/farcaster/cast/search``."""
    object: Literal["cast"]
    hash: str
    author: NeynarAuthor
    thread_hash: str
    text: str
    timestamp: str
    reactions: NeynarReactions
    replies: NeynarReplies


class NeynarCursor(BaseModel):
    cursor: Optional[str] = None


class NeynarSearchResult(BaseModel):
    casts: List[NeynarCast] = Field(default_factory=list)
    next: NeynarCursor


class NeynarSearchResponse(BaseModel):
    """Top-level response of the cast search endpoint."""
    result: NeynarSearchResult


class CleanCast(BaseModel):
    """Flattened cast handed to the agents."""
    hash: str
    author_name: str
    text: str
    timestamp: str
    likes: int
    replies: int

    @classmethod
    def from_cast(cls, cast: NeynarCast) -> "CleanCast":
        return cls(
            hash=cast.hash,
            author_name=cast.author.display_name,
            text=cast.text,
            timestamp=cast.timestamp,
            likes=cast.reactions.likes_count,
            replies=cast.replies.count,
        )


class SentimentBreakdown(BaseModel):
    """Rounded percentages of positive, neutral and negative casts."""
    positive: int = 0
    neutral: int = 0
    negative: int = 0
