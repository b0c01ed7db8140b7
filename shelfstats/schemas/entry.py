from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReadingStatus(str, Enum):
    Reading = "Reading"
    Finished = "Finished"
    Dropped = "Dropped"
    WantToRead = "Want to Read"


class MemorableQuote(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    quote: str
    page: str | None = None
    thought: str | None = None
    date: str | None = None
    is_favorite: bool = False

    @model_validator(mode="before")
    @classmethod
    def _from_plain_text(cls, data):
        # Older records store quotes as bare strings
        if isinstance(data, str):
            return {"quote": data}
        return data


class Memo(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    text: str
    created_at: str | None = None
    is_favorite: bool = False


class ReviewRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    status: ReadingStatus | None = None
    rating: float | None = None
    # Raw strings as stored; parsed (and possibly discarded) by the normalizer
    start_date: str | None = None
    end_date: str | None = None

    one_line_review: str | None = None
    motivation: str | None = None
    summary: str | None = None
    memorable_quotes: list[MemorableQuote] = Field(default_factory=list)
    memos: list[Memo] = Field(default_factory=list)
    learnings: str | None = None
    overall_impression: str | None = None
    notes: str | None = None


class LibraryEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    title: str
    author: str = ""
    category: str | None = None
    cover_image_url: str | None = None
    description: str | None = None
    review: ReviewRecord | None = None
