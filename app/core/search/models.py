"""
Search result records returned by OMDb.
"""

from pydantic import BaseModel, Field

NO_POSTER = "N/A"


class MovieSummary(BaseModel):
    """One search hit: title, year and poster URL (or "N/A")."""

    title: str = Field(alias="Title")
    year: str = Field(alias="Year")
    poster: str = Field(default=NO_POSTER, alias="Poster")

    class Config:
        populate_by_name = True
        frozen = True
