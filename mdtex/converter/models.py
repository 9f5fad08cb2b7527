from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class CiteToken(BaseModel):
    raw: str
    authors: list[str] = Field(min_length=1)
    pages: list[str]  # "" means no locator for that author
    prefatory_text: str = ""
    is_indirect: bool = False

    @model_validator(mode="after")
    def _pages_match_authors(self) -> "CiteToken":
        if len(self.pages) != len(self.authors):
            raise ValueError(
                f"expected {len(self.authors)} page locators, got {len(self.pages)}"
            )
        return self


class ParaRefToken(BaseModel):
    raw: str
    before_space: str  # e.g. "see para."
    after_space: str


class MathToken(BaseModel):
    raw: str
    expression: str
