from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class SourceDescriptor(BaseModel):
    """
    Identity plus progress cursor for one tracked source.

    `page_index` is the next page not yet downloaded. It is the only value a
    run ever changes, and only after the image for that page was saved.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    name: str
    page_index: int = Field(default=0, ge=0)
    page_num_padding: int = Field(default=0, ge=0)

    @field_validator("name")
    def name_must_be_a_folder_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError("name is used as a folder and must not contain separators")
        return v

    @property
    def formatted_index(self) -> str:
        """`page_index` zero-padded to `page_num_padding` digits."""
        return str(self.page_index).zfill(self.page_num_padding)

    def increment(self) -> None:
        self.page_index += 1


class BaseLinkSource(SourceDescriptor):
    """Pages live at `<base_link><index>.html`."""

    variant: Literal["A"] = "A"
    base_link: str


class DomainSource(SourceDescriptor):
    """Pages live at `<domain><domain_subfolder><index>.html`.

    Image references in the markup are site-relative, so `domain` is put back
    in front of them.
    """

    variant: Literal["B"] = "B"
    domain: str
    domain_subfolder: str


Source = Annotated[Union[BaseLinkSource, DomainSource], Field(discriminator="variant")]


class SubscriptionSet(BaseModel):
    """Everything stored in the state file: where to save and what to follow."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    save_root: str
    sources: List[Source] = Field(default_factory=list)

    @model_validator(mode="after")
    def names_must_be_unique(self):
        # each name is a folder under save_root written by its own poller
        seen = set()
        for source in self.sources:
            if source.name in seen:
                raise ValueError(f"duplicate source name '{source.name}'")
            seen.add(source.name)
        return self
