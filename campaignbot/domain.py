from __future__ import annotations

from pydantic import BaseModel, Field


class CampaignError(Exception):
    """Base class for errors raised by campaignbot."""


class NameParseError(CampaignError, ValueError):
    """A name string could not be turned into first and last name.

    Recoverable: raised by constructors so the caller can report bad input.
    """


class FatalNameError(CampaignError, RuntimeError):
    """A coordinator was told to adopt a malformed name.

    Not meant to be caught; it signals a programming error in the caller.
    """


class FullName(BaseModel):
    """First and last name of a coordinator."""

    first: str = ""
    last: str = ""

    def __str__(self) -> str:
        return f"{self.first} {self.last}"


class CampaignReport(BaseModel):
    """Outcome of a full campaign run."""

    coordinator: str
    assistant_retained: bool
    targets: list[str] = Field(default_factory=list)
    headquarters: str | None = None
    delivered: str | None = None


def split_name(name: str) -> list[str]:
    # Single-space split: "" yields one empty component, "a  b" yields three.
    return name.split(" ")


def parse_full_name(name: str) -> FullName:
    """Parse ``"First Last"`` leniently.

    Components past the second are ignored. Raises :class:`NameParseError` when
    fewer than two components are present.
    """
    components = split_name(name)
    if len(components) < 2:
        raise NameParseError("Too few arguments")
    return FullName(first=components[0], last=components[1])
