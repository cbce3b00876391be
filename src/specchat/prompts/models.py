"""Data models for explanation requests."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FollowUpAction(str, Enum):
    """Canned refinement requests offered after an explanation.

    The values are the labels shown to the shopper; the builder only embeds
    them in the prompt and attaches no other meaning to them.
    """

    MORE_DETAILS = "More Details"
    SIMPLIFIED = "Simplified Explanation"
    COMPARE = "Compare with Other Tech"


class Subject(BaseModel):
    """A technical specification being explained."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Specification name, e.g. 'Battery & Charging'")
    detail_text: str = Field(default="", description="Specification details as listed in the catalog")


class PromptTemplate(BaseModel):
    """The clause templates an explanation prompt is assembled from.

    Placeholders are ``{title}``, ``{detail_text}`` and ``{action}``.
    """

    model_config = ConfigDict(frozen=True)

    preamble: str
    subject: str
    subject_title_only: str
    follow_up: str
    output_format: str
    separator: str = "\n\n"

    @classmethod
    def default(cls) -> "PromptTemplate":
        """Load the packaged (or locally overridden) clause templates."""
        from . import load_prompt

        return cls(
            preamble=load_prompt("preamble"),
            subject=load_prompt("subject"),
            subject_title_only=load_prompt("subject_title"),
            follow_up=load_prompt("follow_up"),
            output_format=load_prompt("output_format"),
        )
