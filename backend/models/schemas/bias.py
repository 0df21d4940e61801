"""Bias detection output contracts."""

from typing import Literal

from pydantic import BaseModel

BiasType = Literal["biased_term", "biased_phrase", "stereotypical_assumption"]


class BiasDetail(BaseModel):
    """A single rule that fired during bias detection.

    Term and phrase hits carry ``biased``/``neutral``; stereotype hits carry
    only the ``pattern`` that matched (they are flagged, never rewritten).
    """
    type: BiasType
    biased: str | None = None
    neutral: str | None = None
    pattern: str | None = None


class BiasResult(BaseModel):
    has_bias: bool = False
    corrected_text: str = ""
    bias_details: list[BiasDetail] | None = None  # None when no rule fired
