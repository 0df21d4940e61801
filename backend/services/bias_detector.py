"""Gender-bias detection and mitigation for user queries and generated replies.

Three passes run in order over the text:
1. Biased terms   -> whole-word replace with a neutral form
2. Biased phrases -> same, over the term-corrected text
3. Stereotypes    -> regex flag only, the text is left untouched

Stereotype patterns are blunt (a demographic word followed by a trait word
anywhere later on the line) and produce false positives.
"""

import logging
import re
from functools import lru_cache

from models.schemas.bias import BiasDetail, BiasResult
from services.lexicon import DEFAULT_LEXICON, BiasRule, Lexicon

logger = logging.getLogger(__name__)

BIAS_MITIGATION_INSTRUCTIONS = (
    "Note: The user query contains potentially biased language. "
    "Please ensure your response:"
    "\n- Uses gender-neutral language"
    "\n- Avoids reinforcing gender stereotypes"
    "\n- Focuses on skills, qualifications, and experiences rather than gender"
    "\n- Provides balanced information applicable to all genders"
)


@lru_cache(maxsize=256)
def _word_pattern(surface_form: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(surface_form)}\b", re.IGNORECASE)


def _apply_rules(
    text: str, rules: tuple[BiasRule, ...], details: list[BiasDetail]
) -> str:
    for rule in rules:
        detail_type = "biased_phrase" if rule.kind == "phrase" else "biased_term"
        for surface_form in rule.surface_forms:
            pattern = _word_pattern(surface_form)
            if pattern.search(text):
                # neutral form is inserted literally
                text = pattern.sub(lambda _m, n=rule.neutral: n, text)
                details.append(
                    BiasDetail(type=detail_type, biased=surface_form, neutral=rule.neutral)
                )
    return text


def detect_bias(text: str | None, lexicon: Lexicon = DEFAULT_LEXICON) -> BiasResult:
    """Detect biased language and return the neutralized text plus fired rules."""
    if not text:
        return BiasResult(has_bias=False, corrected_text=text or "", bias_details=None)

    details: list[BiasDetail] = []
    corrected = _apply_rules(text, lexicon.biased_terms, details)
    corrected = _apply_rules(corrected, lexicon.biased_phrases, details)

    for stereotype in lexicon.stereotypes:
        if stereotype.is_biased and stereotype.pattern.search(corrected):
            details.append(
                BiasDetail(type="stereotypical_assumption", pattern=stereotype.pattern.pattern)
            )

    return BiasResult(
        has_bias=bool(details),
        corrected_text=corrected,
        bias_details=details or None,
    )


def analyze_response_for_bias(response: str | None, lexicon: Lexicon = DEFAULT_LEXICON) -> BiasResult:
    """Bias-check generated text before it reaches the user."""
    result = detect_bias(response, lexicon)
    if result.has_bias:
        logger.warning(
            "Bias detected in assistant response: %s",
            [d.model_dump(exclude_none=True) for d in result.bias_details or []],
        )
    return result


def generate_bias_mitigation_instructions(bias_details: list[BiasDetail] | None) -> str:
    """Steering instructions for a downstream generator; empty when no bias fired."""
    if not bias_details:
        return ""
    return BIAS_MITIGATION_INSTRUCTIONS
