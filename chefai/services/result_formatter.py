"""
Field mapping from the internal Verdict to the shapes consumers store and
render. Absent optional fields are omitted.
"""
from typing import Any, Dict

from chefai.models import AnalysisResult, SubstituteRecord, TasteSuggestion, ValidationRecord, Verdict


def to_verdict_dict(verdict: Verdict) -> Dict[str, Any]:
    """The Verdict itself, camelCase, with absent fields left out."""
    return verdict.model_dump(by_alias=True, exclude_none=True)


def to_validation_record(verdict: Verdict) -> Dict[str, Any]:
    """Map a Verdict to the record embedded in stored recipes.

    Shape: {isValid, reason?, substitutions?: [{ingredientToReplace, substitute}], ruleType?}
    """
    record = ValidationRecord(
        is_valid=verdict.is_valid,
        reason=verdict.reason,
        substitutions=[
            SubstituteRecord(ingredient_to_replace=s.ingredient_to_replace, substitute=s.suggestion)
            for s in verdict.substitutions
        ] or None,
        rule_type=verdict.broken_rule_severity
    )
    return record.model_dump(by_alias=True, exclude_none=True)


def to_analysis(verdict: Verdict) -> Dict[str, Any]:
    """Map a Verdict to the ingredient analysis shown before recipe generation.

    A soft rule does not block the selection here: it is reported as
    compatible and each of its substitutions becomes a taste suggestion.
    """
    if verdict.broken_rule_severity == "soft":
        analysis = AnalysisResult(
            is_compatible=True,
            taste_suggestions=[
                TasteSuggestion(suggestion=s.suggestion, reason=f"{s.reason} {verdict.reason}")
                for s in verdict.substitutions
            ]
        )
        return analysis.model_dump(by_alias=True, exclude_none=True)

    analysis = AnalysisResult(
        is_compatible=verdict.is_valid,
        incompatibility_reason=verdict.reason,
        substitutions=list(verdict.substitutions),
        taste_suggestions=list(verdict.taste_suggestions)
    )
    return analysis.model_dump(by_alias=True, exclude_none=True)
