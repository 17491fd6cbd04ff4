from typing import Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Severity = Literal["hard", "soft"]


class DietaryPreferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = Field(default=False, alias="glutenFree")
    high_protein: bool = Field(default=False, alias="highProtein")


class Ingredient(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    vegetarian: bool
    vegan: bool
    gluten_free: bool = Field(alias="glutenFree")
    high_protein: bool = Field(alias="highProtein")

    @field_validator("name")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("ingredient name must not be empty")
        return value


class InvalidCombinationRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    severity: Severity
    members: Tuple[str, ...]
    reason: str = Field(..., min_length=1)
    replace: Tuple[str, ...] = ()

    @field_validator("members", "replace", mode="before")
    @classmethod
    def _normalize_terms(cls, value):
        if not isinstance(value, (list, tuple)):
            raise ValueError("expected a list of ingredient or category names")
        return tuple(str(term).strip().lower() for term in value)

    @model_validator(mode="after")
    def _check_terms(self) -> "InvalidCombinationRule":
        if len(set(self.members)) < 2:
            raise ValueError(f"rule {self.id} needs at least two distinct members")
        stray = [term for term in self.replace if term not in self.members]
        if stray:
            raise ValueError(f"rule {self.id} replaces non-members: {', '.join(stray)}")
        return self

    @property
    def replaceable(self) -> Tuple[str, ...]:
        return self.replace or self.members


class PreferredCombinationRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    members: Tuple[str, ...]

    @field_validator("members", mode="before")
    @classmethod
    def _normalize_members(cls, value):
        if not isinstance(value, (list, tuple)):
            raise ValueError("expected a list of ingredient names")
        return tuple(str(term).strip().lower() for term in value)

    @model_validator(mode="after")
    def _check_members(self) -> "PreferredCombinationRule":
        if len(set(self.members)) < 2:
            raise ValueError(f"rule {self.id} needs at least two distinct members")
        return self


class Ruleset(BaseModel):
    """Raw catalog document, as declared in chefai.core.rules or a JSON file."""
    ingredients: List[Ingredient]
    aliases: Dict[str, str] = Field(default_factory=dict)
    categories: Dict[str, List[str]] = Field(default_factory=dict)
    invalid_combinations: List[InvalidCombinationRule]
    preferred_combinations: List[PreferredCombinationRule] = Field(default_factory=list)
    substitutions: Dict[str, List[str]] = Field(default_factory=dict)
    cooking_methods: Dict[str, List[str]] = Field(default_factory=dict)


# --- Verdict ---

class Substitution(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    ingredient_to_replace: str = Field(alias="ingredientToReplace")
    suggestion: str
    reason: str


class TasteSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    suggestion: str
    reason: str


class Verdict(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_valid: bool = Field(alias="isValid")
    reason: Optional[str] = None
    broken_rule_severity: Optional[Severity] = Field(default=None, alias="brokenRuleSeverity")
    broken_rule_id: Optional[str] = Field(default=None, alias="brokenRuleId")
    substitutions: List[Substitution] = Field(default_factory=list)
    taste_suggestions: List[TasteSuggestion] = Field(default_factory=list, alias="tasteSuggestions")

    @model_validator(mode="after")
    def _check_consistency(self) -> "Verdict":
        if self.is_valid:
            if self.reason is not None or self.broken_rule_severity is not None:
                raise ValueError("a valid verdict carries no reason or severity")
        elif not self.reason or self.broken_rule_severity is None:
            raise ValueError("an invalid verdict needs a reason and a severity")
        return self


# --- Consumer shapes ---

class SubstituteRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ingredient_to_replace: str = Field(alias="ingredientToReplace")
    substitute: str


class ValidationRecord(BaseModel):
    """Validation result as embedded in a stored recipe. Field names are fixed."""
    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(alias="isValid")
    reason: Optional[str] = None
    substitutions: Optional[List[SubstituteRecord]] = None
    rule_type: Optional[Severity] = Field(default=None, alias="ruleType")


class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_compatible: bool = Field(alias="isCompatible")
    incompatibility_reason: Optional[str] = Field(default=None, alias="incompatibilityReason")
    substitutions: List[Substitution] = Field(default_factory=list)
    taste_suggestions: List[TasteSuggestion] = Field(default_factory=list, alias="tasteSuggestions")


# --- API requests ---

class AnalyzeIngredientsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ingredients: List[str] = Field(..., description="Selected ingredient names")
    dietary_preferences: Optional[DietaryPreferences] = Field(
        default=None, alias="dietaryPreferences", description="Optional dietary flags"
    )


class ValidateIngredientsRequest(AnalyzeIngredientsRequest):
    use_llm: bool = Field(
        default=False,
        alias="useLlm",
        description="Ask the LLM validator as well, grounded on the rule catalog"
    )


class IngredientDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ingredient: Ingredient
    categories: List[str] = Field(default_factory=list)
    substitutes: List[str] = Field(default_factory=list)
    cooking_methods: List[str] = Field(default_factory=list, alias="cookingMethods")
