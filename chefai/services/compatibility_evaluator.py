import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from chefai.core.engine_config import EngineConfig, engine_config
from chefai.core.logging_config import get_logger
from chefai.models import (
    DietaryPreferences,
    InvalidCombinationRule,
    Severity,
    Substitution,
    TasteSuggestion,
    Verdict,
)
from chefai.services.dietary_classifier import FLAG_LABELS, DietaryClassifier
from chefai.services.rule_catalog import RuleCatalog, rule_catalog

logger = get_logger(__name__)


@dataclass(frozen=True)
class BrokenRule:
    rule_id: str
    name: str
    severity: Severity
    reason: str
    offenders: Tuple[str, ...]


class CompatibilityEvaluator:
    """
    Deterministic ingredient compatibility check.

    Evaluation order is fixed: hard combination rules, then dietary
    violations, then soft combination rules. Inside each group the first
    declared rule (or first ingredient in sorted order) wins.
    """

    def __init__(
        self,
        catalog: Optional[RuleCatalog] = None,
        classifier: Optional[DietaryClassifier] = None,
        config: Optional[EngineConfig] = None
    ):
        self.catalog = catalog or rule_catalog
        self.classifier = classifier or DietaryClassifier(self.catalog)
        self.config = config or engine_config

    def normalize(self, ingredients: Iterable[object]) -> List[str]:
        """Trim, lower-case, resolve aliases and deduplicate. Returns a sorted list."""
        names: Set[str] = set()
        for raw in ingredients or []:
            if not isinstance(raw, str):
                continue
            if not raw.strip():
                continue
            names.add(self.catalog.canonical_name(raw))
        return sorted(names)

    def evaluate(
        self,
        ingredients: Iterable[object],
        preferences: Optional[DietaryPreferences] = None
    ) -> Verdict:
        """Evaluate a selection of ingredients.

        Args:
            ingredients: Selected ingredient names, any case or order.
            preferences: Optional dietary flags; absent flags are False.

        Returns:
            A Verdict. An empty selection is vacuously compatible.
        """
        preferences = preferences or DietaryPreferences()
        selected = self.normalize(ingredients)
        logger.debug(f"Evaluating {selected} with preferences {preferences.model_dump()}")

        if not selected:
            return Verdict(is_valid=True)

        broken = self._find_broken_rule(selected, preferences)
        if broken is not None:
            logger.info(f"Rule {broken.rule_id} ({broken.severity}) broken by {list(broken.offenders)}")
            return Verdict(
                is_valid=False,
                reason=broken.reason,
                broken_rule_severity=broken.severity,
                broken_rule_id=broken.rule_id,
                substitutions=self._substitutions(broken, selected, preferences)
            )

        return Verdict(
            is_valid=True,
            taste_suggestions=self._taste_suggestions(selected, preferences)
        )

    # --- Rule matching ---

    def matching_combinations(self, selected: Iterable[str]) -> List[InvalidCombinationRule]:
        """Invalid-combination rules whose every member is present, in declaration order."""
        names = set(selected)
        return [
            rule for rule in self.catalog.invalid_combinations
            if all(names & self.catalog.term_members(term) for term in rule.members)
        ]

    def _find_broken_rule(
        self,
        selected: List[str],
        preferences: DietaryPreferences
    ) -> Optional[BrokenRule]:
        matches = self.matching_combinations(selected)

        for rule in matches:
            if rule.severity == "hard":
                return self._combination_broken(rule, selected)

        dietary = self._dietary_violation(selected, preferences)
        if dietary is not None:
            return dietary

        for rule in matches:
            if rule.severity == "soft":
                return self._combination_broken(rule, selected)

        return None

    def _combination_broken(self, rule: InvalidCombinationRule, selected: List[str]) -> BrokenRule:
        replaceable: Set[str] = set()
        for term in rule.replaceable:
            replaceable |= self.catalog.term_members(term)
        offenders = tuple(name for name in selected if name in replaceable)
        return BrokenRule(
            rule_id=rule.id,
            name=rule.name,
            severity=rule.severity,
            reason=rule.reason,
            offenders=offenders
        )

    def _dietary_violation(
        self,
        selected: List[str],
        preferences: DietaryPreferences
    ) -> Optional[BrokenRule]:
        flag = None
        for name in selected:
            violated = self.classifier.violated_restrictions(name, preferences)
            if violated:
                flag = violated[0]
                break
        if flag is None:
            return None

        offenders = tuple(
            name for name in selected
            if flag in self.classifier.violated_restrictions(name, preferences)
        )
        label = FLAG_LABELS[flag]
        if len(offenders) == 1:
            subject = f"{offenders[0].capitalize()} is"
        else:
            subject = f"{', '.join(offenders[:-1]).capitalize()} and {offenders[-1]} are"
        return BrokenRule(
            rule_id=f"DIET_{flag.upper()}",
            name=f"{label.capitalize()} preference",
            severity="hard",
            reason=f"{subject} not {label}, which conflicts with your {label} preference.",
            offenders=offenders
        )

    # --- Suggestions ---

    def _fits(self, candidate: str, others: Iterable[str], preferences: DietaryPreferences) -> bool:
        """A candidate fits if it keeps preferences and completes no new invalid combination."""
        canonical = self.catalog.canonical_name(candidate)
        if self.classifier.violated_restrictions(canonical, preferences):
            return False
        others = set(others)
        already = {rule.id for rule in self.matching_combinations(others)}
        added = self.matching_combinations(others | {canonical})
        return all(rule.id in already for rule in added)

    def _substitutions(
        self,
        broken: BrokenRule,
        selected: List[str],
        preferences: DietaryPreferences
    ) -> List[Substitution]:
        substitutions: List[Substitution] = []
        for name in broken.offenders:
            others = [other for other in selected if other != name]
            for candidate in self.catalog.substitutes_for(name):
                if self.catalog.canonical_name(candidate) in selected:
                    continue
                if not self._fits(candidate, others, preferences):
                    continue
                substitutions.append(Substitution(
                    ingredient_to_replace=name,
                    suggestion=candidate,
                    reason=f"Using {candidate} instead of {name} avoids the {broken.name} conflict."
                ))
                break
        return substitutions

    def _taste_suggestions(
        self,
        selected: List[str],
        preferences: DietaryPreferences
    ) -> List[TasteSuggestion]:
        names = set(selected)
        suggestions: List[TasteSuggestion] = []
        seen: Set[str] = set()
        limit = self.config.max_taste_suggestions
        if limit <= 0:
            return suggestions

        for rule in self.catalog.preferred_combinations:
            present = [m for m in rule.members if m in names]
            missing = [m for m in rule.members if m not in names]
            if not present or not missing:
                continue
            if len(present) < math.ceil(self.config.taste_min_present_ratio * len(rule.members)):
                continue
            for member in missing:
                if member in seen or not self._fits(member, selected, preferences):
                    continue
                seen.add(member)
                suggestions.append(TasteSuggestion(
                    suggestion=member,
                    reason=f"Adding {member} to {' and '.join(present)} improves flavor balance."
                ))
                if len(suggestions) >= limit:
                    return suggestions
        return suggestions


compatibility_evaluator = CompatibilityEvaluator()
