import json
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

from pydantic import ValidationError

from chefai.core.engine_config import engine_config
from chefai.core.logging_config import get_logger
from chefai.core.rules import DEFAULT_RULESET
from chefai.models import Ingredient, InvalidCombinationRule, PreferredCombinationRule, Ruleset

logger = get_logger(__name__)


class RuleCatalogError(Exception):
    """Raised when the rule catalog is malformed. Fatal at startup."""

    def __init__(self, errors: List[str]):
        super().__init__("Invalid rule catalog: " + "; ".join(errors))
        self.errors = errors


class RuleCatalog:
    """
    Read-only view over ingredients, combination rules, substitutes and
    cooking methods. Every lookup is case-insensitive and alias aware.
    """

    def __init__(self, ruleset: Ruleset):
        self._ingredients: Dict[str, Ingredient] = {}
        for ingredient in ruleset.ingredients:
            self._ingredients[ingredient.name] = ingredient
        self._aliases = {_key(k): _key(v) for k, v in ruleset.aliases.items()}
        self._categories: Dict[str, Tuple[str, ...]] = {
            _key(name): tuple(_key(m) for m in members)
            for name, members in ruleset.categories.items()
        }
        self._substitutions: Dict[str, Tuple[str, ...]] = {
            _key(name): tuple(s.strip() for s in subs)
            for name, subs in ruleset.substitutions.items()
        }
        self._cooking_methods: Dict[str, Tuple[str, ...]] = {
            _key(name): tuple(methods) for name, methods in ruleset.cooking_methods.items()
        }
        self.invalid_combinations: Tuple[InvalidCombinationRule, ...] = tuple(ruleset.invalid_combinations)
        self.preferred_combinations: Tuple[PreferredCombinationRule, ...] = tuple(ruleset.preferred_combinations)

        errors = self._check(ruleset)
        if errors:
            raise RuleCatalogError(errors)

        self._term_members: Dict[str, FrozenSet[str]] = {
            term: frozenset((term,) + self._categories.get(term, ()))
            for rule in self.invalid_combinations
            for term in rule.members
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RuleCatalog":
        try:
            ruleset = Ruleset.model_validate(data)
        except ValidationError as exc:
            errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ]
            raise RuleCatalogError(errors) from exc
        return cls(ruleset)

    def _check(self, ruleset: Ruleset) -> List[str]:
        """Cross-reference checks the per-entry schema cannot express."""
        errors: List[str] = []

        if len(self._ingredients) != len(ruleset.ingredients):
            errors.append("duplicate ingredient names in catalog")

        for alias, target in self._aliases.items():
            if alias in self._ingredients:
                errors.append(f"alias '{alias}' shadows a catalog ingredient")
            if target not in self._ingredients:
                errors.append(f"alias '{alias}' points to unknown ingredient '{target}'")

        for category, members in self._categories.items():
            for member in members:
                if member not in self._ingredients:
                    errors.append(f"category '{category}' lists unknown ingredient '{member}'")

        seen_ids = set()
        for rule in self.invalid_combinations + self.preferred_combinations:
            if rule.id in seen_ids:
                errors.append(f"duplicate rule id '{rule.id}'")
            seen_ids.add(rule.id)

        for rule in self.invalid_combinations:
            for term in rule.members:
                if term not in self._ingredients and term not in self._categories:
                    errors.append(f"rule {rule.id} member '{term}' is neither an ingredient nor a category")

        for rule in self.preferred_combinations:
            for member in rule.members:
                if member not in self._ingredients:
                    errors.append(f"preferred rule {rule.id} member '{member}' is not a catalog ingredient")

        for name, subs in self._substitutions.items():
            if name not in self._ingredients:
                errors.append(f"substitutes listed for unknown ingredient '{name}'")
            if not subs or not all(subs):
                errors.append(f"substitute list for '{name}' is empty")

        for name, methods in self._cooking_methods.items():
            if name not in self._ingredients:
                errors.append(f"cooking methods listed for unknown ingredient '{name}'")
            if not methods:
                errors.append(f"cooking method list for '{name}' is empty")

        return errors

    # --- Lookups ---

    def canonical_name(self, name: str) -> str:
        key = _key(name)
        return self._aliases.get(key, key)

    def ingredient(self, name: str) -> Optional[Ingredient]:
        return self._ingredients.get(self.canonical_name(name))

    @property
    def ingredients(self) -> List[Ingredient]:
        return list(self._ingredients.values())

    def categories_of(self, name: str) -> List[str]:
        canonical = self.canonical_name(name)
        return [category for category, members in self._categories.items() if canonical in members]

    def term_members(self, term: str) -> FrozenSet[str]:
        """Ingredient names a rule member matches: itself plus its category."""
        if term in self._term_members:
            return self._term_members[term]
        key = _key(term)
        return frozenset((key,) + self._categories.get(key, ()))

    def substitutes_for(self, name: str) -> List[str]:
        return list(self._substitutions.get(self.canonical_name(name), ()))

    def cooking_methods(self, name: str) -> List[str]:
        return list(self._cooking_methods.get(self.canonical_name(name), ()))

    def to_context(self) -> Dict[str, Any]:
        """Serialize the ruleset for use as grounding context in a prompt."""
        return {
            "rules": [
                {
                    "id": rule.id,
                    "type": rule.severity,
                    "name": rule.name,
                    "incompatible": list(rule.members),
                    "reason": rule.reason,
                    "substitutions": {
                        name: self.substitutes_for(name)
                        for term in rule.replaceable
                        for name in sorted(self.term_members(term))
                        if self.substitutes_for(name)
                    },
                }
                for rule in self.invalid_combinations
            ],
            "preferred": [
                {"id": rule.id, "name": rule.name, "ingredients": list(rule.members)}
                for rule in self.preferred_combinations
            ],
            "categories": {name: list(members) for name, members in self._categories.items()},
            "substitutions": {name: list(subs) for name, subs in self._substitutions.items()},
        }


def _key(name: str) -> str:
    return name.strip().lower()


def load_rule_catalog(path: Optional[Union[str, Path]] = None) -> RuleCatalog:
    """Build the catalog from a JSON file, or from the built-in ruleset.

    Any problem raises RuleCatalogError; a bad catalog must stop startup.
    """
    source = path or engine_config.rules_path
    if source:
        rules_file = Path(source)
        try:
            data = json.loads(rules_file.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise RuleCatalogError([f"rules file not found: {rules_file}"]) from exc
        except json.JSONDecodeError as exc:
            raise RuleCatalogError([f"rules file {rules_file} is not valid JSON: {exc}"]) from exc
        if not isinstance(data, dict):
            raise RuleCatalogError([f"rules file {rules_file} must contain an object"])
        origin = str(rules_file)
    else:
        data = DEFAULT_RULESET
        origin = "built-in ruleset"

    catalog = RuleCatalog.from_dict(data)
    logger.info(
        f"Loaded rule catalog from {origin}: {len(catalog.ingredients)} ingredients, "
        f"{len(catalog.invalid_combinations)} invalid and "
        f"{len(catalog.preferred_combinations)} preferred combinations"
    )
    return catalog


rule_catalog = load_rule_catalog()
