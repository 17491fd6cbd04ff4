from typing import List, Optional, Union

from chefai.models import DietaryPreferences, Ingredient
from chefai.services.rule_catalog import RuleCatalog, rule_catalog

# Preference flags map 1:1 to Ingredient attributes of the same name
PREFERENCE_FLAGS = ("vegetarian", "vegan", "gluten_free", "high_protein")

# Flags that block a selection; high_protein is a goal and only filters the catalog
RESTRICTIVE_FLAGS = ("vegetarian", "vegan", "gluten_free")

FLAG_LABELS = {
    "vegetarian": "vegetarian",
    "vegan": "vegan",
    "gluten_free": "gluten-free",
    "high_protein": "high-protein",
}


def enabled_flags(preferences: Optional[DietaryPreferences]) -> List[str]:
    if preferences is None:
        return []
    return [flag for flag in PREFERENCE_FLAGS if getattr(preferences, flag)]


class DietaryClassifier:
    def __init__(self, catalog: Optional[RuleCatalog] = None):
        self.catalog = catalog or rule_catalog

    def filter_catalog(self, preferences: Optional[DietaryPreferences] = None) -> List[Ingredient]:
        """Return catalog ingredients satisfying every enabled flag (logical AND)."""
        flags = enabled_flags(preferences)
        return [
            ingredient for ingredient in self.catalog.ingredients
            if all(getattr(ingredient, flag) for flag in flags)
        ]

    def violates_preferences(
        self,
        ingredient: Union[Ingredient, str],
        preferences: Optional[DietaryPreferences] = None
    ) -> bool:
        """
        True if any enabled flag's attribute is False on the ingredient.
        Free-text names missing from the catalog never violate.
        """
        resolved = self._resolve(ingredient)
        if resolved is None:
            return False
        return any(not getattr(resolved, flag) for flag in enabled_flags(preferences))

    def violated_restrictions(
        self,
        ingredient: Union[Ingredient, str],
        preferences: Optional[DietaryPreferences] = None
    ) -> List[str]:
        """Restrictive flags the ingredient breaks, in RESTRICTIVE_FLAGS order."""
        resolved = self._resolve(ingredient)
        if resolved is None:
            return []
        return [
            flag for flag in enabled_flags(preferences)
            if flag in RESTRICTIVE_FLAGS and not getattr(resolved, flag)
        ]

    def _resolve(self, ingredient: Union[Ingredient, str]) -> Optional[Ingredient]:
        if isinstance(ingredient, Ingredient):
            return ingredient
        return self.catalog.ingredient(ingredient)


dietary_classifier = DietaryClassifier()
