import pytest
from chefai.core.engine_config import EngineConfig
from chefai.core.rules import DEFAULT_RULESET
from chefai.services.rule_catalog import RuleCatalog
from chefai.services.dietary_classifier import DietaryClassifier
from chefai.services.compatibility_evaluator import CompatibilityEvaluator


@pytest.fixture
def catalog():
    """Fixture for a RuleCatalog built from the built-in ruleset."""
    return RuleCatalog.from_dict(DEFAULT_RULESET)


@pytest.fixture
def classifier(catalog):
    """Fixture for DietaryClassifier instance."""
    return DietaryClassifier(catalog)


@pytest.fixture
def evaluator(catalog, classifier):
    """Fixture for CompatibilityEvaluator with default settings."""
    return CompatibilityEvaluator(catalog, classifier, EngineConfig())
