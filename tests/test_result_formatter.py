from chefai.models import DietaryPreferences
from chefai.services.result_formatter import to_analysis, to_validation_record, to_verdict_dict


def test_validation_record_for_invalid_selection(evaluator):
    """Test the stored record for Chicken + Milk."""
    record = to_validation_record(evaluator.evaluate(["chicken", "milk"]))
    assert record["isValid"] is False
    assert record["ruleType"] == "hard"
    assert record["reason"]
    assert record["substitutions"] == [{"ingredientToReplace": "milk", "substitute": "soy milk"}]
    assert set(record) == {"isValid", "reason", "substitutions", "ruleType"}


def test_validation_record_for_valid_selection_omits_optional_fields(evaluator):
    """Test that a valid record omits reason, substitutions and ruleType."""
    record = to_validation_record(evaluator.evaluate(["tomato", "onion"]))
    assert record == {"isValid": True}


def test_validation_record_without_substitutes_omits_list(evaluator):
    """Test that an empty substitution list is omitted."""
    record = to_validation_record(evaluator.evaluate(["raw beef", "unpasteurized cheese"]))
    assert record["isValid"] is False
    assert "substitutions" not in record


def test_verdict_dict_for_empty_selection(evaluator):
    """Test the verdict dict of an empty selection."""
    assert to_verdict_dict(evaluator.evaluate([])) == {
        "isValid": True,
        "substitutions": [],
        "tasteSuggestions": []
    }


def test_verdict_dict_uses_exact_field_names(evaluator):
    """Test the camelCase field names of the verdict dict."""
    data = to_verdict_dict(evaluator.evaluate(["rice", "cheese"], DietaryPreferences(vegan=True)))
    assert data["brokenRuleSeverity"] == "hard"
    assert data["brokenRuleId"] == "DIET_VEGAN"
    assert data["substitutions"][0] == {
        "ingredientToReplace": "cheese",
        "suggestion": "nutritional yeast",
        "reason": data["substitutions"][0]["reason"]
    }


def test_analysis_shape(evaluator):
    """Test the analysis shape for valid and hard-invalid selections."""
    valid = to_analysis(evaluator.evaluate(["tomato", "onion"]))
    assert valid["isCompatible"] is True
    assert "incompatibilityReason" not in valid
    assert valid["substitutions"] == []
    assert valid["tasteSuggestions"][0]["suggestion"] == "garlic"

    invalid = to_analysis(evaluator.evaluate(["pork", "beer"]))
    assert invalid["isCompatible"] is False
    assert "Halal" in invalid["incompatibilityReason"]
    assert invalid["tasteSuggestions"] == []


def test_soft_rule_is_compatible_in_analysis(evaluator):
    """Test that a soft-only conflict is compatible and its swap becomes a taste suggestion."""
    verdict = evaluator.evaluate(["shrimp", "parmesan"])
    analysis = to_analysis(verdict)
    assert analysis["isCompatible"] is True
    assert "incompatibilityReason" not in analysis
    assert analysis["substitutions"] == []
    suggestion = analysis["tasteSuggestions"][0]
    assert suggestion["suggestion"] == "nutritional yeast"
    assert verdict.reason in suggestion["reason"]


def test_soft_rule_stays_invalid_in_validation_record(evaluator):
    """Test that the stored record still flags a soft conflict with its rule type."""
    record = to_validation_record(evaluator.evaluate(["shrimp", "parmesan"]))
    assert record["isValid"] is False
    assert record["ruleType"] == "soft"
    assert record["substitutions"] == [{"ingredientToReplace": "parmesan", "substitute": "nutritional yeast"}]
