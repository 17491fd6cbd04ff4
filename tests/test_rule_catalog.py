import copy
import json
import pytest
from chefai.core.rules import DEFAULT_RULESET
from chefai.services.rule_catalog import RuleCatalog, RuleCatalogError, load_rule_catalog


def make_ruleset(**overrides):
    data = copy.deepcopy(DEFAULT_RULESET)
    data.update(overrides)
    return data


class TestRuleCatalogLookups:

    def test_substitutes_are_case_insensitive(self, catalog):
        """Test that substitute lookup ignores case and whitespace."""
        assert catalog.substitutes_for("Milk") == ["soy milk", "almond milk", "cream", "yogurt"]
        assert catalog.substitutes_for("  MILK ") == catalog.substitutes_for("milk")

    def test_substitutes_for_unknown_is_empty(self, catalog):
        """Test that an unknown name has no substitutes."""
        assert catalog.substitutes_for("dragonfruit") == []

    def test_aliases_resolve_to_canonical(self, catalog):
        """Test alias resolution."""
        assert catalog.canonical_name("Onions") == "onion"
        assert catalog.ingredient("Eggs").name == "egg"
        assert catalog.canonical_name("dragonfruit") == "dragonfruit"

    def test_categories_of(self, catalog):
        """Test category membership lookup."""
        assert "meat" in catalog.categories_of("chicken")
        assert set(catalog.categories_of("parmesan")) >= {"dairy", "cheese"}
        assert catalog.categories_of("rice") == []

    def test_term_members_include_category(self, catalog):
        """Test that a category term matches its members."""
        members = catalog.term_members("dairy")
        assert "dairy" in members
        assert "milk" in members
        assert catalog.term_members("milk") == frozenset({"milk"})

    def test_cooking_methods(self, catalog):
        """Test cooking method lookup."""
        assert catalog.cooking_methods("Chicken")[0] == "grill"
        assert catalog.cooking_methods("sugar") == []

    def test_rules_keep_declaration_order(self, catalog):
        """Test that rules keep declaration order."""
        ids = [rule.id for rule in catalog.invalid_combinations]
        assert ids[0] == "R001"
        assert ids == [r["id"] for r in DEFAULT_RULESET["invalid_combinations"]]

    def test_to_context_is_json_serializable(self, catalog):
        """Test that the prompt context serializes to JSON."""
        context = catalog.to_context()
        encoded = json.dumps(context)
        assert "Meat + Dairy" in encoded
        rule = context["rules"][0]
        assert rule["type"] == "hard"
        assert rule["substitutions"]["milk"][0] == "soy milk"
        assert "chicken" not in rule["substitutions"]


class TestRuleCatalogValidation:

    def test_missing_reason_fails(self):
        """Test that a rule without a reason fails to load."""
        rules = copy.deepcopy(DEFAULT_RULESET["invalid_combinations"])
        del rules[0]["reason"]
        with pytest.raises(RuleCatalogError) as exc_info:
            RuleCatalog.from_dict(make_ruleset(invalid_combinations=rules))
        assert any("reason" in err for err in exc_info.value.errors)

    def test_single_member_rule_fails(self):
        """Test that a one-member rule fails to load."""
        rules = copy.deepcopy(DEFAULT_RULESET["invalid_combinations"])
        rules[0]["members"] = ["meat"]
        rules[0]["replace"] = []
        with pytest.raises(RuleCatalogError):
            RuleCatalog.from_dict(make_ruleset(invalid_combinations=rules))

    def test_unknown_severity_fails(self):
        """Test that an unknown severity fails to load."""
        rules = copy.deepcopy(DEFAULT_RULESET["invalid_combinations"])
        rules[0]["severity"] = "medium"
        with pytest.raises(RuleCatalogError):
            RuleCatalog.from_dict(make_ruleset(invalid_combinations=rules))

    def test_replace_must_be_member(self):
        """Test that a replace term outside the members fails to load."""
        rules = copy.deepcopy(DEFAULT_RULESET["invalid_combinations"])
        rules[0]["replace"] = ["alcohol"]
        with pytest.raises(RuleCatalogError):
            RuleCatalog.from_dict(make_ruleset(invalid_combinations=rules))

    def test_unknown_member_term_fails(self):
        """Test that an unknown member term fails to load."""
        rules = copy.deepcopy(DEFAULT_RULESET["invalid_combinations"])
        rules[0]["members"] = ["meat", "unobtainium"]
        rules[0]["replace"] = []
        with pytest.raises(RuleCatalogError) as exc_info:
            RuleCatalog.from_dict(make_ruleset(invalid_combinations=rules))
        assert any("unobtainium" in err for err in exc_info.value.errors)

    def test_empty_substitute_list_fails(self):
        """Test that an empty substitute list fails to load."""
        subs = copy.deepcopy(DEFAULT_RULESET["substitutions"])
        subs["milk"] = []
        with pytest.raises(RuleCatalogError) as exc_info:
            RuleCatalog.from_dict(make_ruleset(substitutions=subs))
        assert any("milk" in err for err in exc_info.value.errors)

    def test_duplicate_rule_id_fails(self):
        """Test that duplicate rule ids fail to load."""
        rules = copy.deepcopy(DEFAULT_RULESET["invalid_combinations"])
        rules[1]["id"] = rules[0]["id"]
        with pytest.raises(RuleCatalogError):
            RuleCatalog.from_dict(make_ruleset(invalid_combinations=rules))

    def test_alias_to_unknown_ingredient_fails(self):
        """Test that an alias to an unknown ingredient fails to load."""
        aliases = dict(DEFAULT_RULESET["aliases"])
        aliases["spuds"] = "spud"
        with pytest.raises(RuleCatalogError):
            RuleCatalog.from_dict(make_ruleset(aliases=aliases))


class TestLoadRuleCatalog:

    def test_load_from_json_file(self, tmp_path):
        """Test loading the catalog from a JSON file."""
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(DEFAULT_RULESET), encoding="utf-8")
        catalog = load_rule_catalog(path)
        assert len(catalog.invalid_combinations) == len(DEFAULT_RULESET["invalid_combinations"])

    def test_missing_file_fails_fast(self, tmp_path):
        """Test that a missing rules file raises RuleCatalogError."""
        with pytest.raises(RuleCatalogError):
            load_rule_catalog(tmp_path / "missing.json")

    def test_broken_json_fails_fast(self, tmp_path):
        """Test that a broken rules file raises RuleCatalogError."""
        path = tmp_path / "rules.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RuleCatalogError):
            load_rule_catalog(path)
