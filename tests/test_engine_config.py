import json
from chefai.core.engine_config import EngineConfig, load_engine_config


def test_missing_file_uses_defaults(tmp_path, monkeypatch):
    """Test that a missing config file gives the defaults."""
    monkeypatch.delenv("CHEFAI_LLM_MODEL", raising=False)
    monkeypatch.delenv("CHEFAI_RULES_PATH", raising=False)
    assert load_engine_config(tmp_path / "missing.json") == EngineConfig()


def test_invalid_json_uses_defaults(tmp_path, monkeypatch):
    """Test that broken JSON gives the defaults."""
    monkeypatch.delenv("CHEFAI_LLM_MODEL", raising=False)
    monkeypatch.delenv("CHEFAI_RULES_PATH", raising=False)
    path = tmp_path / "engine_config.json"
    path.write_text("{broken", encoding="utf-8")
    assert load_engine_config(path) == EngineConfig()


def test_values_are_coerced(tmp_path, monkeypatch):
    """Test lenient coercion of strings, numbers and booleans."""
    monkeypatch.delenv("CHEFAI_LLM_MODEL", raising=False)
    monkeypatch.delenv("CHEFAI_RULES_PATH", raising=False)
    path = tmp_path / "engine_config.json"
    path.write_text(json.dumps({
        "taste_min_present_ratio": "0.75",
        "max_taste_suggestions": "2",
        "llm_enabled": "off",
        "rules_path": "  "
    }), encoding="utf-8")
    config = load_engine_config(path)
    assert config.taste_min_present_ratio == 0.75
    assert config.max_taste_suggestions == 2
    assert config.llm_enabled is False
    assert config.rules_path is None


def test_out_of_range_ratio_falls_back(tmp_path):
    """Test that a ratio outside (0, 1] falls back to 0.5."""
    path = tmp_path / "engine_config.json"
    path.write_text(json.dumps({"taste_min_present_ratio": 3}), encoding="utf-8")
    assert load_engine_config(path).taste_min_present_ratio == 0.5


def test_environment_overrides(tmp_path, monkeypatch):
    """Test that CHEFAI_* variables override the file."""
    monkeypatch.setenv("CHEFAI_LLM_MODEL", "gpt-4o")
    monkeypatch.setenv("CHEFAI_RULES_PATH", "/etc/chefai/rules.json")
    config = load_engine_config(tmp_path / "missing.json")
    assert config.llm_model == "gpt-4o"
    assert config.rules_path == "/etc/chefai/rules.json"
