import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from chefai.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    taste_min_present_ratio: float = 0.5
    max_taste_suggestions: int = 5
    llm_enabled: bool = True
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.1
    rules_path: Optional[str] = None


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return default


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_float(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return default
    return default


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _config_path() -> Path:
    return Path(__file__).resolve().parents[2] / "config" / "engine_config.json"


def load_engine_config(path: Optional[Path] = None) -> EngineConfig:
    """Load engine settings from JSON, then apply environment overrides.

    A missing file yields defaults. Broken JSON is logged and also yields
    defaults, since every setting has a safe fallback.
    """
    config_path = path or _config_path()
    data: Dict[str, Any] = {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        pass
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid engine config JSON at {config_path}: {exc}")

    if not isinstance(data, dict):
        logger.warning(f"Engine config at {config_path} is not an object, using defaults")
        data = {}

    ratio = _as_float(data.get("taste_min_present_ratio"), 0.5)
    if not 0.0 < ratio <= 1.0:
        logger.warning(f"taste_min_present_ratio={ratio} out of range (0, 1], using 0.5")
        ratio = 0.5

    return EngineConfig(
        taste_min_present_ratio=ratio,
        max_taste_suggestions=max(0, _as_int(data.get("max_taste_suggestions"), 5)),
        llm_enabled=_as_bool(data.get("llm_enabled"), True),
        llm_model=os.getenv("CHEFAI_LLM_MODEL") or str(data.get("llm_model") or "gpt-4o-mini"),
        llm_temperature=_as_float(data.get("llm_temperature"), 0.1),
        rules_path=_as_optional_str(os.getenv("CHEFAI_RULES_PATH")) or _as_optional_str(data.get("rules_path"))
    )


engine_config = load_engine_config()
