import os
import json
from typing import List, Optional
from openai import OpenAI
from dotenv import load_dotenv
from pydantic import ValidationError
from chefai.core.engine_config import EngineConfig, engine_config
from chefai.core.logging_config import get_logger
from chefai.models import ValidationRecord
from chefai.services.rule_catalog import RuleCatalog, rule_catalog

load_dotenv()

logger = get_logger(__name__)


class AIService:
    def __init__(self, catalog: Optional[RuleCatalog] = None, config: Optional[EngineConfig] = None):
        self.catalog = catalog or rule_catalog
        self.config = config or engine_config
        api_key = os.getenv("OPENAI_API_KEY")
        if not self.config.llm_enabled:
            logger.info("LLM validation disabled by configuration.")
            self.client = None
        elif not api_key:
            logger.warning("OPENAI_API_KEY not set. LLM validation will be disabled.")
            self.client = None
        else:
            self.client = OpenAI(api_key=api_key)

    def build_validation_prompt(self, ingredients: List[str]) -> str:
        """Format the validation prompt with the rule catalog as grounding context."""
        ruleset = json.dumps(self.catalog.to_context(), indent=2)
        return f"""You are an expert culinary AI assistant that validates ingredient combinations.
Your primary responsibility is to apply science-based and cultural cooking logic.
Use the provided rules to determine if the user's selected ingredients are compatible.

### Ruleset ###
{ruleset}
### End Ruleset ###

### User's Ingredients ###
{", ".join(ingredients)}

### Your Task ###
1. Analyze the user's ingredients against the "rules" and "categories" in the ruleset.
2. If you find an incompatibility (a broken rule), set "isValid" to false.
3. Provide the "reason" from the broken rule.
4. Suggest substitutions based on the "substitutions" field of the broken rule, as a list of
   {{"ingredientToReplace": "...", "substitute": "..."}} objects. Map each substitute to the
   specific ingredient that needs to be replaced.
5. Specify the "ruleType" ("hard" or "soft") of the rule that was broken.
6. If more than one rule is broken, prioritize the "hard" rule.
7. If all ingredients are compatible, set "isValid" to true and omit the other fields.

Return ONLY a JSON object with the keys "isValid", "reason", "substitutions" and "ruleType".
"""

    def validate_ingredients(self, ingredients: List[str]) -> Optional[ValidationRecord]:
        """
        Ask the LLM to validate a selection against the rule catalog.

        Args:
            ingredients: Normalized ingredient names

        Returns:
            A schema-validated ValidationRecord, or None if the LLM is
            unavailable or its reply does not match the schema
        """
        if not self.client or not ingredients:
            return None

        prompt = self.build_validation_prompt(ingredients)

        try:
            response = self.client.chat.completions.create(
                model=self.config.llm_model,
                messages=[
                    {"role": "system", "content": "You are a precise culinary rules checker. Always return valid JSON."},
                    {"role": "user", "content": prompt}
                ],
                temperature=self.config.llm_temperature,
                response_format={"type": "json_object"}
            )
            content = response.choices[0].message.content
        except Exception as e:
            logger.error(f"LLM validation failed: {e}")
            return None

        return self.parse_validation_reply(content)

    def parse_validation_reply(self, content: Optional[str]) -> Optional[ValidationRecord]:
        if not content:
            logger.warning("LLM validation returned an empty reply.")
            return None
        try:
            return ValidationRecord.model_validate(json.loads(content))
        except json.JSONDecodeError as e:
            logger.warning(f"LLM validation reply is not JSON: {e}")
        except ValidationError as e:
            logger.warning(f"LLM validation reply failed schema validation: {e}")
        return None


ai_service = AIService()
