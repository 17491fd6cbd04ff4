from fastapi import FastAPI, HTTPException, Query, Request
from typing import List
import time
import uuid
from chefai.models import (
    AnalysisResult,
    AnalyzeIngredientsRequest,
    DietaryPreferences,
    Ingredient,
    IngredientDetail,
    ValidateIngredientsRequest,
    ValidationRecord,
)
from chefai.services.ai_service import ai_service
from chefai.services.compatibility_evaluator import compatibility_evaluator
from chefai.services.dietary_classifier import dietary_classifier
from chefai.services.result_formatter import to_analysis, to_validation_record
from chefai.services.rule_catalog import rule_catalog
from chefai.core.logging_config import get_logger

app = FastAPI(title="ChefAI Ingredient Compatibility API", version="0.1.0")
logger = get_logger(__name__)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = str(uuid.uuid4())
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000.0
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} "
        f"{duration_ms:.1f}ms request_id={request_id}"
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/")
def read_root():
    return {"message": "Welcome to the ChefAI Ingredient Compatibility API. Visit /docs for documentation."}


@app.get("/api/ingredients", response_model=List[Ingredient])
def list_ingredients(
    vegetarian: bool = False,
    vegan: bool = False,
    gluten_free: bool = Query(default=False, alias="glutenFree"),
    high_protein: bool = Query(default=False, alias="highProtein")
):
    """
    List catalog ingredients that satisfy every enabled dietary flag.
    """
    preferences = DietaryPreferences(
        vegetarian=vegetarian,
        vegan=vegan,
        gluten_free=gluten_free,
        high_protein=high_protein
    )
    return dietary_classifier.filter_catalog(preferences)


@app.get("/api/ingredients/{name}", response_model=IngredientDetail)
def get_ingredient(name: str):
    ingredient = rule_catalog.ingredient(name)
    if ingredient is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error_code": "INGREDIENT_NOT_FOUND",
                "message": f"'{name}' is not in the ingredient catalog."
            }
        )
    return IngredientDetail(
        ingredient=ingredient,
        categories=rule_catalog.categories_of(ingredient.name),
        substitutes=rule_catalog.substitutes_for(ingredient.name),
        cooking_methods=rule_catalog.cooking_methods(ingredient.name)
    )


@app.get("/api/rules")
def get_rules():
    """
    The rule catalog as it is handed to the LLM as grounding context.
    """
    return rule_catalog.to_context()


@app.post(
    "/api/analyze-ingredients",
    response_model=AnalysisResult,
    response_model_exclude_none=True
)
def analyze_ingredients(request: AnalyzeIngredientsRequest):
    """
    Check compatibility and propose substitutions or taste improvements.
    """
    verdict = compatibility_evaluator.evaluate(request.ingredients, request.dietary_preferences)
    return to_analysis(verdict)


@app.post(
    "/api/validate-ingredients",
    response_model=ValidationRecord,
    response_model_exclude_none=True
)
def validate_ingredients(request: ValidateIngredientsRequest):
    """
    Validate a selection and return the record stored alongside a recipe.

    Hard rule violations found by the rule engine are final. Otherwise, when
    `useLlm` is set and the LLM answers with a schema-valid record, that
    record is returned instead.
    """
    verdict = compatibility_evaluator.evaluate(request.ingredients, request.dietary_preferences)
    record = to_validation_record(verdict)

    if request.use_llm and verdict.broken_rule_severity != "hard":
        normalized = compatibility_evaluator.normalize(request.ingredients)
        llm_record = ai_service.validate_ingredients(normalized)
        if llm_record is not None:
            logger.info(f"Using LLM validation for {normalized}: isValid={llm_record.is_valid}")
            return llm_record.model_dump(by_alias=True, exclude_none=True)

    return record
