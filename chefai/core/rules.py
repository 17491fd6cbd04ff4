from typing import Any, Dict, List

# --- Ingredient Catalog ---
# Canonical lower-case names with dietary attributes
INGREDIENTS: List[Dict[str, Any]] = [
    # Meats & Seafood
    {"name": "chicken", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "beef", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "lamb", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "goat", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "turkey", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "pork", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "bacon", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "ham", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "raw chicken", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "raw beef", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "raw lamb", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "fish", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "salmon", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "tuna", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "cod", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "shrimp", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "lobster", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "crab", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "oyster", "vegetarian": False, "vegan": False, "gluten_free": True, "high_protein": True},

    # Dairy & Eggs
    {"name": "egg", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "milk", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "raw milk", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "cheese", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "unpasteurized cheese", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "parmesan", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "mozzarella", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "cheddar", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "feta", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "cottage cheese", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "yogurt", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "greek yogurt", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": True},
    {"name": "butter", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": False},
    {"name": "cream", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": False},
    {"name": "ice cream", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": False},

    # Plant-Based Proteins
    {"name": "tofu", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "tempeh", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "lentils", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "chickpeas", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "black beans", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "kidney beans", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "edamame", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "seitan", "vegetarian": True, "vegan": True, "gluten_free": False, "high_protein": True},
    {"name": "nutritional yeast", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},

    # Grains & Flours
    {"name": "quinoa", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "rice", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "brown rice", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "oats", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "pasta", "vegetarian": True, "vegan": True, "gluten_free": False, "high_protein": False},
    {"name": "bread", "vegetarian": True, "vegan": True, "gluten_free": False, "high_protein": False},
    {"name": "flour", "vegetarian": True, "vegan": True, "gluten_free": False, "high_protein": False},
    {"name": "corn", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "almond flour", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "coconut flour", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},

    # Vegetables
    {"name": "bitter gourd", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "mushroom", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "spinach", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "kale", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "broccoli", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "carrot", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "potato", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "sweet potato", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "tomato", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "onion", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "garlic", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "bell pepper", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "zucchini", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "avocado", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "cabbage", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "cauliflower", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "peas", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},

    # Fruits
    {"name": "lemon", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "lime", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "orange", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "banana", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "apple", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "mango", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "pineapple", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "blueberries", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "strawberries", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},

    # Nuts & Seeds
    {"name": "almonds", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "walnuts", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "cashews", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "peanuts", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "chia seeds", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "flax seeds", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "pumpkin seeds", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "sunflower seeds", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},

    # Oils, Sweeteners, Condiments & Drinks
    {"name": "olive oil", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "honey", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": False},
    {"name": "maple syrup", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "sugar", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "chocolate", "vegetarian": True, "vegan": False, "gluten_free": True, "high_protein": False},
    {"name": "soy sauce", "vegetarian": True, "vegan": True, "gluten_free": False, "high_protein": False},
    {"name": "mustard", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "peanut butter", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "vinegar", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "apple cider vinegar", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "balsamic vinegar", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "wine", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "beer", "vegetarian": True, "vegan": True, "gluten_free": False, "high_protein": False},
    {"name": "rum", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "vodka", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "hot water", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},

    # Plant-Based Milks
    {"name": "almond milk", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "soy milk", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": True},
    {"name": "coconut milk", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "oat milk", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},

    # Herbs & Spices
    {"name": "basil", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "cilantro", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "rosemary", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "cinnamon", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "cumin", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "paprika", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "cayenne pepper", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "ginger", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
    {"name": "coriander", "vegetarian": True, "vegan": True, "gluten_free": True, "high_protein": False},
]

# --- Aliases ---
# Maps common free-text spellings (key) to the canonical catalog name (value)
INGREDIENT_ALIASES: Dict[str, str] = {
    "chicken breast": "chicken",
    "chicken thigh": "chicken",
    "ground beef": "beef",
    "steak": "beef",
    "prawns": "shrimp",
    "prawn": "shrimp",
    "eggs": "egg",
    "mushrooms": "mushroom",
    "carrots": "carrot",
    "potatoes": "potato",
    "sweet potatoes": "sweet potato",
    "tomatoes": "tomato",
    "onions": "onion",
    "bell peppers": "bell pepper",
    "bananas": "banana",
    "apples": "apple",
    "oranges": "orange",
    "oysters": "oyster",
    "almond": "almonds",
    "walnut": "walnuts",
    "cashew": "cashews",
    "peanut": "peanuts",
    "yoghurt": "yogurt",
    "parmigiano": "parmesan",
}

# --- Categories ---
# A rule member naming a category matches any of its ingredients
INGREDIENT_CATEGORIES: Dict[str, List[str]] = {
    "meat": ["chicken", "beef", "lamb", "goat", "turkey", "pork", "bacon", "ham"],
    "dairy": ["milk", "cheese", "parmesan", "mozzarella", "cheddar", "feta", "cottage cheese",
              "yogurt", "greek yogurt", "butter", "cream", "ice cream"],
    "pork": ["pork", "bacon", "ham"],
    "alcohol": ["wine", "beer", "rum", "vodka"],
    "seafood": ["fish", "salmon", "tuna", "cod", "shrimp", "lobster", "crab", "oyster"],
    "fish": ["fish", "salmon", "tuna", "cod"],
    "cheese": ["cheese", "parmesan", "mozzarella", "cheddar", "feta", "cottage cheese"],
    "yogurt": ["yogurt", "greek yogurt"],
    "raw_meat": ["raw chicken", "raw beef", "raw lamb"],
    "raw_dairy": ["raw milk", "unpasteurized cheese"],
    "citrus": ["lemon", "lime", "orange"],
    "fruit": ["banana", "apple", "mango", "pineapple", "blueberries", "strawberries"],
    "vinegar": ["vinegar", "apple cider vinegar", "balsamic vinegar"],
    "dessert": ["chocolate", "ice cream"],
    "nuts": ["almonds", "walnuts", "cashews", "peanuts"],
}

# --- Invalid Combinations ---
# Checked in declaration order; the first matching rule of the highest severity wins
INVALID_COMBINATIONS: List[Dict[str, Any]] = [
    {
        "id": "R001",
        "name": "Meat + Dairy",
        "severity": "hard",
        "members": ["meat", "dairy"],
        "replace": ["dairy"],
        "reason": "In many dietary traditions (e.g., Kosher), meat and dairy cannot be cooked together. It may also cause digestion issues.",
    },
    {
        "id": "R002",
        "name": "Pork + Alcohol",
        "severity": "hard",
        "members": ["pork", "alcohol"],
        "reason": "In Halal and Kosher diets, pork and alcohol are strictly prohibited and cannot be combined.",
    },
    {
        "id": "R003",
        "name": "Raw Meat + Raw Dairy",
        "severity": "hard",
        "members": ["raw_meat", "raw_dairy"],
        "reason": "Combining raw meat and raw dairy increases the risk of bacterial contamination (e.g., Salmonella, E. coli).",
    },
    {
        "id": "R004",
        "name": "Meat + Chocolate",
        "severity": "hard",
        "members": ["meat", "chocolate"],
        "replace": ["chocolate"],
        "reason": "Meat and chocolate together do not form a valid savory or sweet base for a recipe.",
    },
    {
        "id": "R005",
        "name": "Seafood + Milk",
        "severity": "hard",
        "members": ["seafood", "milk"],
        "replace": ["milk"],
        "reason": "Seafood cooked with milk is avoided in many traditions because it can cause digestion issues.",
    },
    {
        "id": "R006",
        "name": "Fruit + Fish",
        "severity": "hard",
        "members": ["fruit", "fish"],
        "replace": ["fruit"],
        "reason": "Sweet fruit clashes with the flavor of fish; only citrus is commonly paired with it.",
    },
    {
        "id": "R007",
        "name": "Vinegar + Milk",
        "severity": "hard",
        "members": ["vinegar", "milk"],
        "replace": ["vinegar"],
        "reason": "Vinegar makes milk curdle immediately.",
    },
    {
        "id": "R008",
        "name": "Citrus + Yogurt",
        "severity": "hard",
        "members": ["citrus", "yogurt"],
        "replace": ["citrus"],
        "reason": "Citrus and yogurt curdle and their acidity clashes.",
    },
    {
        "id": "R009",
        "name": "Banana + Potato",
        "severity": "hard",
        "members": ["banana", "potato"],
        "replace": ["banana"],
        "reason": "Starchy potato with sweet banana does not make a workable recipe base.",
    },
    {
        "id": "R010",
        "name": "Onion + Milk",
        "severity": "hard",
        "members": ["onion", "milk"],
        "replace": ["milk"],
        "reason": "Onion and milk clash in flavor and can cause digestive issues.",
    },
    {
        "id": "R011",
        "name": "Honey + Hot Water",
        "severity": "hard",
        "members": ["honey", "hot water"],
        "replace": ["hot water"],
        "reason": "Heating honey in hot water destroys its nutrients and turns it bitter.",
    },
    {
        "id": "R012",
        "name": "Bitter Gourd + Dairy",
        "severity": "hard",
        "members": ["bitter gourd", "dairy"],
        "replace": ["dairy"],
        "reason": "Bitter gourd combined with dairy can cause digestive issues.",
    },
    {
        "id": "R101",
        "name": "Seafood + Cheese",
        "severity": "soft",
        "members": ["seafood", "cheese"],
        "replace": ["cheese"],
        "reason": "Seafood and cheese are generally avoided together in many cuisines due to strong clashing flavors. Some exceptions exist (e.g., Italian seafood pasta with parmesan).",
    },
    {
        "id": "R102",
        "name": "Fruit + Meat",
        "severity": "soft",
        "members": ["fruit", "meat"],
        "replace": ["fruit"],
        "reason": "Fruit with meat is an unusual pairing, although some classics exist (e.g., apple with pork).",
    },
    {
        "id": "R103",
        "name": "Garlic + Sweet Dessert",
        "severity": "soft",
        "members": ["garlic", "dessert"],
        "replace": ["garlic"],
        "reason": "Garlic usually clashes with sweet desserts.",
    },
]

# --- Preferred Combinations ---
# Informational only; partial matches drive taste suggestions
PREFERRED_COMBINATIONS: List[Dict[str, Any]] = [
    {"id": "P001", "name": "Aromatic base", "members": ["tomato", "onion", "garlic"]},
    {"id": "P002", "name": "Caprese", "members": ["tomato", "basil", "mozzarella"]},
    {"id": "P003", "name": "Stir-fry base", "members": ["garlic", "ginger", "soy sauce"]},
    {"id": "P004", "name": "Chicken and rice", "members": ["chicken", "rice", "onion"]},
    {"id": "P005", "name": "Hummus", "members": ["chickpeas", "lemon", "garlic", "olive oil"]},
    {"id": "P006", "name": "Roast potatoes", "members": ["potato", "rosemary", "olive oil"]},
    {"id": "P007", "name": "Rice and beans", "members": ["rice", "black beans", "corn"]},
    {"id": "P008", "name": "Lentil curry", "members": ["lentils", "coconut milk", "cumin"]},
    {"id": "P009", "name": "Salmon with lemon", "members": ["salmon", "lemon"]},
]

# --- Substitutions ---
# Ordered best-first; the evaluator proposes the first one that fits the selection
SUBSTITUTIONS: Dict[str, List[str]] = {
    "milk": ["soy milk", "almond milk", "cream", "yogurt"],
    "cheese": ["nutritional yeast", "olive oil", "tofu"],
    "parmesan": ["nutritional yeast", "lemon zest"],
    "mozzarella": ["tofu", "avocado"],
    "cheddar": ["nutritional yeast"],
    "feta": ["tofu"],
    "cottage cheese": ["tofu"],
    "butter": ["olive oil", "coconut milk"],
    "cream": ["coconut milk", "oat milk"],
    "yogurt": ["coconut milk", "tofu"],
    "greek yogurt": ["coconut milk", "tofu"],
    "ice cream": ["sorbet"],
    "egg": ["flax seeds", "chia seeds"],
    "honey": ["maple syrup", "sugar"],
    "chicken": ["tofu", "tempeh", "chickpeas"],
    "beef": ["mushroom", "lentils", "seitan"],
    "lamb": ["chickpeas", "mushroom"],
    "goat": ["chickpeas"],
    "turkey": ["tempeh", "tofu"],
    "pork": ["chicken", "beef", "lamb"],
    "bacon": ["turkey", "mushroom"],
    "ham": ["turkey"],
    "fish": ["tofu"],
    "salmon": ["tofu"],
    "tuna": ["chickpeas"],
    "shrimp": ["mushroom", "tofu"],
    "wine": ["grape juice", "pomegranate juice", "apple cider vinegar"],
    "beer": ["vegetable stock"],
    "rum": ["grape juice"],
    "vodka": ["grape juice"],
    "chocolate": ["cumin", "paprika"],
    "vinegar": ["mustard"],
    "apple cider vinegar": ["mustard"],
    "balsamic vinegar": ["mustard"],
    "lemon": ["sumac"],
    "lime": ["sumac"],
    "orange": ["carrot"],
    "banana": ["carrot", "sweet potato"],
    "apple": ["onion", "cabbage"],
    "mango": ["bell pepper"],
    "pineapple": ["bell pepper"],
    "strawberries": ["tomato"],
    "blueberries": ["beetroot"],
    "hot water": ["warm water"],
    "garlic": ["cinnamon"],
    "pasta": ["rice", "zucchini"],
    "bread": ["corn", "rice"],
    "flour": ["almond flour", "coconut flour"],
    "seitan": ["tofu", "tempeh"],
    "soy sauce": ["tamari", "coconut aminos"],
}

# --- Cooking Methods ---
COOKING_METHODS: Dict[str, List[str]] = {
    "chicken": ["grill", "roast", "saute", "poach"],
    "beef": ["grill", "braise", "roast", "stir-fry"],
    "lamb": ["roast", "braise", "grill"],
    "pork": ["roast", "braise", "grill"],
    "fish": ["bake", "pan-fry", "steam", "grill"],
    "salmon": ["bake", "pan-sear", "grill"],
    "shrimp": ["saute", "grill", "boil"],
    "egg": ["boil", "scramble", "poach", "fry"],
    "tofu": ["pan-fry", "bake", "stir-fry"],
    "tempeh": ["steam", "pan-fry", "bake"],
    "lentils": ["simmer", "boil"],
    "chickpeas": ["simmer", "roast"],
    "rice": ["boil", "steam"],
    "quinoa": ["boil", "steam"],
    "pasta": ["boil"],
    "potato": ["roast", "boil", "mash", "bake"],
    "sweet potato": ["roast", "bake", "mash"],
    "broccoli": ["steam", "roast", "stir-fry"],
    "spinach": ["saute", "wilt"],
    "mushroom": ["saute", "roast", "grill"],
    "onion": ["saute", "caramelize", "roast"],
    "garlic": ["saute", "roast"],
    "tomato": ["roast", "simmer"],
    "zucchini": ["grill", "saute"],
    "cauliflower": ["roast", "steam"],
}

DEFAULT_RULESET: Dict[str, Any] = {
    "ingredients": INGREDIENTS,
    "aliases": INGREDIENT_ALIASES,
    "categories": INGREDIENT_CATEGORIES,
    "invalid_combinations": INVALID_COMBINATIONS,
    "preferred_combinations": PREFERRED_COMBINATIONS,
    "substitutions": SUBSTITUTIONS,
    "cooking_methods": COOKING_METHODS,
}
