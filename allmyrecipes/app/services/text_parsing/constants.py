"""Static vocabularies and patterns for plain-text recipe parsing."""

import re

FRACTION_MAP = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅐": "1/7",
    "⅑": "1/9",
    "⅒": "1/10",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}
FRACTION_CHARS = "".join(FRACTION_MAP.keys())

LIGATURES = {
    "ﬀ": "ff",
    "ﬁ": "fi",
    "ﬂ": "fl",
    "ﬃ": "ffi",
    "ﬄ": "ffl",
    "ﬅ": "st",
    "ﬆ": "st",
}

BULLET = "•"
BULLET_GLYPHS = "•●▪◦■□◆◇▶►‣⁃∙○◘"

UNITS = (
    "teaspoons", "teaspoon", "tsp", "tablespoons", "tablespoon", "tbsp", "tbs",
    "cups", "cup", "pints", "pint", "pt", "quarts", "quart", "qt", "gallons", "gallon",
    "liters", "liter", "litres", "litre", "milliliters", "milliliter", "ml",
    "grams", "gram", "kilograms", "kilogram", "kg", "ounces", "ounce", "oz",
    "pounds", "pound", "lbs", "lb", "sticks", "stick", "cloves", "clove",
    "pinch", "pinches", "slices", "cans", "packages", "package", "packet", "pkt",
    "bunch", "bunches", "sprigs", "sprig", "handful",
)
# Only counted as units when glued to or directly after a number ("2 c", "500g").
NUMBER_BOUND_UNITS = ("c", "l", "g", "kg", "ml", "oz", "lb", "lbs", "can", "dash", "slice")

COOKING_VERBS = (
    "add", "bake", "beat", "blend", "boil", "braise", "bring", "broil", "brown", "brush",
    "chill", "chop", "combine", "cook", "cool", "cover", "cream", "cut", "deglaze", "dice",
    "drain", "drizzle", "fold", "fry", "garnish", "grate", "grease", "grill", "heat",
    "knead", "let", "line", "marinate", "melt", "microwave", "mix", "peel", "place", "pour",
    "preheat", "reduce", "remove", "rest", "roast", "saute", "sauté", "season", "sear",
    "serve", "sift", "simmer", "slice", "sprinkle", "stir", "strain", "toast", "transfer",
    "uncover", "whisk", "increase",
)

COMMON_FOODS = (
    "salt", "pepper", "oil", "olive", "garlic", "onion", "onions", "tomato", "tomatoes",
    "butter", "flour", "sugar", "egg", "eggs", "milk", "cream", "buttermilk", "vanilla",
    "yeast", "baking powder", "baking soda", "lemon", "lime", "water", "honey", "cheese",
    "chicken", "beef", "rice", "parsley", "cinnamon", "kosher", "granulated",
    "all-purpose",
)

PREP_QUALIFIERS = (
    "divided", "softened", "melted", "minced", "chopped", "diced", "sliced", "grated",
    "beaten", "crushed", "peeled", "toasted", "drained", "rinsed", "torn", "shredded",
    "room temperature", "to taste", "optional",
)

ABBREVIATIONS = frozenset(
    {"min", "mins", "sec", "secs", "hr", "hrs", "tsp", "tbsp", "oz", "lb", "lbs", "approx",
     "pkg", "pt", "qt", "vs", "mr", "mrs", "dr", "ca", "approximately"}
)

CONNECTIVES = (
    "Then", "Next", "Meanwhile", "After", "Before", "Once", "When", "Return", "Stir", "Add",
    "Bake", "Cook", "Transfer", "Let", "Serve", "Season", "Reduce", "Increase", "Whisk",
    "Simmer", "Boil", "Drain", "Finally",
)

TITLE_STOP_WORDS = frozenset(
    {"a", "an", "and", "as", "at", "but", "by", "for", "in", "of", "on", "or", "the", "to", "with"}
)

MAX_STEP_LENGTH = 220
TITLE_SCAN_LINES = 40
SERVINGS_SCAN_LINES = 50
PAGE_BREAK = "\n\n--- PAGE ---\n\n"


def _alternation(words) -> str:
    return "|".join(re.escape(w) for w in sorted(set(words), key=len, reverse=True))


BULLET_RE = re.compile(r"^\s*(?:[-*•]|\d{1,3}[.)])\s+")
STEP_MARKER_RE = re.compile(r"^\s*step\s*\d+\s*[:.)\-]?\s*", re.I)
EXPLICIT_STEP_RE = re.compile(r"\bstep\s*\d+\b", re.I)
NUMBER_PREFIX_RE = re.compile(r"^\d{1,3}\s*[.)]\s+")

QUANTITY_RE = re.compile(
    rf"(?<!\S)(?:\d+\s+\d+/\d+|\d+/\d+|\d+(?:[.,]\d+)?(?:\s*-\s*\d+(?:[.,]\d+)?)?|[{FRACTION_CHARS}])(?!\S)"
)
UNIT_RE = re.compile(
    rf"\b(?:{_alternation(UNITS)})\b|\d\s*(?:{_alternation(NUMBER_BOUND_UNITS)})\b",
    re.I,
)
PREP_QUALIFIER_RE = re.compile(rf",\s*(?:{_alternation(PREP_QUALIFIERS)})\b", re.I)
MULTIPLIER_RE = re.compile(r"^\d{1,2}\s*x(?:\s+(?=\d)|\b)", re.I)
FOOD_RE = re.compile(rf"\b(?:{_alternation(COMMON_FOODS)})\b", re.I)
VERB_RE = re.compile(rf"\b(?:{_alternation(COOKING_VERBS)})\b", re.I)
LEADING_VERB_RE = re.compile(rf"^(?:{_alternation(COOKING_VERBS)})\b", re.I)
SENTENCE_END_RE = re.compile(r"[.!?]$")
DURATION_TEMPERATURE_RE = re.compile(
    r"\b(?:minutes?|mins?|hours?|hrs?|seconds?|degrees)\b|°|\b\d{2,3}\s*[FC]\b",
    re.I,
)
TIME_LABEL_RE = re.compile(r"\b(?:prep|cook|cooking|total|active)\s*time\b", re.I)
SERVINGS_LABEL_RE = re.compile(r"^\s*(?:servings?|serves|yield|yields|makes)\b", re.I)
SERVINGS_LINE_RE = re.compile(r"^\s*(?:servings?|serves|yield|yields|makes)\b[:\-\s]*(.+)$", re.I)

HEADING_INGREDIENTS_RE = re.compile(
    r"^\s*(?:ingredients?(?:\s*(?:&|and)\s*substitutions?)?(?:\s+list)?)"
    r"\s*:?\s*$",
    re.I,
)
HEADING_STEPS_RE = re.compile(
    r"^\s*(?:instructions?|directions?|method|preparation|steps?|how to (?:make|cook)(?: it)?)\s*:?\s*$",
    re.I,
)
HEADING_IGNORE_RE = re.compile(
    r"^\s*(?:equipment(?: needed)?|variations?|notes?|recipe notes|tips?|nutrition(?: facts| information)?"
    r"|tools?|storage|substitutions?|make[- ]ahead)\s*:?\s*$",
    re.I,
)
SUBHEADING_RE = re.compile(r"^[A-Z][A-Za-z0-9\s\-,'&]{0,40}:\s*$")
TITLE_STOP_RE = re.compile(
    r"^(?:ingredients?|directions?|instructions?|method|preparation|steps?|notes?|nutrition"
    r"|servings?|serves|yield|prep time|cook time|total time|course|cuisine)\b",
    re.I,
)

NOISE_PATTERNS = (
    re.compile(r"^\s*(?:ad|advertisement|sponsored)\s*$", re.I),
    re.compile(r"https?://", re.I),
    re.compile(r"^\s*(?:see\s+the\s+recipe\s+card|see\s+(?:above|below)).*$", re.I),
    re.compile(r"^\s*(?:jump to recipe|print recipe|pin (?:it|recipe)|rate this recipe)\b", re.I),
    re.compile(r"^[\s\-–—*•_=]+$"),
    re.compile(r"^\s*\(.*\)\s*$"),
    re.compile(r"^\s*-+\s*page\s*-+\s*$", re.I),
)
CAPTION_HINTS_RE = re.compile(r"\b(?:flat lay|photo|image|pictured|shown|laid out)\b", re.I)
