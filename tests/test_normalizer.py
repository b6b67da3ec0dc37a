from allmyrecipes.app.services.text_parsing.normalizer import normalize_text


def test_ocr_numeral_marker_becomes_one():
    assert normalize_text("l. Preheat oven") == "1. Preheat oven"
    assert normalize_text("I) Mix well") == "1. Mix well"


def test_ocr_numeral_before_unit_becomes_quantity():
    assert normalize_text("l cup sugar") == "1 cup sugar"
    assert normalize_text("lemon zest") == "lemon zest"


def test_fractions_are_expanded():
    assert normalize_text("1½ cups flour") == "1 1/2 cups flour"
    assert normalize_text("¾ tsp salt") == "3/4 tsp salt"


def test_typography_is_straightened():
    text = "“Best” cake – Mom’s ﬂour mix™"
    assert normalize_text(text) == "\"Best\" cake - Mom's flour mix"


def test_bullets_are_unified():
    assert normalize_text("● 2 eggs\n▪ 1 cup milk") == "• 2 eggs\n• 1 cup milk"


def test_whitespace_and_blank_lines():
    text = "  Pancakes\r\n\r\n\r\n\r\nMix   the\tbatter thor-\noughly  "
    assert normalize_text(text) == "Pancakes\n\nMix the batter thoroughly"


def test_empty_input():
    assert normalize_text("") == ""
    assert normalize_text(None) == ""


def test_normalization_is_idempotent():
    samples = [
        "l. Preheat oven to 350°F\nl cup sugar",
        "Chocolate Cake™\r\n\r\n\r\nIngredients\n● 1½ cups ﬂour\n· 2 eggs",
        "Step 1 – Whisk “well”; then rest ⅓ of it.\n\n\n\nServes 4",
        "I. Mix\n  ▶ 2⁄3 cup cream  \nstir-\nring",
        "½I)½-lb u\nb ·­ ·\t–",
        "salt · · pepper",
    ]
    for sample in samples:
        once = normalize_text(sample)
        assert normalize_text(once) == once


def test_adjacent_middle_dots_all_become_bullets():
    assert normalize_text("salt · · pepper") == "salt • • pepper"
    assert normalize_text("·2 eggs") == "·2 eggs"
