from allmyrecipes.app.services.url_parsing.parsing_utils import clean_text, coerce_text, dedupe_preserving_order


def test_clean_text_collapses_whitespace():
    assert clean_text("  2 cups\n\t flour ") == "2 cups flour"
    assert clean_text(None) == ""


def test_dedupe_is_case_insensitive_and_order_preserving():
    items = ["Salt", "  pepper ", "", "SALT", "Pepper", "Olive  oil", "   "]
    assert dedupe_preserving_order(items) == ["Salt", "pepper", "Olive oil"]


def test_dedupe_limit_applies_after_dedupe():
    items = ["a", "A", "b", "c", "d"]
    assert dedupe_preserving_order(items, limit=2) == ["a", "b"]
    assert dedupe_preserving_order([f"step {n}" for n in range(300)], limit=200)[-1] == "step 199"


def test_coerce_text():
    assert coerce_text(["", " 4 servings "]) == "4 servings"
    assert coerce_text(6) == "6"
    assert coerce_text(True) == ""
    assert coerce_text({"name": "x"}) == ""
