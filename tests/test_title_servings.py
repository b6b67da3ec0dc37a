from allmyrecipes.app.services.text_parsing.title_servings import (
    clean_title,
    detect_servings,
    guess_title,
    to_title_case,
)


def test_title_is_first_plausible_line():
    text = "Jump to Recipe\n- 2 cups flour\nGrandma's Apple Pie\nIngredients\n2 apples"
    assert guess_title(text) == "Grandma's Apple Pie"


def test_title_scan_stops_at_section_heading():
    text = "Ingredients\n2 cups flour\nBanana Bread Deluxe"
    assert guess_title(text) == ""


def test_title_suffixes_and_quotes_are_removed():
    assert clean_title("Beef Stir-fry - Example Kitchen") == "Beef Stir-fry"
    assert clean_title("Lemon Bars | Sweet Site") == "Lemon Bars"
    assert clean_title("\"Best Brownies Recipe\"") == "Best Brownies"


def test_title_case_option():
    assert to_title_case("CHICKEN AND RICE SOUP") == "Chicken and Rice Soup"
    assert guess_title("the best mac and cheese\nServes 4", title_case=True) == "The Best Mac and Cheese"


def test_single_word_title_falls_back_to_first_line():
    assert guess_title("Gazpacho\n\nIngredients\n4 tomatoes") == "Gazpacho"


def test_servings_detected_near_top():
    text = "Tomato Soup\nServes: 4 (as a starter)\nIngredients\n4 tomatoes"
    assert detect_servings(text) == "4"


def test_servings_detected_near_bottom():
    lines = ["Big Batch Chili"] + [f"{n} cups stock" for n in range(1, 60)] + ["Makes 12 bowls."]
    assert detect_servings("\n".join(lines)) == "12 bowls"


def test_servings_ignores_step_lines():
    assert detect_servings("1. Serves as a side or a main\nYield: 2 loaves") == "2 loaves"
    assert detect_servings("Pancakes\n2 eggs") == ""
