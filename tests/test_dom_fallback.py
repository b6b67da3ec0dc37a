from bs4 import BeautifulSoup

from allmyrecipes.app.services.url_parsing.extractors.dom_fallback import (
    extract_recipe_from_dom,
    find_steps,
    find_title,
)


def soup_of(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def test_ordered_list_fallback_returns_all_items():
    html = """
    <html><body>
      <h1>Mystery Dish</h1>
      <ol>
        <li>One</li><li>Two</li><li>Three</li><li>Four</li><li>Five</li>
      </ol>
    </body></html>
    """
    parsed = extract_recipe_from_dom(soup_of(html))
    assert parsed.title == "Mystery Dish"
    assert parsed.ingredients == []
    assert parsed.steps == ["One", "Two", "Three", "Four", "Five"]


def test_title_prefers_meta_tags():
    html = """
    <html><head>
      <meta name="twitter:title" content="Twitter Title">
      <meta property="og:title" content="  OG   Title ">
    </head><body><h1>Heading</h1></body></html>
    """
    assert find_title(soup_of(html)) == "OG Title"
    assert find_title(soup_of("<html><body><p>none</p></body></html>")) == ""


def test_ingredient_selectors_need_two_items():
    html = """
    <html><body>
      <span itemprop="recipeIngredient">lonely egg</span>
      <div class="recipe-ingredients"><ul>
        <li> 2 cups
             flour</li>
        <li>1 tsp salt</li>
      </ul></div>
      <div class="recipe-instructions"><ol><li>Mix.</li><li>Bake.</li></ol></div>
    </body></html>
    """
    parsed = extract_recipe_from_dom(soup_of(html), "https://example.com/bread")
    assert parsed.ingredients == ["2 cups flour", "1 tsp salt"]
    assert parsed.steps == ["Mix.", "Bake."]
    assert parsed.source_url == "https://example.com/bread"


def test_paragraph_steps_when_container_has_no_list():
    html = """
    <html><body>
      <div id="method">
        <p>Toast the bread.</p>
        <p>Butter it generously.</p>
      </div>
    </body></html>
    """
    assert find_steps(soup_of(html)) == ["Toast the bread.", "Butter it generously."]


def test_ordered_list_fallback_is_capped():
    items = "".join(f"<li>Item {n}</li>" for n in range(60))
    steps = find_steps(soup_of(f"<html><body><ol>{items}</ol></body></html>"))
    assert len(steps) == 50
    assert steps[0] == "Item 0"


def test_empty_document_never_raises():
    parsed = extract_recipe_from_dom(soup_of(""))
    assert parsed.title == ""
    assert parsed.ingredients == []
    assert parsed.steps == []
