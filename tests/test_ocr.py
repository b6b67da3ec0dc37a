import io

import pytesseract
import pytest
from PIL import Image

from allmyrecipes.app.core.config import get_settings
from allmyrecipes.app.services import ocr_service
from allmyrecipes.app.services.ocr_tesseract import _lines_from_data, _preprocess

PAGE_ONE = "Chocolate Cake\nIngredients\n● 2 cups ﬂour\nl cup sugar"
PAGE_TWO = "Instructions\nl. Preheat oven to 350F.\n2. Mix flour and sugar."


def png_bytes(width=40, height=20) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), "white").save(buf, format="PNG")
    return buf.getvalue()


def scripted_engine(*results):
    queue = list(results)

    def engine(image):
        result = queue.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    return engine


def test_pages_are_normalized_combined_and_parsed():
    engine = scripted_engine((PAGE_ONE, {"confidence": 90.0}), (PAGE_TWO, {"confidence": 70.0}))
    result = ocr_service.recognize_images([png_bytes(), png_bytes()], engine)

    assert [page.index for page in result.pages] == [0, 1]
    assert result.pages[0].text == "Chocolate Cake\nIngredients\n• 2 cups flour\n1 cup sugar"
    assert result.text.count("--- PAGE ---") == 1
    assert result.confidence == pytest.approx(80.0)
    assert result.recipe.title == "Chocolate Cake"
    assert result.recipe.ingredients == ["2 cups flour", "1 cup sugar"]
    assert result.recipe.steps == ["Preheat oven to 350F", "Mix flour and sugar"]


def test_failed_page_is_recorded_and_lowers_confidence():
    engine = scripted_engine(
        pytesseract.TesseractError(1, "tesseract crashed"),
        (PAGE_ONE, {"confidence": 60.0}),
    )
    result = ocr_service.recognize_images([png_bytes(), png_bytes()], engine)

    assert result.pages[0].error.startswith("TesseractError")
    assert result.pages[0].confidence == 0
    assert result.pages[1].error is None
    assert result.confidence == pytest.approx(30.0)
    assert result.recipe.title == "Chocolate Cake"


def test_undecodable_image_does_not_stop_other_pages():
    engine = scripted_engine((PAGE_TWO, {"confidence": 50.0}))
    result = ocr_service.recognize_images([b"not an image", png_bytes()], engine)

    assert "UnidentifiedImageError" in result.pages[0].error
    assert result.pages[1].char_count > 0
    assert result.recipe.steps == ["Preheat oven to 350F", "Mix flour and sugar"]


def test_oversized_image_does_not_stop_other_pages(monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10_000)
    engine = scripted_engine((PAGE_TWO, {"confidence": 50.0}))
    result = ocr_service.recognize_images([png_bytes(400, 200), png_bytes()], engine)

    assert result.pages[0].error.startswith("DecompressionBombError")
    assert result.pages[1].error is None
    assert result.confidence == pytest.approx(25.0)


def test_engine_value_error_is_recorded_on_its_page():
    engine = scripted_engine(ValueError("bad image mode"), (PAGE_ONE, {"confidence": 40.0}))
    result = ocr_service.recognize_images([png_bytes(), png_bytes()], engine)

    assert result.pages[0].error == "ValueError: bad image mode"
    assert result.pages[1].char_count > 0
    assert result.recipe.title == "Chocolate Cake"


def test_preprocess_bounds_image_size():
    large = _preprocess(Image.new("RGB", (4000, 1000), "white"), max_side=2000)
    assert large.mode == "L"
    assert max(large.size) == 2000

    small = _preprocess(Image.new("RGB", (300, 200), "white"), max_side=2000)
    assert small.size == (600, 400)


def test_lines_rebuilt_from_word_boxes():
    data = {
        "text": ["", "1", "cup", "sugar", "2", "eggs", "Mix", "well."],
        "block_num": [1, 1, 1, 1, 1, 1, 2, 2],
        "par_num": [1, 1, 1, 1, 1, 1, 1, 1],
        "line_num": [0, 1, 1, 1, 2, 2, 1, 1],
    }
    assert _lines_from_data(data) == "1 cup sugar\n2 eggs\n\nMix well."


def test_ocr_endpoint(client):
    files = [
        ("images", ("one.png", png_bytes(40, 20), "image/png")),
        ("images", ("two.png", png_bytes(60, 30), "image/png")),
    ]
    res = client.post("/api/ocr", files=files)
    assert res.status_code == 200
    body = res.json()
    assert [page["index"] for page in body["pages"]] == [0, 1]
    assert body["pages"][0] == {"index": 0, "confidence": 80.0, "char_count": len("page 40x20"), "error": None}
    assert body["confidence"] == pytest.approx(80.0)
    assert "recipe" in body


def test_ocr_endpoint_limits(client, monkeypatch):
    monkeypatch.setenv("OCR_MAX_IMAGES", "1")
    monkeypatch.setenv("OCR_MAX_IMAGE_BYTES", "100")
    get_settings.cache_clear()
    too_many = [("images", (f"{n}.png", png_bytes(), "image/png")) for n in range(2)]
    assert client.post("/api/ocr", files=too_many).status_code == 400

    big = [("images", ("big.png", b"x" * 101, "image/png"))]
    assert client.post("/api/ocr", files=big).status_code == 413
