from allmyrecipes.app.services.text_parsing.steps import (
    chunk_long_step,
    merge_step_lines,
    split_sentences,
    steps_from_lines,
    steps_from_paragraphs,
)


def test_wrapped_lines_are_merged_into_their_step():
    lines = [
        "1. Cream the butter and sugar",
        "until light and fluffy.",
        "2. Beat in the eggs.",
        "Step 3: Fold in the flour.",
    ]
    assert merge_step_lines(lines) == [
        "Cream the butter and sugar until light and fluffy.",
        "Beat in the eggs.",
        "Fold in the flour.",
    ]


def test_long_step_splits_on_semicolons():
    clause_a = "Whisk the eggs and caster sugar together in a large bowl until the mixture is pale, thick and ribbony"
    clause_b = "fold in the sifted flour and cocoa powder in three additions with a large metal spoon"
    clause_c = "pour into the lined tin and level the top with the back of the spoon"
    step = f"{clause_a}; {clause_b}; {clause_c}."
    assert len(step) > 220

    fragments = chunk_long_step(step)
    assert len(fragments) >= 2
    assert all(len(fragment) <= 220 for fragment in fragments)
    assert fragments == [clause_a, clause_b, clause_c]


def test_long_step_splits_on_connective_sentences():
    step = (
        "Heat the olive oil in a wide heavy pan over a medium flame and add the sliced onions with a good pinch of salt. "
        "Then cook, stirring every few minutes, until the onions are deeply golden and jammy and smell sweet, "
        "adding a splash of water whenever they catch on the bottom of the pan."
    )
    assert len(step) > 220
    fragments = chunk_long_step(step)
    assert len(fragments) == 2
    assert fragments[1].startswith("Then cook")


def test_long_step_splits_on_then_phrases():
    step = (
        "Combine the stock, the rice, the saffron threads, the bay leaves and a generous pinch of salt in the pot "
        "and bring everything slowly up to a gentle simmer over a moderate heat and then cover the pot tightly "
        "with its lid and leave it on the lowest heat until every grain is tender"
    )
    assert len(step) > 220
    fragments = chunk_long_step(step)
    assert len(fragments) == 2
    assert fragments[1].startswith("cover the pot")


def test_short_step_is_only_trimmed():
    assert chunk_long_step("Serve warm.") == ["Serve warm"]
    assert chunk_long_step("   ") == []


def test_split_sentences_respects_abbreviations_and_numbers():
    assert split_sentences("Simmer for 10 min. Stir well. Serve hot.") == [
        "Simmer for 10 min. Stir well.",
        "Serve hot.",
    ]
    assert split_sentences("Add 1 tsp. Salt is optional!") == ["Add 1 tsp. Salt is optional!"]
    assert split_sentences("Bake until golden. 2 loaves fit on one tray.") == [
        "Bake until golden.",
        "2 loaves fit on one tray.",
    ]


def test_steps_from_lines_removes_numbers_and_periods():
    assert steps_from_lines(["1) Preheat the oven.", "2) Grease a tin."]) == ["Preheat the oven", "Grease a tin"]


def test_steps_from_paragraphs_keeps_directions_only():
    paragraphs = ["Stir the soup often", "Lovely", "This is my favourite soup."]
    assert steps_from_paragraphs(paragraphs) == ["Stir the soup often", "This is my favourite soup"]


def test_long_clause_after_semicolon_splits_on_then():
    first = (
        "bring a very large pot of generously salted water up to a rolling boil over the highest heat "
        "your stovetop allows while you gather and prepare every other component of the dish"
    )
    second = (
        "drop the dried pasta into the pot and stir it around gently with a long wooden spoon so none of "
        "the strands stick together or to the bottom of the pot as it softens"
    )
    step = f"Salt the water; {first} then {second}."
    assert len(f"{first} then {second}") > 220

    fragments = chunk_long_step(step)
    assert fragments == ["Salt the water", first, second]
    assert all(len(fragment) <= 220 for fragment in fragments)


def test_unmarked_imperative_sentences_become_separate_steps():
    lines = [
        "Whisk the flour and milk together.",
        "Cook the batter in a hot pan",
        "until golden.",
    ]
    assert merge_step_lines(lines) == [
        "Whisk the flour and milk together.",
        "Cook the batter in a hot pan until golden.",
    ]
