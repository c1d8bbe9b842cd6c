from session import ExtractorState


def test_submit_highlights_top_keywords() -> None:
    state = ExtractorState(text="The Cat sat. The cat ran. A dog sat.", keyword_count=2)

    out = state.submit()

    assert state.keywords == ["cat", "sat"]
    assert state.frequencies == {"cat": 2, "sat": 2, "ran": 1, "dog": 1}
    assert out == "The **Cat** **sat**. The **cat** ran. A dog **sat**."
    assert state.highlighted == out
    assert state.has_result


def test_submit_blank_text_clears_previous_result() -> None:
    state = ExtractorState(text="apples and apples", keyword_count=1)
    state.submit()
    assert state.has_result

    state.text = "   \n\t "
    assert state.submit() == ""
    assert not state.has_result
    assert state.keywords == []
    assert state.frequencies == {}


def test_submit_empty_text() -> None:
    state = ExtractorState()
    assert state.submit() == ""
    assert not state.has_result


def test_submit_zero_count_returns_text_unchanged() -> None:
    state = ExtractorState(text="apples and pears", keyword_count=0)

    assert state.submit() == "apples and pears"
    assert state.keywords == []
    assert state.has_result


def test_submit_only_stop_words() -> None:
    state = ExtractorState(text="the and of", keyword_count=5)

    assert state.submit() == "the and of"
    assert state.keywords == []


def test_default_keyword_count() -> None:
    assert ExtractorState().keyword_count == 5
