from quickadd.utils.textspan import rtrim_whitespace, spans_overlap


def test_spans_overlap_truth_table() -> None:
    assert spans_overlap((0, 2), (1, 3)) is True
    assert spans_overlap((0, 2), (2, 4)) is False
    assert spans_overlap((2, 4), (0, 2)) is False
    assert spans_overlap((0, 10), (3, 4)) is True


def test_rtrim_whitespace() -> None:
    text = "at 5 \t rest"
    assert rtrim_whitespace(text, 0, 7) == 4
    assert rtrim_whitespace(text, 0, 4) == 4
    assert rtrim_whitespace("   ", 0, 3) == 1
