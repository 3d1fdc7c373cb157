from datetime import date

import pytest

from quickadd.detect.base import DetectionContext, DetectionKind, Detector
from quickadd.detect.dates import DateKeywordDetector

TODAY = date(2024, 3, 14)
CTX = DetectionContext(today=TODAY)


@pytest.fixture
def det() -> DateKeywordDetector:
    return DateKeywordDetector()


def test_today(det: DateKeywordDetector) -> None:
    text = "call mom today"
    spans = det.detect(text, CTX)
    assert len(spans) == 1
    span = spans[0]
    assert span.kind is DetectionKind.DATE
    assert span.text == "today"
    assert (span.start, span.end) == (9, 14)
    assert span.value == TODAY
    assert span.confidence == 0.95


def test_tomorrow_and_next_week_offsets(det: DateKeywordDetector) -> None:
    [tomorrow] = det.detect("dentist tomorrow", CTX)
    assert tomorrow.value == date(2024, 3, 15)
    assert tomorrow.confidence == 0.95

    [next_week] = det.detect("plan trip next week", CTX)
    assert next_week.value == date(2024, 3, 21)
    assert next_week.confidence == 0.9


def test_month_and_year_rollover(det: DateKeywordDetector) -> None:
    ctx = DetectionContext(today=date(2023, 12, 28))
    [span] = det.detect("party next week", ctx)
    assert span.value == date(2024, 1, 4)


def test_case_insensitive_keeps_original_text(det: DateKeywordDetector) -> None:
    text = "Submit TOMORROW"
    [span] = det.detect(text, CTX)
    assert span.text == "TOMORROW"
    assert text[span.start : span.end] == "TOMORROW"


def test_all_keywords_reported_in_keyword_order(det: DateKeywordDetector) -> None:
    spans = det.detect("next week or maybe today", CTX)
    assert [s.text for s in spans] == ["today", "next week"]


def test_first_occurrence_only(det: DateKeywordDetector) -> None:
    spans = det.detect("today, really today", CTX)
    assert len(spans) == 1
    assert spans[0].start == 0


def test_substring_match_without_word_boundary(det: DateKeywordDetector) -> None:
    spans = det.detect("todays agenda", CTX)
    assert [s.text for s in spans] == ["today"]


def test_no_keywords(det: DateKeywordDetector) -> None:
    assert det.detect("buy groceries", CTX) == []
    assert det.detect("", CTX) == []


def test_system_clock_used_without_context(det: DateKeywordDetector) -> None:
    [span] = det.detect("today")
    assert span.value in {date.today(), date.fromordinal(date.today().toordinal() - 1)}


def test_detector_protocol(det: DateKeywordDetector) -> None:
    assert isinstance(det, Detector)
