import subprocess
import sys
import threading
from pathlib import Path

import pytest

from release_filter.core import (
    AdmissionReason,
    FilterConfig,
    MalformedRecordError,
    ReleaseRecord,
)
from release_filter.pipeline import (
    AdmissionFilter,
    CollectingTraceSink,
    is_admitted,
)


def _filter(**config) -> tuple[AdmissionFilter, CollectingTraceSink]:
    cfg = FilterConfig(**config)
    sink = CollectingTraceSink()
    return AdmissionFilter(cfg, sink=sink), sink


@pytest.mark.parametrize(
    "record, expected, trace",
    [
        ({"year": 2020, "name": "A", "tags": []}, True, "[+] year=2020 A"),
        (
            {"year": 2010, "name": "B", "tags": ["glitch", "rock"]},
            True,
            "[+] tag=glitch B",
        ),
        ({"year": 2010, "name": "C", "tags": ["rock", "pop"]}, False, "[-] C"),
        ({"year": 2015, "name": "D", "tags": ["synthwave"]}, True, "[+] tag=synthwave D"),
        ({"year": 1999, "name": "E", "tags": []}, False, "[-] E"),
    ],
)
def test_default_config_scenarios(record, expected, trace) -> None:
    admission, sink = _filter()

    assert admission.is_admitted(record) is expected
    assert sink.lines == [trace]


def test_year_threshold_is_inclusive_and_ignores_tags() -> None:
    admission, sink = _filter()

    assert admission.is_admitted({"year": 2016, "name": "X", "tags": ["rock"]}) is True
    assert sink.lines == ["[+] year=2016 X"]


def test_year_wins_over_matching_tag() -> None:
    admission, _ = _filter()

    decision = admission.decide({"year": 2018, "name": "X", "tags": ["ambient"]})

    assert decision.reason == AdmissionReason.YEAR
    assert decision.matched == 2018


def test_reported_tag_follows_config_order_not_record_order() -> None:
    admission, sink = _filter()
    record = {"year": 2000, "name": "F", "tags": ["synthwave", "rock", "ambient"]}

    assert admission.is_admitted(record) is True
    assert sink.lines == ["[+] tag=ambient F"]


def test_permuting_tags_does_not_change_result() -> None:
    admission, _ = _filter()
    tags = ["pop", "vaporwave", "glitch", "rock"]

    results = {
        admission.decide({"year": 2001, "name": "G", "tags": order}).admitted
        for order in (tags, list(reversed(tags)), sorted(tags))
    }

    assert results == {True}


def test_tag_match_is_exact() -> None:
    admission, _ = _filter()

    decision = admission.decide(
        {"year": 2001, "name": "H", "tags": ["Ambient", "dark ambient", "synth"]}
    )

    assert decision.admitted is False
    assert decision.reason == AdmissionReason.REJECTED
    assert decision.matched is None


def test_repeated_calls_give_identical_results_and_traces() -> None:
    admission, sink = _filter()
    record = ReleaseRecord(year=2012, name="I", tags=["synthpop"])

    first = admission.is_admitted(record)
    second = admission.is_admitted(record)

    assert first is second is True
    assert sink.lines == ["[+] tag=synthpop I", "[+] tag=synthpop I"]


def test_decide_emits_nothing() -> None:
    admission, sink = _filter()

    admission.decide({"year": 2020, "name": "J", "tags": []})

    assert sink.lines == []


def test_verbose_rejections_replaces_name_only_line() -> None:
    admission, sink = _filter(verbose_rejections=True)

    admission.is_admitted({"year": 2010, "name": "C", "tags": ["rock", "pop"]})

    assert sink.lines == ["[-] C : 2010 : rock, pop"]


def test_custom_config_filters_coexist() -> None:
    default_filter, _ = _filter()
    jazz_filter, _ = _filter(allowed_tags=["jazz"], year_threshold=2020)
    record = {"year": 2018, "name": "K", "tags": ["jazz"]}

    assert default_filter.decide(record).reason == AdmissionReason.YEAR
    jazz_decision = jazz_filter.decide(record)
    assert jazz_decision.reason == AdmissionReason.TAG
    assert jazz_decision.matched == "jazz"


def test_allowed_tags_are_deduplicated_keeping_order() -> None:
    cfg = FilterConfig(allowed_tags=["glitch", "ambient", "glitch"])

    assert cfg.allowed_tags == ("glitch", "ambient")


@pytest.mark.parametrize(
    "record",
    [
        {"name": "no year", "tags": []},
        {"year": 2010, "name": "no tags"},
        {"year": 2010, "tags": []},
        {"year": "not a year", "name": "bad year", "tags": []},
        {"year": 2010, "name": "bad tags", "tags": [1, 2]},
        {"year": 2010, "name": "string tags", "tags": "glitch"},
        ["not", "a", "mapping"],
    ],
)
def test_malformed_records_raise(record) -> None:
    admission, sink = _filter()

    with pytest.raises(MalformedRecordError):
        admission.is_admitted(record)
    assert sink.lines == []


def test_module_level_is_admitted_prints_trace(capsys) -> None:
    assert is_admitted({"year": 2010, "name": "B", "tags": ["glitch", "rock"]}) is True

    assert capsys.readouterr().out == "[+] tag=glitch B\n"


def test_module_level_is_admitted_with_config(capsys) -> None:
    cfg = FilterConfig(allowed_tags=["rock"], year_threshold=2030, verbose_rejections=True)

    assert is_admitted({"year": 2020, "name": "Z", "tags": ["pop"]}, config=cfg) is False

    assert capsys.readouterr().out == "[-] Z : 2020 : pop\n"


def test_is_admitted_prints_trace_without_logging_configured() -> None:
    code = (
        "from release_filter.pipeline import is_admitted\n"
        "print(is_admitted({'year': 2020, 'name': 'A', 'tags': []}))\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        cwd=Path(__file__).resolve().parents[1],
        check=True,
    )

    assert result.stdout.splitlines() == ["[+] year=2020 A", "True"]


def test_verbose_rejections_follow_config_with_custom_sink() -> None:
    sink = CollectingTraceSink()
    admission = AdmissionFilter(FilterConfig(verbose_rejections=True), sink=sink)

    admission.is_admitted({"year": 2010, "name": "C", "tags": ["rock", "pop"]})

    assert sink.lines == ["[-] C : 2010 : rock, pop"]


def test_concurrent_evaluations_share_one_filter() -> None:
    admission, sink = _filter()
    records = [
        {"year": 2000 + (i % 30), "name": f"R{i}", "tags": ["glitch"] if i % 2 else []}
        for i in range(200)
    ]
    expected = [admission.decide(r).admitted for r in records]
    results: dict[int, bool] = {}

    def worker(start: int) -> None:
        for i in range(start, len(records), 4):
            results[i] = admission.is_admitted(records[i])

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert [results[i] for i in range(len(records))] == expected
    assert len(sink.lines) == len(records)
