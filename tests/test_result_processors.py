from typing import List

import pytest
from pydantic import ValidationError

from agent_tools import Err, Ok, ResultEntry, ResultPipeline, Sample, Summarize, Truncate
from agent_tools.processors import estimate_size, is_large

MARKER = "... [truncated]"


def entries(*outcomes) -> List[ResultEntry]:
    return [ResultEntry(tool_call_id=f"call_{i}", outcome=o) for i, o in enumerate(outcomes)]


def payload(results: List[ResultEntry], index: int = 0):
    outcome = results[index].outcome
    assert isinstance(outcome, Ok)
    return outcome.value


def test_estimate_size() -> None:
    assert estimate_size("hello") == 5
    assert estimate_size([1, 2, 3]) == 3
    assert estimate_size((1, 2)) == 2
    assert estimate_size({"a": 1}) == 1
    assert estimate_size(12345) == 0
    assert estimate_size(None) == 0
    assert is_large("x" * 11, 10)
    assert not is_large("x" * 10, 10)


@pytest.mark.parametrize(
    "processor",
    [Truncate(max_size=2), Sample(sample_size=2), Summarize(sample_size=2)],
)
def test_processors_keep_length_order_and_errors(processor) -> None:
    error = Err("lookup failed")
    results = entries(Ok(list(range(10))), error, Ok("x" * 50), Err("second failure"), Ok({"a": 1, "b": 2, "c": 3}))

    processed = processor.process(results)

    assert len(processed) == len(results)
    assert [r.tool_call_id for r in processed] == [r.tool_call_id for r in results]
    assert processed[1] == results[1]
    assert processed[1].outcome is error
    assert processed[3] == results[3]


def test_truncate_long_text() -> None:
    results = Truncate(max_size=100).process(entries(Ok("x" * 2000)))

    text = payload(results)
    assert len(text) <= 100 + len(MARKER)
    assert text == "x" * 100 + MARKER


def test_truncate_short_text_is_unchanged() -> None:
    results = entries(Ok("small"))

    assert Truncate(max_size=100).process(results) == results


def test_truncate_list_appends_marker_item() -> None:
    results = Truncate(max_size=3, marker="[cut]").process(entries(Ok(list(range(10))), Ok((1, 2, 3, 4))))

    assert payload(results, 0) == [0, 1, 2, "[cut]"]
    assert payload(results, 1) == [1, 2, 3, "[cut]"]


def test_truncate_mapping_keeps_leading_keys_and_flag() -> None:
    data = {"a": 1, "b": 2, "c": 3, "d": 4}

    results = Truncate(max_size=2).process(entries(Ok(data)))

    assert payload(results) == {"a": 1, "b": 2, "__truncated__": MARKER}


def test_truncate_ignores_scalars() -> None:
    results = entries(Ok(10**12), Ok(None))

    assert Truncate(max_size=1).process(results) == results


def test_truncate_rejects_non_positive_size() -> None:
    with pytest.raises(ValidationError):
        Truncate(max_size=0)


def test_sample_first() -> None:
    results = Sample(sample_size=5, strategy="first").process(entries(Ok(list(range(1, 101)))))

    assert payload(results) == {"items": [1, 2, 3, 4, 5], "total_count": 100, "sampled": True, "strategy": "first"}


def test_sample_short_list_is_not_wrapped() -> None:
    results = Sample(sample_size=5).process(entries(Ok([1, 2, 3, 4, 5]), Ok([])))

    assert payload(results, 0) == [1, 2, 3, 4, 5]
    assert payload(results, 1) == []


def test_sample_distributed_uses_fixed_stride() -> None:
    results = Sample(sample_size=5, strategy="distributed").process(entries(Ok(list(range(1, 101)))))

    sampled = payload(results)
    assert sampled["items"] == [1, 21, 41, 61, 81]
    assert sampled["strategy"] == "distributed"


def test_sample_random_is_a_bounded_subset() -> None:
    data = list(range(1000))

    sampled = payload(Sample(sample_size=10, strategy="random").process(entries(Ok(data))))

    assert len(sampled["items"]) == 10
    assert len(set(sampled["items"])) == 10
    assert set(sampled["items"]) <= set(data)
    assert sampled["total_count"] == 1000


def test_sample_random_with_seed_is_reproducible() -> None:
    results = entries(Ok(list(range(1000))))

    first = Sample(sample_size=10, strategy="random", seed=7).process(results)
    second = Sample(sample_size=10, strategy="random", seed=7).process(results)

    assert first == second


def test_seeded_sample_repeats_its_selection_across_calls() -> None:
    results = entries(Ok(list(range(1000))), Ok(list(range(500))))
    sampler = Sample(sample_size=10, strategy="random", seed=7)

    first = sampler.process(results)
    second = sampler(results)

    assert first == second


def test_sample_ignores_non_lists() -> None:
    results = entries(Ok("not a list"), Ok({"a": list(range(100))}))

    assert Sample(sample_size=2).process(results) == results


def test_sample_rejects_unknown_strategy() -> None:
    with pytest.raises(ValidationError):
        Sample(strategy="weighted")  # type: ignore[arg-type]


def test_pipeline_applies_processors_in_order() -> None:
    pipeline = ResultPipeline(Sample(sample_size=5), Truncate(max_size=3))

    results = pipeline(entries(Ok(list(range(100))), Err("boom")))

    assert payload(results) == {
        "items": [0, 1, 2, 3, 4],
        "total_count": 100,
        "sampled": True,
        "__truncated__": MARKER,
    }
    assert results[1].outcome == Err("boom")


def test_empty_pipeline_is_identity() -> None:
    results = entries(Ok([1, 2, 3]))

    assert ResultPipeline().process(results) == results
