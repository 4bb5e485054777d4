import time
from unittest import mock

import pytest

from cc232.mini_bench import (
    average_us,
    bench_cache_effects,
    bench_vector_growth,
    bench_vector_ops,
    format_header,
    format_result,
    main,
    measure_us,
)


def _result_values(report):
    lines = report.splitlines()[2:]
    return [float(line.split(": ")[1].removesuffix(" us")) for line in lines]


def test_measure_us_uses_clock_difference():
    with mock.patch("time.perf_counter_ns", side_effect=[5_000_000, 5_250_000]):
        assert measure_us(lambda: None) == 250


def test_measure_us_runs_function_once_and_counts_sleep():
    calls = []

    def fn():
        calls.append(1)
        time.sleep(0.002)

    elapsed = measure_us(fn)
    assert calls == [1]
    assert elapsed >= 2000


def test_average_us_is_mean_of_runs():
    with mock.patch("time.perf_counter_ns", side_effect=[0, 1000, 0, 3000]):
        assert average_us(2, lambda: None) == 2.0


def test_average_us_calls_fn_trials_times():
    calls = []
    average_us(4, lambda: calls.append(1))
    assert len(calls) == 4


def test_average_us_rejects_zero_trials():
    with pytest.raises(ValueError):
        average_us(0, lambda: None)


def test_format_header():
    text = format_header("Benchmark inicial: crecimiento de vector", 300000, 5)
    assert text == "Benchmark inicial: crecimiento de vector\nn = 300000, repeticiones = 5\n"


def test_format_result_pads_label_and_rounds():
    text = format_result("push_back sin reserve", 1.5)
    assert text.startswith("push_back sin reserve")
    assert text[30:] == ": 1.50 us\n"


def test_format_result_long_label_not_truncated():
    label = "x" * 40
    assert format_result(label, 0.0) == label + ": 0.00 us\n"


def test_bench_vector_growth_report():
    report = bench_vector_growth(100, 2)
    lines = report.splitlines()
    assert lines[0] == "Benchmark inicial: crecimiento de vector"
    assert lines[1] == "n = 100, repeticiones = 2"
    assert lines[2].startswith("push_back sin reserve")
    assert lines[3].startswith("push_back con reserve")
    assert all(v >= 0 for v in _result_values(report))


def test_bench_vector_ops_report():
    report = bench_vector_ops(50, 1)
    lines = report.splitlines()
    assert len(lines) == 5
    assert lines[0] == "Benchmark inicial: vector push_back vs insert"
    assert [line[:30].rstrip() for line in lines[2:]] == [
        "push_back al final",
        "insert en begin()",
        "insert en el medio",
    ]


def test_bench_cache_effects_report():
    report = bench_cache_effects(200, 1)
    lines = report.splitlines()
    assert lines[0] == "Benchmark inicial: conceptos basicos de cache/localidad"
    assert lines[1] == "n = 200, repeticiones = 1"
    assert len(_result_values(report)) == 3


def test_main_runs_selected_bench(capsys):
    assert main(["growth", "--n", "10", "--trials", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Benchmark inicial: crecimiento de vector\n")
    assert "vector push_back vs insert" not in out


def test_main_rejects_unknown_bench():
    with pytest.raises(SystemExit):
        main(["nope"])


def test_main_rejects_zero_trials():
    with pytest.raises(SystemExit):
        main(["ops", "--trials", "0"])