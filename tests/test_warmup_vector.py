from cc232.warmup_vector import (
    append_in_place,
    appended_copy,
    count_greater_than,
    is_strictly_increasing,
    main,
    sum_readonly,
)


def test_sum_readonly():
    values = [1, 2, 3, 4]
    assert sum_readonly(values) == 10
    assert values == [1, 2, 3, 4]


def test_append_in_place_changes_original():
    values = [10, 20]
    append_in_place(values, 30)
    assert len(values) == 3
    assert values[-1] == 30


def test_appended_copy_preserves_original():
    values = [10, 20]
    copied = appended_copy(values, 30)
    assert len(values) == 2
    assert len(copied) == 3
    assert copied[-1] == 30


def test_count_greater_than():
    assert count_greater_than([2, 5, 8, 1, 9], 4) == 3


def test_is_strictly_increasing():
    assert is_strictly_increasing([1, 2, 3, 9])
    assert not is_strictly_increasing([1, 2, 2, 9])
    assert not is_strictly_increasing([4, 3, 2, 1])


def test_is_strictly_increasing_trivial_cases():
    assert is_strictly_increasing([])
    assert is_strictly_increasing([7])


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "original = {1, 2, 3}",
        "suma_lectura(original) = 6",
        "despues de append_in_place(original, 4): {1, 2, 3, 4}",
        "despues de appended_copy(original, 99), original = {1, 2, 3, 4}",
        "copia = {1, 2, 3, 4, 99}",
    ]