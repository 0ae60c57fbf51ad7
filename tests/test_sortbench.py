import random

from algokit.sortbench import main, run_benchmark


def test_run_benchmark_names_and_times():
    rng = random.Random(8)
    data = [rng.randint(0, 1000) for _ in range(400)]
    results = run_benchmark(data)
    names = [name for name, _ in results]
    assert names == ["sorted", "Shell Sort", "Merge Sort", "Quick Sort", "Heap Sort"]
    assert all(seconds >= 0.0 for _, seconds in results)


def test_run_benchmark_leaves_input_untouched():
    data = [9, 3, 7, 1, 1, 5]
    snapshot = list(data)
    run_benchmark(data)
    assert data == snapshot


def test_run_benchmark_empty_input():
    results = run_benchmark([])
    assert len(results) == 5


def test_main_prints_all_sections(capsys):
    code = main(["--size", "300", "--seed", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Test for Random Array, size = 300, random range [0, 300]" in out
    assert "Test for Random Nearly Ordered Array, size = 300, swap time = 100" in out
    assert "Test for Random Array, size = 300, random range [0,10]" in out
    assert out.count("Heap Sort : ") == 3
    assert out.count("Shell Sort : ") == 3