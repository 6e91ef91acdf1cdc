"""Pipeline benchmarks (pytest-benchmark).

Run with::

    pytest tests/benchmarks -o python_files="bench_*.py" --benchmark-sort=median
"""
