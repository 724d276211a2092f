"""
EVALs Suite for pyiita - Tests Designed to Break the Analysis

Philosophy:
    These tests target degenerate and oversized inputs rather than typical data.
    - A failing eval = discovered weakness
    - Tests document known limitations and edge cases
    - Use pytest.mark.xfail for known issues (expected failures)

Run tests:
    pytest tests/evals/ -v                    # Run all evals
    pytest tests/ --ignore=tests/evals/      # Run regular tests only
"""
