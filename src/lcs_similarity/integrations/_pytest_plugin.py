"""pytest plugin for lcs-similarity.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from lcs_similarity import LCSConfig, compare


@pytest.fixture(scope="session")
def assert_lcs_similar() -> Any:
    """Fixture that returns a callable LCS similarity asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh LCSComparator per call).

    Usage in tests::

        def test_render(assert_lcs_similar):
            assert_lcs_similar("Hello, World!", "Hello World")

        def test_rewrite(assert_lcs_similar):
            with pytest.raises(AssertionError, match=r"similarity="):
                assert_lcs_similar("abc", "xyz")

    Returns:
        A callable ``_assert(actual, expected, threshold=0.85, config=None) -> None``
        that raises ``AssertionError`` when the similarity score is below threshold.
    """

    def _assert(
        actual: Any,
        expected: Any,
        threshold: float = 0.85,
        config: LCSConfig | None = None,
    ) -> None:
        result = compare(actual, expected, config=config)
        if result.similarity_score < threshold:
            raise AssertionError(
                f"Sequences not similar: "
                f"similarity={result.similarity_score:.4f} < threshold={threshold}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  lcs:      {result.subsequence!r} (length {result.lcs_length})\n"
                f"  distance: {result.distance}"
            )

    return _assert
