"""pytest plugin for json-unit-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_unit_diff import DiffConfig, compare


@pytest.fixture(scope="session")
def assert_json_equals() -> Any:
    """Fixture that returns a callable JSON equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh Diff per call).

    Usage in tests::

        def test_payload(assert_json_equals):
            assert_json_equals(response.json(), {"id": 1, "tags": ["a"]})

        def test_loose(assert_json_equals):
            config = DiffConfig(options={Option.IGNORE_EXTRA_FIELDS})
            assert_json_equals({"id": 1, "debug": True}, {"id": 1}, config=config)

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` carrying the difference report.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that ``actual`` has no differences from ``expected``.

        Args:
            actual:   The actual JSON value produced by the code under test.
            expected: The expected/reference JSON value.
            config:   Optional DiffConfig with leniency options.

        Raises:
            AssertionError: When any difference is recorded; the message is
                ``"JSON documents are different:"`` followed by the report.
        """
        result = compare(expected, actual, config=config)
        if not result.similar:
            raise AssertionError(f"JSON documents are different:\n{result.report}")

    return _assert
