"""Pytest configuration for treelang test suite.

Hypothesis profiles (max_examples is set here and nowhere else):
- dev: local runs, 500 examples
- ci: CI runs, 50 examples, derandomized
- verbose: 100 examples with progress output

Profile selection:
- HYPOTHESIS_PROFILE env var wins when it names a profile
- CI=true selects "ci"
- Otherwise "dev"

Fuzz separation:
Tests marked with @pytest.mark.fuzz are skipped in normal runs.
Run them via: pytest -m fuzz
"""

import os
from collections.abc import Callable

import pytest
from hypothesis import Phase, Verbosity, settings

from treelang import Indent, Origin, SourceMap, TreeParser
from treelang.syntax import Tree

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal run (pytest): fuzz tests are SKIPPED
    - pytest -m fuzz: fuzz tests run
    - Naming tests/test_parser_fuzzing.py on the command line runs it as given
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    for arg in config.invocation_params.args:
        if "test_parser_fuzzing" in str(arg):
            return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# PARSING FIXTURES
# =============================================================================


@pytest.fixture
def source_map() -> SourceMap:
    """Fresh registry per test; registries never share state."""
    return SourceMap()


@pytest.fixture
def parse_text(source_map: SourceMap) -> Callable[..., Tree]:
    """Register text under a unique named origin and parse it.

    Keyword arguments are passed to TreeParser; indent defaults to 2 spaces.
    """
    counter = iter(range(1_000_000))

    def _parse(text: str, *, indent: Indent | None = None, **options: object) -> Tree:
        origin = Origin.named(f"test-source-{next(counter)}")
        index = source_map.add(origin, text)
        parser = TreeParser(indent or Indent.spaces(2), **options)  # type: ignore[arg-type]
        return parser.parse(source_map.input(index))

    return _parse
