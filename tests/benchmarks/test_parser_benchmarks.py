"""Performance benchmarks for the tree parser.

Measures parsing speed for typical and stress-shaped inputs to detect regressions.

Python 3.13+.
"""

from __future__ import annotations

from treelang import (
    Indent,
    Origin,
    SourceMap,
    TreeParser,
    TreeSyntaxError,
    normalize,
    parse_source,
    walk,
)
from treelang.diagnostics import DiagnosticFormatter


def _config_document(sections: int) -> str:
    blocks = [
        normalize(f"""
            |server-{i} (primary): {i}
            |  listen 0.0.0.0 {8000 + i}
            |  tls:
            |    cert [/etc/tls/{i}.pem] {{mode 0600}}
            |    ciphers (aes-256 chacha20)
            |  timeout 2.5
        """)
        for i in range(sections)
    ]
    return "\n".join(blocks)


class TestParserBenchmarks:
    """Benchmark tree parser performance."""

    def test_parse_single_statement(self, benchmark) -> None:
        """Benchmark parsing one statement line."""
        result = benchmark(parse_source, "port 8080")

        assert len(result.tree) == 1

    def test_parse_nested_directives(self, benchmark) -> None:
        """Benchmark parsing a small nested configuration block."""
        source = _config_document(1)

        result = benchmark(parse_source, source)

        assert len(result.tree[0].children) == 3

    def test_parse_large_document(self, benchmark) -> None:
        """Benchmark parsing a large configuration (100 sections, 600 lines)."""
        source = _config_document(100)

        result = benchmark(parse_source, source)

        assert len(result.tree) == 100
        assert sum(1 for _ in walk(result.tree)) == 600

    def test_parse_deep_indentation(self, benchmark) -> None:
        """Benchmark parsing 500 directives each nested under the previous one."""
        source = "\n".join("  " * level + f"level-{level}:" for level in range(500))

        result = benchmark(parse_source, source)

        assert sum(1 for _ in walk(result.tree)) == 500

    def test_parse_deep_groups(self, benchmark) -> None:
        """Benchmark scanning one line of 1000 nested groups."""
        source_map = SourceMap()
        index = source_map.add(Origin.named("deep-groups"), "x " + "(" * 1000 + "y" + ")" * 1000)
        parser = TreeParser(max_nesting_depth=1000)

        tree = benchmark(parser.parse, source_map.input(index))

        assert len(tree[0].items) == 2

    def test_parse_tab_indented(self, benchmark) -> None:
        """Benchmark parsing the large configuration re-indented with tabs."""
        source = _config_document(100).replace("  ", "\t")

        result = benchmark(parse_source, source, indent=Indent.tabs())

        assert len(result.tree) == 100


class TestDiagnosticBenchmarks:
    """Benchmark error path cost."""

    def test_parse_error_and_render(self, benchmark) -> None:
        """Benchmark failing late in a large input and rendering the report."""
        source = _config_document(100) + "\nbroken (group"

        def fail_and_render() -> str:
            try:
                parse_source(source)
            except TreeSyntaxError as error:
                assert error.diagnostic is not None
                return DiagnosticFormatter().format(error.diagnostic)
            raise AssertionError

        text = benchmark(fail_and_render)

        assert "UNTERMINATED_GROUP" in text
