"""Quickstart example for treelang.

This example demonstrates parsing indentation-structured text into a tree,
walking the result, and reporting errors with source context.

Note: Examples print to the terminal for brevity. In production, log or
collect diagnostics instead.
"""

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
from treelang.diagnostics import DiagnosticFormatter, OutputFormat
from treelang.syntax import Directive, Number, Statement, Word

# Example 1: Directives and statements
print("=" * 50)
print("Example 1: Directives and Statements")
print("=" * 50)

result = parse_source(normalize("""
    |server (main): 1
    |  listen 0.0.0.0 8080
    |  tls:
    |    cert [/etc/tls/main.pem]
    |log debug
"""))

for node in walk(result.tree):
    indent = "  " * node.depth
    match node:
        case Directive(signature=signature, arguments=arguments):
            print(f"{indent}directive {len(signature)} signature / {len(arguments)} arguments")
        case Statement(items=items):
            print(f"{indent}statement {result.source_map.span_text(node.span)!r} ({len(items)} items)")
# Output:
# directive 2 signature / 1 arguments
#   statement 'listen 0.0.0.0 8080' (3 items)
#   directive 1 signature / 0 arguments
#     statement 'cert [/etc/tls/main.pem]' (2 items)
# statement 'log debug' (2 items)

# Example 2: Pattern matching on items
print("\n" + "=" * 50)
print("Example 2: Pattern Matching on Items")
print("=" * 50)

for node in walk(result.tree):
    match node:
        case Statement(items=(Word(text="listen"), Word(text=host), Number(value=int(port)))):
            print(f"listen on {host} port {port}")
# Output: listen on 0.0.0.0 port 8080

# Example 3: Several sources in one registry
print("\n" + "=" * 50)
print("Example 3: Shared Source Map")
print("=" * 50)

source_map = SourceMap()
parser = TreeParser(Indent.tabs(), comment="#")
for name, text in (("base.tree", "name: app\n\tversion 3"), ("extra.tree", "debug on # local only")):
    index = source_map.add(Origin.named(name), text)
    tree = parser.parse(source_map.input(index))
    print(f"{name}: {len(tree)} top-level node(s) in source {tree.source}")
# Output:
# base.tree: 1 top-level node(s) in source 0
# extra.tree: 1 top-level node(s) in source 1

# Example 4: Errors with source context
print("\n" + "=" * 50)
print("Example 4: Error Reporting")
print("=" * 50)

broken = SourceMap()
try:
    parse_source("server:\n  port (8080", origin=Origin.named("config"), source_map=broken)
except TreeSyntaxError as error:
    assert error.diagnostic is not None
    print(DiagnosticFormatter().format_with_context(error.diagnostic, broken))
    print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(error.diagnostic))
# Output:
# error[UNTERMINATED_GROUP]: Missing closing ')' for group opened on line 2
#   --> config:2:8
#   = help: Close the group on the same line it was opened
#  1 | server:
#  2 |   port (8080
#    |        ^
# {"code": "UNTERMINATED_GROUP", ...}
