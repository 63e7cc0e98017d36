"""Tree traversal: iterative walkers and a dispatching visitor.

NOTE: NodeVisitor follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name
(snake_case), matching the class names in :mod:`treelang.syntax.ast`.

walk() and walk_items() use an explicit stack and handle any nesting depth.
NodeVisitor recurses through generic_visit(); prefer the walkers for trees
nested deeper than the interpreter recursion limit.

Python 3.13+.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import ClassVar

from .ast import Directive, Group, Item, Node, Number, Statement, Tree, Word

__all__ = ["NodeVisitor", "walk", "walk_items"]

type Visitable = Tree | Node | Item


def walk(tree: Tree | Iterable[Node]) -> Iterator[Node]:
    """Yield every node depth-first, in source order.

    A directive is yielded before its children.

    Example:
        >>> [type(node).__name__ for node in walk(tree)]
        ['Directive', 'Statement', 'Directive', 'Statement']
    """
    nodes = tree.nodes if isinstance(tree, Tree) else tuple(tree)
    stack: list[Node] = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def walk_items(items: Iterable[Item]) -> Iterator[Item]:
    """Yield items depth-first, descending into groups.

    A group is yielded before the items it contains.
    """
    stack: list[Item] = list(reversed(tuple(items)))
    while stack:
        item = stack.pop()
        yield item
        if isinstance(item, Group):
            stack.extend(reversed(item.items))


class NodeVisitor[T = None]:
    """Base visitor for tree traversal.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses all children. Override visit_Directive, visit_Statement,
    visit_Group, visit_Number or visit_Word to add behavior; call
    generic_visit() from an override to keep descending.

    Dispatch method names are collected once per subclass definition.

    Example:
        >>> class PortCollector(NodeVisitor):
        ...     def __init__(self) -> None:
        ...         self.ports: list[int] = []
        ...
        ...     def visit_Statement(self, node: Statement) -> None:
        ...         match node.items:
        ...             case (Word(text="port"), Number(value=int(port))):
        ...                 self.ports.append(port)
        ...
        >>> collector = PortCollector()
        >>> collector.visit(tree)
        >>> collector.ports
        [8080]
    """

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {
            name.removeprefix("visit_"): name
            for name in dir(cls)
            if name.startswith("visit_")
        }

    def visit(self, node: Visitable) -> T | None:
        """Dispatch to visit_<ClassName>, falling back to generic_visit()."""
        method_name = self._class_visit_methods.get(type(node).__name__)
        method: Callable[[Visitable], T | None] = (
            getattr(self, method_name) if method_name is not None else self.generic_visit
        )
        return method(node)

    def generic_visit(self, node: Visitable) -> T | None:
        """Visit all children of node in source order."""
        match node:
            case Tree(nodes=nodes):
                children: tuple[Visitable, ...] = nodes
            case Directive(signature=signature, arguments=arguments, children=nested):
                children = (*signature, *arguments, *nested)
            case Statement(items=items) | Group(items=items):
                children = items
            case Number() | Word():
                children = ()
        for child in children:
            self.visit(child)
        return None
