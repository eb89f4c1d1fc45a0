"""Visitor pattern for comment AST traversal.

Enables tools to traverse and transform comment ASTs without modifying node
classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name (snake_case).

Type Parameters:
- ASTVisitor[T] is generic over return type T
- ASTTransformer uses extended return type: ASTNode | None | list[ASTNode]

Python 3.12+.
"""

from collections.abc import Callable
from dataclasses import Field, fields, replace
from typing import ClassVar

from .ast import ASTNode, Comment, Entry

__all__ = ["ASTTransformer", "ASTVisitor"]

type TransformerResult = ASTNode | None | list[ASTNode]


class ASTVisitor[T]:
    """Base visitor for traversing comment ASTs.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses all child nodes. Override visit_NodeType methods to add custom
    behavior.

    Uses a class-level dispatch table built once per subclass via
    __init_subclass__, plus an instance-level cache of bound methods.

    Example:
        >>> from ftlcomments.syntax import ASTNode, Variable, parse
        >>> class CountVariables(ASTVisitor[ASTNode]):
        ...     def __init__(self) -> None:
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_Variable(self, node: Variable) -> ASTNode:
        ...         self.count += 1
        ...         return node
        ...
        >>> visitor = CountVariables()
        >>> _ = visitor.visit(parse("@var $a\\n@var $b"))
        >>> visitor.count
        2
    """

    __slots__ = ("_instance_dispatch_cache",)

    # Method names only, not bound methods
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    # Dataclass fields per node type
    _fields_cache: ClassVar[dict[type, tuple[Field[object], ...]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self) -> None:
        """Initialize dispatch cache.

        Subclasses MUST call super().__init__().
        """
        self._instance_dispatch_cache: dict[type, Callable[[ASTNode], T]] = {}

    def visit(self, node: ASTNode) -> T:
        """Visit a node, dispatching to visit_<ClassName> or generic_visit.

        Args:
            node: AST node to visit

        Returns:
            Result of visiting the node
        """
        node_type = type(node)

        if node_type in self._instance_dispatch_cache:
            return self._instance_dispatch_cache[node_type](node)

        node_type_name = node_type.__name__
        if node_type_name in self._class_visit_methods:
            method = getattr(self, self._class_visit_methods[node_type_name])
        else:
            method = self.generic_visit

        self._instance_dispatch_cache[node_type] = method
        return method(node)  # type: ignore[no-any-return]  # getattr returns Any

    def _get_node_fields(self, node_type: type) -> tuple[Field[object], ...]:
        """Get cached dataclass fields for a node type."""
        if node_type not in ASTVisitor._fields_cache:
            ASTVisitor._fields_cache[node_type] = fields(node_type)
        return ASTVisitor._fields_cache[node_type]

    def generic_visit(self, node: ASTNode) -> T:
        """Default visitor: visit every child node, return the node itself.

        Strings, None and tuples of strings (Variable.examples) are leaves.
        """
        for field in self._get_node_fields(type(node)):
            value = getattr(node, field.name)

            if value is None or isinstance(value, str):
                continue

            if isinstance(value, tuple):
                for item in value:
                    if hasattr(item, "__dataclass_fields__"):
                        self.visit(item)
            elif hasattr(value, "__dataclass_fields__"):
                self.visit(value)

        return node  # type: ignore[return-value]


class ASTTransformer(ASTVisitor[TransformerResult]):
    """AST transformer producing new immutable trees.

    Each visit method can return:
    - The modified node (replaces original)
    - None (removes the entry from the comment body)
    - A list of nodes (replaces one entry with several)

    Example - Drop all free text:
        >>> class DropText(ASTTransformer):
        ...     def visit_Text(self, node: Text) -> None:
        ...         return None
        ...
        >>> DropText().transform(parse("intro\\n@var $a"))
        Comment(body=(Variable(name='a', variable_type=None, description=None, examples=()),))

    Example - Rename a variable:
        >>> class Rename(ASTTransformer):
        ...     def visit_Variable(self, node: Variable) -> Variable:
        ...         return replace(node, name="user") if node.name == "name" else node
    """

    def transform(self, node: ASTNode) -> TransformerResult:
        """Transform an AST node or tree (main entry point)."""
        return self.visit(node)

    def generic_visit(self, node: ASTNode) -> TransformerResult:
        """Transform children. Entries are leaves and are returned as-is."""
        match node:
            case Comment(body=body):
                return replace(node, body=self._transform_body(body))
            case _:
                return node

    def _transform_body(self, entries: tuple[Entry, ...]) -> tuple[Entry, ...]:
        """Transform comment entries, dropping None and flattening lists."""
        result: list[Entry] = []
        for entry in entries:
            transformed = self.visit(entry)

            match transformed:
                case None:
                    continue
                case list():
                    result.extend(transformed)  # type: ignore[arg-type]
                case _:
                    result.append(transformed)  # type: ignore[arg-type]

        return tuple(result)
