"""
Syntax matching over tree-sitter TypeScript trees.

Resolver modules in vf-graphql-holochain all look like this:

    export default (enabledVFModules, dnaConfig, conductorUri) => {
      const readOne = mapZomeFn(...)
      const agent = injectTypename('Agent', async (root, args) => { ... })

      return {
        agent,
        agents: async (root, args) => { throw new Error('unimplemented') },
      }
    }

The helpers here match that shape node by node. A mismatch raises
ResolverShapeError with the ShapeFailure naming the step that failed.
A file with no default export at all is not a mismatch: find_default_export
returns None for it.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_language

from ..core.errors import ResolverShapeError, ShapeFailure, SourceParseError


# Node type tags
FUNCTION_TYPES = {"arrow_function", "function_expression", "function"}
DECLARATION_TYPES = {"lexical_declaration", "variable_declaration"}
NAME_KEY_TYPES = {"property_identifier", "identifier", "string", "number"}


@dataclass
class ResolverMap:
    """The default-exported function and the object literal it returns."""
    body: List[Node]               # top-level statements of the exported function
    properties: List[Node]         # entries of the returned object, comments dropped


@dataclass
class ResolverEntry:
    """One property of the returned object."""
    name: str
    node: Node
    value: Optional[Node] = None        # inline implementation
    reference: Optional[str] = None     # identifier to look up instead


@lru_cache(maxsize=1)
def _get_parser() -> Parser:
    return Parser(get_language("typescript"))


def node_text(node: Node) -> str:
    return node.text.decode("utf-8")


def line_of(node: Node) -> int:
    return node.start_point[0] + 1


def statements(block: Node) -> List[Node]:
    """Named children of a program or statement block, without comments."""
    return [child for child in block.named_children if child.type != "comment"]


def parse_source(text: str, path: Path) -> Node:
    """
    Parse TypeScript source and return the program node.

    Raises:
        SourceParseError: If tree-sitter had to recover from a syntax error
    """
    tree = _get_parser().parse(text.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        raise SourceParseError(path, _first_error_line(root))
    return root


def _first_error_line(root: Node) -> int:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return line_of(node)
        stack.extend(reversed(node.children))
    return line_of(root)


def _is_default_export(node: Node) -> bool:
    if node.type != "export_statement":
        return False
    return any(child.type == "default" for child in node.children)


def find_default_export(program: Node) -> Optional[Node]:
    """
    Return the `export default <expression>` statement, or None.

    `export default function name() {}` is a declaration, not an exported
    value, and does not count.

    Raises:
        ResolverShapeError: If there is more than one
    """
    exports = [
        statement for statement in statements(program)
        if _is_default_export(statement) and statement.child_by_field_name("value") is not None
    ]
    if not exports:
        return None
    if len(exports) > 1:
        raise ResolverShapeError(ShapeFailure.MULTIPLE_DEFAULT_EXPORTS, line=line_of(exports[1]))
    return exports[0]


def match_resolver_map(export: Node) -> ResolverMap:
    """
    Match `export default (...) => { ...; return { ... } }`.

    Raises:
        ResolverShapeError: At the first node that does not fit
    """
    function = export.child_by_field_name("value")
    if function.type not in FUNCTION_TYPES:
        raise ResolverShapeError(ShapeFailure.EXPORT_NOT_FUNCTION, line=line_of(function))

    body = function.child_by_field_name("body")
    if body is None or body.type != "statement_block":
        raise ResolverShapeError(ShapeFailure.EXPORT_BODY_NOT_BLOCK, line=line_of(function))

    body_statements = statements(body)
    # the last statement should be the return value
    if not body_statements or body_statements[-1].type != "return_statement":
        raise ResolverShapeError(ShapeFailure.MISSING_RETURN, line=line_of(body))

    returned = statements(body_statements[-1])
    if not returned or returned[0].type != "object":
        raise ResolverShapeError(ShapeFailure.RETURN_NOT_OBJECT, line=line_of(body_statements[-1]))

    return ResolverMap(body=body_statements, properties=statements(returned[0]))


def _key_name(key: Node) -> str:
    if key.type not in NAME_KEY_TYPES:
        raise ResolverShapeError(ShapeFailure.UNSUPPORTED_PROPERTY, line=line_of(key))
    text = node_text(key)
    if key.type == "string":
        return text[1:-1]
    return text


def match_entry(prop: Node) -> ResolverEntry:
    """
    Match one resolver map property.

        agents: async () => { ... }     inline value
        agents() { ... }                inline method
        agents                          reference to `agents`
        agents: readAgents              reference to `readAgents`

    Raises:
        ResolverShapeError: For spreads and computed keys
    """
    if prop.type == "pair":
        name = _key_name(prop.child_by_field_name("key"))
        value = prop.child_by_field_name("value")
        if value.type == "identifier":
            return ResolverEntry(name=name, node=prop, reference=node_text(value))
        return ResolverEntry(name=name, node=prop, value=value)

    if prop.type == "shorthand_property_identifier":
        name = node_text(prop)
        return ResolverEntry(name=name, node=prop, reference=name)

    if prop.type == "method_definition":
        name = _key_name(prop.child_by_field_name("name"))
        return ResolverEntry(name=name, node=prop, value=prop)

    raise ResolverShapeError(ShapeFailure.UNSUPPORTED_PROPERTY, line=line_of(prop))


def find_declarator(scope: List[Node], name: str) -> Optional[Node]:
    """
    Find the variable declarator named `name` among top-level statements.

    Only the first declarator of each `const`/`let`/`var` statement is
    considered. Exported declarations (`export const x = ...`) count.
    """
    for statement in scope:
        if statement.type == "export_statement":
            statement = statement.child_by_field_name("declaration")
            if statement is None:
                continue
        if statement.type not in DECLARATION_TYPES:
            continue
        declarators = [c for c in statement.named_children if c.type == "variable_declarator"]
        if not declarators:
            continue
        declared = declarators[0].child_by_field_name("name")
        if declared is not None and node_text(declared) == name:
            return declarators[0]
    return None
