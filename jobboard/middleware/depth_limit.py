# jobboard/middleware/depth_limit.py
from graphql import GraphQLError
from graphql.language.ast import (
    FieldNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    OperationDefinitionNode,
    SelectionSetNode,
)
import logging

log = logging.getLogger(__name__)

# Depth counts nested field levels:
# - `query { posts }` has depth 1.
# - `query { checkApplied(...) { application { id } } }` has depth 3.
# Fragments are inlined; inline fragments add no level of their own.


def selection_depth(selection_set: SelectionSetNode, fragments: dict, visiting: frozenset = frozenset()) -> int:
    """Returns the deepest field nesting below a selection set."""
    if not selection_set:
        return 0

    deepest = 0
    for node in selection_set.selections:
        if isinstance(node, FieldNode):
            depth = 1 + selection_depth(node.selection_set, fragments, visiting)
        elif isinstance(node, InlineFragmentNode):
            depth = selection_depth(node.selection_set, fragments, visiting)
        elif isinstance(node, FragmentSpreadNode):
            name = node.name.value
            if name in visiting:
                raise GraphQLError(f"Circular fragment reference detected: '{name}'.")
            fragment = fragments.get(name)
            if fragment is None:
                raise GraphQLError(f"Fragment '{name}' was spread but not defined.")
            depth = selection_depth(fragment.selection_set, fragments, visiting | {name})
        else:
            continue
        deepest = max(deepest, depth)
    return deepest


def is_introspection(operation: OperationDefinitionNode) -> bool:
    return any(
        isinstance(node, FieldNode) and node.name.value in ("__schema", "__type")
        for node in operation.selection_set.selections
    )


class QueryDepthMiddleware:
    def __init__(self, max_depth: int, introspection_max_depth: int = None):
        """
        Rejects operations nested deeper than `max_depth`.

        Introspection queries (the playground asks for the schema this way) are
        nested deeply by nature and get `introspection_max_depth` instead.
        """
        self.max_depth = max_depth
        self.introspection_max_depth = introspection_max_depth or max(max_depth, 15)
        # (operation, limit, depth) of the last operation measured; its sibling fields reuse it
        self._measured = None
        log.info(
            f"QueryDepthMiddleware initialized with max_depth={self.max_depth}, "
            f"introspection_max_depth={self.introspection_max_depth}"
        )

    def resolve(self, next_, root, info, **args):
        # Only top-level fields are checked; nested resolvers run after the operation passed
        if root is None and isinstance(getattr(info, "operation", None), OperationDefinitionNode):
            _, limit, depth = self._measure(info.operation, info.fragments or {})
            if depth > limit:
                log.warning(f"Query rejected: depth {depth} exceeds maximum of {limit}.")
                raise GraphQLError(f"Query exceeds maximum depth of {limit}. Actual depth: {depth}")
        return next_(root, info, **args)

    def _measure(self, operation: OperationDefinitionNode, fragments: dict) -> tuple:
        measured = self._measured
        if measured is not None and measured[0] is operation:
            return measured
        limit = self.introspection_max_depth if is_introspection(operation) else self.max_depth
        measured = (operation, limit, selection_depth(operation.selection_set, fragments))
        self._measured = measured
        return measured
