# expression_tree.py
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple
import math

class NodeType(Enum):
    CONSTANT = 1
    VARIABLE = 2
    OPERATOR = 3

@dataclass(frozen=True)
class Node:
    """Immutable expression tree node.

    CONSTANT nodes keep a number in ``value``, VARIABLE nodes keep the
    symbol name in ``value``. OPERATOR nodes keep a ``Function`` in
    ``func`` and exactly ``func.arity`` children.
    """
    type: NodeType
    value: Any = None
    func: Any = None
    children: Tuple['Node', ...] = ()

    @classmethod
    def constant(cls, value) -> 'Node':
        return cls(NodeType.CONSTANT, value=value)

    @classmethod
    def variable(cls, name: str) -> 'Node':
        return cls(NodeType.VARIABLE, value=name)

    @classmethod
    def operator(cls, func, children: Sequence['Node']) -> 'Node':
        children = tuple(children)
        if len(children) != func.arity:
            raise ValueError(f"Function '{func.name}' expects {func.arity} children, got {len(children)}")
        return cls(NodeType.OPERATOR, func=func, children=children)

    @property
    def is_terminal(self) -> bool:
        return self.type != NodeType.OPERATOR

    def with_child(self, index: int, child: 'Node') -> 'Node':
        # Siblings are shared with self, not copied
        children = self.children[:index] + (child,) + self.children[index + 1:]
        return replace(self, children=children)

def tree_height(node: Node) -> int:
    if node.is_terminal:
        return 0
    return 1 + max(tree_height(child) for child in node.children)

def tree_size(node: Optional[Node]) -> int:
    if node is None:
        return 0
    if node.is_terminal:
        return 1
    return 1 + sum(tree_size(child) for child in node.children)

def subtree_at(node: Node, path: Sequence[int]) -> Node:
    for index in path:
        node = node.children[index]
    return node

def replace_at(node: Node, path: Sequence[int], replacement: Node) -> Node:
    """Rebuild the nodes along ``path`` so that the subtree it points to is
    ``replacement``. Everything off the path is shared with ``node``."""
    if not path:
        return replacement
    index = path[0]
    return node.with_child(index, replace_at(node.children[index], path[1:], replacement))

def evaluate_tree(node: Node, bindings: Dict[str, Any]):
    if node.type == NodeType.CONSTANT:
        return node.value
    elif node.type == NodeType.VARIABLE:
        return bindings[node.value]
    args = [evaluate_tree(child, bindings) for child in node.children]
    return node.func.op(*args)

def compile_tree(symbols: Sequence[str], tree: Node) -> Callable:
    """Turn ``tree`` into a function of one positional argument per symbol,
    in declared order. Faults raised while evaluating are not caught."""
    symbols = tuple(symbols)

    def program(*args):
        if len(args) != len(symbols):
            raise TypeError(f"Program takes {len(symbols)} arguments ({len(args)} given)")
        return evaluate_tree(tree, dict(zip(symbols, args)))

    return program

def _format_constant(val) -> str:
    if isinstance(val, float) and not math.isinf(val) and not math.isnan(val):
        if abs(val - round(val)) < 1e-6:
            return str(int(round(val)))
        return f"{val:.6f}"
    return str(val)

def tree_to_string(node: Optional[Node]) -> str:
    if node is None:
        return ''
    if node.type == NodeType.CONSTANT:
        return _format_constant(node.value)
    elif node.type == NodeType.VARIABLE:
        return str(node.value)
    name = node.func.name
    if len(node.children) == 2 and not name.isidentifier():
        return f"({tree_to_string(node.children[0])} {name} {tree_to_string(node.children[1])})"
    return f"{name}(" + ", ".join(tree_to_string(c) for c in node.children) + ")"
