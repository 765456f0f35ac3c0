"""
Language-neutral syntax tree consumed by the pattern matchers

Nodes live in a flat list and are addressed by index. Parent links are kept
in a separate index -> index map so the tree only owns nodes top-down.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple


class NodeKind(Enum):
    """Node categories the matchers care about"""
    ROUTINE = 'routine'  # function / method / constructor declaration
    LOOP = 'loop'  # for / while / do
    CALL = 'call'  # function or method call expression
    STRING = 'string'  # string literal
    BLOCK = 'block'  # statement grouping, transparent for loop nesting
    OTHER = 'other'


@dataclass
class SyntaxNode:
    """
    One node of a SyntaxTree

    `position` is the 1-based (line, column) of the node's first character,
    or None when the front-end could not record one.
    """
    index: int
    kind: NodeKind
    node_type: str  # raw grammar type, e.g. 'enhanced_for_statement'
    position: Optional[Tuple[int, int]] = None
    start_byte: int = 0
    end_byte: int = 0
    children: List[int] = field(default_factory=list)
    name: Optional[str] = None  # callee name for calls, declared name for routines
    arity: Optional[int] = None  # argument count for calls

    def __repr__(self):
        return f"<{self.kind.value}:{self.node_type}#{self.index} @{self.position}>"


class SyntaxTree:
    """
    Arena of SyntaxNodes for a single source file
    """

    def __init__(self, source_code: bytes, filepath: str = '<string>', language: Optional[str] = None):
        """
        Args:
            source_code: Raw bytes of the parsed file (used for surface text)
            filepath: Path reported in findings
            language: Language identifier of the front-end that built the tree
        """
        self.source_code = source_code
        self.filepath = filepath
        self.language = language
        self.nodes: List[SyntaxNode] = []
        self._parents: Dict[int, int] = {}

    def add_node(
        self,
        kind: NodeKind,
        node_type: str,
        parent: Optional[SyntaxNode] = None,
        position: Optional[Tuple[int, int]] = None,
        start_byte: int = 0,
        end_byte: int = 0,
        name: Optional[str] = None,
        arity: Optional[int] = None
    ) -> SyntaxNode:
        """
        Append a node to the arena, linking it under `parent` if given

        The first node added without a parent is the root.
        """
        node = SyntaxNode(
            index=len(self.nodes),
            kind=kind,
            node_type=node_type,
            position=position,
            start_byte=start_byte,
            end_byte=end_byte,
            name=name,
            arity=arity
        )
        self.nodes.append(node)

        if parent is not None:
            parent.children.append(node.index)
            self._parents[node.index] = parent.index

        return node

    @property
    def root(self) -> Optional[SyntaxNode]:
        return self.nodes[0] if self.nodes else None

    def node(self, index: int) -> SyntaxNode:
        return self.nodes[index]

    def parent(self, node: SyntaxNode) -> Optional[SyntaxNode]:
        """Get the parent of a node, or None for the root"""
        parent_index = self._parents.get(node.index)
        if parent_index is None:
            return None
        return self.nodes[parent_index]

    def children(self, node: SyntaxNode) -> List[SyntaxNode]:
        return [self.nodes[i] for i in node.children]

    def ancestors(self, node: SyntaxNode) -> Iterator[SyntaxNode]:
        """Walk the parent chain upward, nearest ancestor first"""
        current = self.parent(node)
        while current is not None:
            yield current
            current = self.parent(current)

    def position(self, node: SyntaxNode) -> Optional[Tuple[int, int]]:
        return node.position

    def text(self, node: SyntaxNode) -> str:
        """Surface text of a node as it appears in the source"""
        return self.source_code[node.start_byte:node.end_byte].decode('utf-8', errors='replace')

    def iter_subtree(self, node: SyntaxNode, stop_at: FrozenSet[NodeKind] = frozenset()) -> Iterator[SyntaxNode]:
        """
        Preorder traversal of `node` and its descendants

        Args:
            node: Subtree root (always yielded)
            stop_at: Node kinds whose subtrees are not entered below `node`;
                the stopping node itself is not yielded either

        Yields:
            SyntaxNode objects in source order
        """
        stack = [node]
        while stack:
            current = stack.pop()
            if current is not node and current.kind in stop_at:
                continue
            yield current
            stack.extend(self.nodes[i] for i in reversed(current.children))

    def find_all(
        self,
        kind: NodeKind,
        root: Optional[SyntaxNode] = None,
        stop_at: FrozenSet[NodeKind] = frozenset()
    ) -> List[SyntaxNode]:
        """
        Find all nodes of a kind within a subtree (the root included)

        Args:
            kind: NodeKind to collect
            root: Subtree root, defaults to the tree root
            stop_at: Node kinds whose subtrees are skipped (see iter_subtree)

        Returns:
            Matching nodes in source order
        """
        if root is None:
            root = self.root
            if root is None:
                return []
        return [n for n in self.iter_subtree(root, stop_at) if n.kind is kind]

    def routines(self) -> List[SyntaxNode]:
        """All routine declarations in the file, in source order"""
        return self.find_all(NodeKind.ROUTINE)

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return f"<SyntaxTree {self.filepath} [{self.language}] {len(self.nodes)} nodes>"
