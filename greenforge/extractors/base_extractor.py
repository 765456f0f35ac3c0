"""
Base extractor class for language-specific syntax tree builders
"""
from abc import ABC, abstractmethod

from greenforge.models.syntax_tree import NodeKind, SyntaxTree


class BaseExtractor(ABC):
    """
    Lower a tree-sitter tree into a language-neutral SyntaxTree

    Subclasses declare which grammar node types are routines, loops, calls,
    string literals and statement blocks, and how to read a call's name.
    """

    language = None

    ROUTINE_TYPES = frozenset()
    LOOP_TYPES = frozenset()
    CALL_TYPES = frozenset()
    STRING_TYPES = frozenset()
    BLOCK_TYPES = frozenset()
    COMMENT_TYPES = frozenset({'comment'})

    def extract(self, root_node, source_code, filepath):
        """
        Build a SyntaxTree from a parsed file

        Args:
            root_node: Tree-sitter root node
            source_code: Source code bytes
            filepath: Path reported in findings

        Returns:
            SyntaxTree whose node indices follow source order
        """
        tree = SyntaxTree(source_code, filepath=filepath, language=self.language)

        stack = [(root_node, None)]
        while stack:
            ts_node, parent = stack.pop()
            kind = self.classify(ts_node)

            name = None
            arity = None
            if kind is NodeKind.CALL:
                name = self.call_name(ts_node, source_code)
                arity = self.call_arity(ts_node)
            elif kind is NodeKind.ROUTINE:
                name = self.routine_name(ts_node, source_code)

            row, column = ts_node.start_point
            node = tree.add_node(
                kind,
                ts_node.type,
                parent=parent,
                position=(row + 1, column + 1),
                start_byte=ts_node.start_byte,
                end_byte=ts_node.end_byte,
                name=name,
                arity=arity
            )

            for child in reversed(ts_node.named_children):
                stack.append((child, node))

        return tree

    def classify(self, ts_node):
        """Map a grammar node type onto a NodeKind"""
        node_type = ts_node.type
        if node_type in self.ROUTINE_TYPES:
            return NodeKind.ROUTINE
        if node_type in self.LOOP_TYPES:
            return NodeKind.LOOP
        if node_type in self.CALL_TYPES:
            return NodeKind.CALL
        if node_type in self.STRING_TYPES:
            return NodeKind.STRING
        if node_type in self.BLOCK_TYPES:
            return NodeKind.BLOCK
        return NodeKind.OTHER

    @abstractmethod
    def call_name(self, call_node, source_code):
        """
        Simple name of the callee of a call expression

        Args:
            call_node: Tree-sitter call node
            source_code: Source code bytes

        Returns:
            Callee name (str) or None when the callee is not a plain name
        """
        pass

    @abstractmethod
    def routine_name(self, routine_node, source_code):
        """Declared name of a routine, or None"""
        pass

    def call_arity(self, call_node):
        """Number of arguments passed by a call expression"""
        args = call_node.child_by_field_name('arguments')
        if args is None:
            return 0
        return len([c for c in args.named_children if c.type not in self.COMMENT_TYPES])

    @staticmethod
    def node_text(node, source_code):
        return source_code[node.start_byte:node.end_byte].decode('utf-8', errors='replace')
