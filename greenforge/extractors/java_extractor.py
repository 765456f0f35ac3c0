"""
Java-specific syntax tree builder
"""
from greenforge.extractors.base_extractor import BaseExtractor


class JavaExtractor(BaseExtractor):
    """Classify tree-sitter-java nodes"""

    language = 'java'

    ROUTINE_TYPES = frozenset({'method_declaration', 'constructor_declaration'})
    LOOP_TYPES = frozenset({
        'for_statement', 'enhanced_for_statement', 'while_statement', 'do_statement',
    })
    CALL_TYPES = frozenset({'method_invocation'})
    STRING_TYPES = frozenset({'string_literal'})
    BLOCK_TYPES = frozenset({'block', 'labeled_statement'})
    COMMENT_TYPES = frozenset({'line_comment', 'block_comment'})

    def call_name(self, call_node, source_code):
        """Method name of a method_invocation, ignoring the receiver object"""
        name_node = call_node.child_by_field_name('name')
        if not name_node:
            return None
        return self.node_text(name_node, source_code)

    def routine_name(self, routine_node, source_code):
        name_node = routine_node.child_by_field_name('name')
        if not name_node:
            return None
        return self.node_text(name_node, source_code)
