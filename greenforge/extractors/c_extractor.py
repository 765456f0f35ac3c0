"""
C-specific syntax tree builder
"""
from greenforge.extractors.base_extractor import BaseExtractor


class CExtractor(BaseExtractor):
    """Classify tree-sitter-c nodes"""

    language = 'c'

    ROUTINE_TYPES = frozenset({'function_definition'})
    LOOP_TYPES = frozenset({'for_statement', 'while_statement', 'do_statement'})
    CALL_TYPES = frozenset({'call_expression'})
    STRING_TYPES = frozenset({'string_literal'})
    BLOCK_TYPES = frozenset({'compound_statement', 'labeled_statement'})

    NAME_TYPES = frozenset({'identifier', 'field_identifier'})

    def call_name(self, call_node, source_code):
        """Name of a called function; `s.fn(...)` and `p->fn(...)` give fn"""
        func = call_node.child_by_field_name('function')
        if not func:
            return None
        if func.type == 'identifier':
            return self.node_text(func, source_code)
        if func.type == 'field_expression':
            field = func.child_by_field_name('field')
            if field:
                return self.node_text(field, source_code)
        return None

    def routine_name(self, routine_node, source_code):
        declarator = routine_node.child_by_field_name('declarator')
        return self._get_function_name(declarator, source_code)

    def _get_function_name(self, declarator, source_code):
        """Extract function name from a (possibly pointer-wrapped) declarator"""
        while declarator is not None and declarator.type != 'function_declarator':
            if declarator.type in self.NAME_TYPES:
                return self.node_text(declarator, source_code)
            declarator = declarator.child_by_field_name('declarator')

        if declarator is None:
            return None

        inner = declarator.child_by_field_name('declarator')
        if inner and inner.type in self.NAME_TYPES:
            return self.node_text(inner, source_code)
        return None
