"""
C++-specific syntax tree builder
"""
from greenforge.extractors.c_extractor import CExtractor


class CppExtractor(CExtractor):
    """Classify tree-sitter-cpp nodes"""

    language = 'cpp'

    LOOP_TYPES = frozenset({
        'for_statement', 'for_range_loop', 'while_statement', 'do_statement',
    })
    STRING_TYPES = frozenset({'string_literal', 'raw_string_literal'})

    NAME_TYPES = frozenset({
        'identifier', 'field_identifier', 'destructor_name', 'operator_name',
    })

    def call_name(self, call_node, source_code):
        """
        Simple name of a C++ callee

        Handles plain names, member access (`obj.fn`, `ptr->fn`), qualified
        names (`ns::Type::fn`) and template calls (`make<T>`).
        """
        func = call_node.child_by_field_name('function')
        return self._simple_name(func, source_code)

    def _simple_name(self, node, source_code):
        while node is not None:
            if node.type in self.NAME_TYPES:
                return self.node_text(node, source_code)
            if node.type == 'field_expression':
                node = node.child_by_field_name('field')
            elif node.type in ('qualified_identifier', 'template_function', 'template_method'):
                node = node.child_by_field_name('name')
            else:
                return None
        return None

    def _get_function_name(self, declarator, source_code):
        """Function name, including out-of-class `Type::method` definitions"""
        while declarator is not None and declarator.type != 'function_declarator':
            declarator = declarator.child_by_field_name('declarator')

        if declarator is None:
            return None

        return self._simple_name(declarator.child_by_field_name('declarator'), source_code)
