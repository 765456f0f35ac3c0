"""
Python-specific syntax tree builder
"""
from greenforge.extractors.base_extractor import BaseExtractor


class PythonExtractor(BaseExtractor):
    """Classify tree-sitter-python nodes"""

    language = 'python'

    ROUTINE_TYPES = frozenset({'function_definition'})
    LOOP_TYPES = frozenset({'for_statement', 'while_statement'})
    CALL_TYPES = frozenset({'call'})
    STRING_TYPES = frozenset({'string'})
    BLOCK_TYPES = frozenset({'block'})

    def call_name(self, call_node, source_code):
        """Name of a called function: `f(...)` -> f, `obj.method(...)` -> method"""
        func_name_node = call_node.child_by_field_name('function')
        if not func_name_node:
            return None

        if func_name_node.type == 'identifier':
            return self.node_text(func_name_node, source_code)

        if func_name_node.type == 'attribute':
            attr_node = func_name_node.child_by_field_name('attribute')
            if attr_node:
                return self.node_text(attr_node, source_code)

        return None

    def call_arity(self, call_node):
        args = call_node.child_by_field_name('arguments')
        if args is None:
            return 0
        # f(x for x in xs) passes a single generator argument
        if args.type == 'generator_expression':
            return 1
        return super().call_arity(call_node)

    def routine_name(self, routine_node, source_code):
        name_node = routine_node.child_by_field_name('name')
        if not name_node:
            return None
        return self.node_text(name_node, source_code)
