from __future__ import annotations

from tomato.generator.base_generator import TomatoGenerator
from tomato.generator.visitors.typescript_visitor import TypeScriptVisitor


class TypeScriptGenerator(TomatoGenerator):
    """Generates TypeScript view classes extending the runtime's base view."""
    visitor_class = TypeScriptVisitor

    def emit_preamble(self) -> str:
        opts = self.options
        return f"import {{ {opts.view_base_class}, {opts.view_factory} }} from '{opts.import_location}';"

    def emit_postamble(self) -> str:
        return ""
