"""Tree-sitter based extraction of module references from JS/TS sources."""

from __future__ import annotations

import threading
from pathlib import Path

from next_unused.errors import FileReadError, ParseError
from next_unused.models import ModuleReference, ReferenceKind
from next_unused.scanner.language_map import GRAMMAR_NAME

try:
    from tree_sitter_language_pack import get_parser
except ImportError as _err:
    raise ImportError(
        "tree-sitter-language-pack is required. Install with: "
        "pip install tree-sitter-language-pack"
    ) from _err

# Statement node types that may carry a ``source`` field
_SOURCE_STATEMENTS: dict[str, ReferenceKind] = {
    "import_statement": ReferenceKind.IMPORT,
    "export_statement": ReferenceKind.EXPORT_FROM,
}


class ReferenceExtractor:
    """Collects import/export/require/import() specifiers in one tree walk.

    Parsers are not thread-safe, so each thread gets its own.
    """

    def __init__(self, grammar_name: str = GRAMMAR_NAME):
        self.grammar_name = grammar_name
        self._local = threading.local()

    def extract_file(self, path: Path) -> list[ModuleReference]:
        """Read ``path`` as UTF-8 and extract its module references.

        Raises:
            FileReadError: the file is unreadable or not valid UTF-8.
            ParseError: the file has a syntax error.
        """
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            message = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise FileReadError(path, message) from e
        return self.extract(source, path=path)

    def extract(self, source: bytes | str, path: Path | None = None) -> list[ModuleReference]:
        """Return the module references in ``source`` in order of appearance.

        Raises:
            ParseError: if the parser reports a syntax error anywhere in the file.
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        tree = self._get_parser().parse(source)
        root = tree.root_node
        if root.has_error:
            line = _first_error_line(root)
            raise ParseError(path or Path("<string>"), f"syntax error near line {line}")

        refs: list[ModuleReference] = []
        stack = [root]
        while stack:
            node = stack.pop()
            ref = self._reference_for(node)
            if ref is not None:
                refs.append(ref)
            stack.extend(reversed(node.children))
        return refs

    def _reference_for(self, node) -> ModuleReference | None:
        if node.type in _SOURCE_STATEMENTS:
            source_node = node.child_by_field_name("source")
            if source_node is not None:
                return _make_ref(source_node, _SOURCE_STATEMENTS[node.type])
            # TypeScript: import x = require("y")
            for child in node.named_children:
                if child.type == "import_require_clause":
                    source_node = child.child_by_field_name("source")
                    if source_node is not None:
                        return _make_ref(source_node, ReferenceKind.REQUIRE)
            return None

        if node.type == "call_expression":
            callee = node.child_by_field_name("function")
            args = node.child_by_field_name("arguments")
            if callee is None or args is None or args.type != "arguments":
                return None
            if callee.type == "import":
                kind = ReferenceKind.DYNAMIC_IMPORT
            elif callee.type == "identifier" and callee.text == b"require":
                kind = ReferenceKind.REQUIRE
            else:
                return None
            values = [c for c in args.named_children if c.type != "comment"]
            if len(values) == 1 and values[0].type == "string":
                return _make_ref(values[0], kind)
        return None

    def _get_parser(self):
        parser = getattr(self._local, "parser", None)
        if parser is None:
            parser = get_parser(self.grammar_name)
            self._local.parser = parser
        return parser


def _make_ref(string_node, kind: ReferenceKind) -> ModuleReference | None:
    if string_node.type != "string":
        return None
    text = string_node.text.decode("utf-8", errors="replace")
    return ModuleReference(
        specifier=text[1:-1],
        kind=kind,
        line=string_node.start_point[0] + 1,
    )


def _first_error_line(root) -> int:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    return root.start_point[0] + 1
