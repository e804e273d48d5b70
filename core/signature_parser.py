import re
from typing import List, Optional, Sequence, Tuple

from core.line_classifier import GENERIC_MARKER
from uml_types import Visibility

_MODIFIERS = "static|virtual|abstract|override|async|sealed|extern|unsafe|partial|readonly|internal|protected|new"
_PROPERTY_MODIFIERS = _MODIFIERS + "|event|const|volatile|required"

_OPEN, _CLOSE = "open", "close"


def _opens_span(text: str, i: int) -> bool:
    # A marker opens a span when it sits between a type name and its first argument.
    prev = text[i - 1] if i > 0 else ""
    nxt = text[i + 1] if i + 1 < len(text) else ""
    return (prev.isalnum() or prev == "_") and (nxt.isalpha() or nxt in "_@(")


def scan_generic_depths(text: str) -> List[Tuple[int, Optional[str]]]:
    """Nesting depth and marker role for every character of ``text``.

    Markers report the depth outside the span they open or close, so every
    character at depth 0 belongs to the top level. Stray closers clamp at 0.
    """
    result: List[Tuple[int, Optional[str]]] = []
    depth = 0
    for i, ch in enumerate(text):
        if ch != GENERIC_MARKER:
            result.append((depth, None))
        elif _opens_span(text, i):
            result.append((depth, _OPEN))
            depth += 1
        else:
            depth = max(depth - 1, 0)
            result.append((depth, _CLOSE))
    return result


def split_top_level(text: str, sep: str = ",") -> List[str]:
    """Split on ``sep`` outside generic spans, however deeply nested."""
    parts: List[str] = []
    current = ""
    for ch, (depth, _) in zip(text, scan_generic_depths(text)):
        if ch == sep and depth == 0:
            parts.append(current)
            current = ""
            continue
        current += ch
    parts.append(current)
    return parts


def collapse_generics(text: str) -> str:
    """Replace every outermost generic span with a single placeholder."""
    out: List[str] = []
    for ch, (depth, role) in zip(text, scan_generic_depths(text)):
        if depth:
            continue
        if role == _OPEN:
            out.append(f"{GENERIC_MARKER}T{GENERIC_MARKER}")
        elif role is None:
            out.append(ch)
    return "".join(out)


class CSharpSignatureParser:
    """Pattern-capture parsing of classified C# and XAML lines.

    Every ``parse_*`` method returns ``None`` when its pattern does not
    match; callers drop the line in that case.
    """

    _PRIMARY_CTOR = re.compile(r'\([^)]*\)')
    _METHOD = re.compile(
        r'^(?P<visibility>public|private|protected|internal)?\s*'
        r'(?P<modifiers>(?:(?:' + _MODIFIERS + r')\s+)*)'
        r'(?:(?P<return_type>[^\s(]+)\s+)?'
        r'(?P<name>[^\s(]+)\s*\((?P<params>[^)]*)\)'
    )
    _ENUM = re.compile(r'\benum\s+(?P<name>\w+)(?:\s*:\s*\w+)?\s*(?:\{(?P<values>[^}]*)\}?)?')
    _PROPERTY = re.compile(
        r'^(?P<visibility>public|private|protected|internal)?'
        r'(?P<modifiers>(?:\s+(?:' + _PROPERTY_MODIFIERS + r')\b)*)\s*'
        r'(?!(?:public|private|protected|internal)\b)(?P<type>[^\s=;{]+)\s+'
        r'(?P<name>@?[A-Za-z_]\w*)'
    )
    _COMPACT_COMMAS = re.compile(r'\s*,\s*')
    # Keywords that look like a property type on lines repeating a type header.
    _NOT_A_TYPE = frozenset({"enum", "class", "interface", "struct"})

    _MARKUP_CLASS = re.compile(r'\bx:Class\s*=\s*"(?P<value>[\w.]+)"')
    _MARKUP_NAME = re.compile(r'(?:^|\s)(?:x:)?Name\s*=\s*"(?P<name>[A-Za-z_]\w*)"')
    _MARKUP_TAG = re.compile(r'~(?P<tag>[A-Za-z_][\w:.]*)')
    _DESIGN_INSTANCE = re.compile(
        r'DataContext\s*=\s*"\{\s*(?:d:)?DesignInstance\s+'
        r'(?:Type\s*=\s*)?(?:\{\s*x:Type\s+)?(?P<type>[\w:.]+)'
    )
    _DATA_CONTEXT_ELEMENT = re.compile(r'~[\w:]*\.DataContext~\s*~(?P<type>[\w:.]+)')

    @classmethod
    def parse_type_declaration(cls, line: str) -> Optional[Tuple[str, List[str]]]:
        """Return ``(name, base_names)`` for a class or interface header."""
        # Generic spans are collapsed first so their commas and spaces do not
        # leak into the base list.
        collapsed = cls._PRIMARY_CTOR.sub("", collapse_generics(line))
        parts = [p.strip(",{") for p in collapsed.replace(":", " : ").split()]
        parts = [p for p in parts if p]
        if not parts:
            return None
        if ":" in parts:
            idx = parts.index(":")
            if idx == 0:
                return None
            name = parts[idx - 1]
            bases: List[str] = []
            for token in parts[idx + 1:]:
                if token == "where":
                    break
                bases.append(token)
        else:
            name = parts[-1]
            bases = []
        if name in ("class", "interface"):
            return None
        return name, bases

    @classmethod
    def format_parameters(cls, params: str) -> str:
        formatted: List[str] = []
        for param in split_top_level(params):
            param = cls._COMPACT_COMMAS.sub(",", param.strip())
            if not param:
                continue
            # Leading tokens such as ref, out, this or attributes are not part of the type.
            split = param.split()
            if len(split) == 1:
                param_type, param_name = split[0], ""
            else:
                param_type, param_name = split[-2], split[-1]
            formatted.append(f"{param_name}: {param_type}")
        return ", ".join(formatted)

    @classmethod
    def parse_method(cls, line: str) -> Optional[str]:
        """Render a method or constructor header as a member fragment."""
        m = cls._METHOD.search(line)
        if not m:
            return None
        glyph = Visibility.from_keyword(m.group("visibility") or "").glyph
        return_type = m.group("return_type") or ""
        rendered = f"{glyph}{m.group('name')}({cls.format_parameters(m.group('params'))}) {return_type}"
        return rendered.rstrip()

    @staticmethod
    def split_values(text: str) -> List[str]:
        return [w.strip() for w in text.split(",") if w.strip(" \t{}")]

    @classmethod
    def parse_enum(cls, line: str, lines: Sequence[str], index: int) -> Optional[Tuple[str, List[str]]]:
        """Return ``(name, values)``.

        Values come from the inline brace list when it is non-empty, else from
        the lines following ``index`` up to the first one containing ``}``.
        """
        m = cls._ENUM.search(line)
        if not m:
            return None
        inline = (m.group("values") or "").strip()
        if inline:
            return m.group("name"), cls.split_values(inline)
        values: List[str] = []
        for following in lines[index + 1:]:
            if "}" in following:
                break
            values.extend(v.strip("{ \t") for v in cls.split_values(following))
        return m.group("name"), [v for v in values if v]

    @classmethod
    def parse_property(cls, line: str) -> Optional[Tuple[str, str]]:
        """Return ``(fragment, declared_type)`` for a field, property or event."""
        m = cls._PROPERTY.match(cls._COMPACT_COMMAS.sub(",", line))
        if not m:
            return None
        var_type = m.group("type")
        if var_type in cls._NOT_A_TYPE:
            return None
        glyph = Visibility.from_keyword(m.group("visibility") or "").glyph
        fragment = f"{glyph}{m.group('name')}: {var_type}"
        if "event" in (m.group("modifiers") or "").split():
            fragment += " [event]"
        if "get;" in line:
            fragment += " [get]"
        if "set;" in line:
            fragment += " [set]"
        return fragment, var_type

    @classmethod
    def parse_markup_class_name(cls, line: str) -> Optional[str]:
        m = cls._MARKUP_CLASS.search(line)
        if not m:
            return None
        return m.group("value").split(".")[-1] or None

    @staticmethod
    def strip_xml_prefix(tag: str) -> str:
        return tag.split(":")[-1]

    @classmethod
    def last_opened_tag(cls, line: str) -> Optional[str]:
        """Element name of the last opening tag on a normalized markup line."""
        tags = [t for t in cls._MARKUP_TAG.findall(line) if "." not in t]
        return cls.strip_xml_prefix(tags[-1]) if tags else None

    @classmethod
    def parse_markup_binding(cls, line: str, last_tag: Optional[str] = None) -> Optional[Tuple[str, str]]:
        """Return ``(element_type, name)`` for an element carrying ``x:Name``.

        ``last_tag`` is used when the attribute sits on a continuation line.
        """
        m = cls._MARKUP_NAME.search(line)
        if not m:
            return None
        element_type = cls.last_opened_tag(line[:m.start()]) or last_tag
        if not element_type:
            return None
        return element_type, m.group("name")

    @classmethod
    def parse_data_context(cls, text: str) -> Optional[str]:
        """Find the view-model type assigned as a markup file's data context."""
        flat = " ".join(text.split())
        for pattern in (cls._DESIGN_INSTANCE, cls._DATA_CONTEXT_ELEMENT):
            m = pattern.search(flat)
            if m:
                return cls.strip_xml_prefix(m.group("type")).split(".")[-1]
        return None


__all__ = ["CSharpSignatureParser", "collapse_generics", "scan_generic_depths", "split_top_level"]
