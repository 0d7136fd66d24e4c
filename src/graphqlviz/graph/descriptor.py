"""Node descriptor tables and their Graphviz HTML-like rendering."""

import html

from ..config import RenderConfig
from ..models.introspection import SchemaType
from .models import DescriptorRow, DescriptorTable, RowKind
from .types import describe_type, is_enum, is_relational_field

ENUM_STEREOTYPE = "«enum»"


def stereotype(t: SchemaType) -> str:
    return ENUM_STEREOTYPE if is_enum(t) else ""


def build_descriptor(t: SchemaType) -> DescriptorTable:
    """Summarise a type's scalar fields and enum values.

    Relational fields are left out; they are drawn as edges instead.
    """
    rows = [
        DescriptorRow(text=f"{f.name}: {describe_type(f.type)}", kind=RowKind.FIELD)
        for f in t.fields
        if not is_relational_field(f)
    ]
    if is_enum(t):
        rows.extend(DescriptorRow(text=v.name, kind=RowKind.ENUM_VALUE) for v in t.enum_values)
    return DescriptorTable(title=t.name, stereotype=stereotype(t), rows=rows)


def descriptor_to_html(table: DescriptorTable, style: RenderConfig) -> str:
    """Graphviz HTML-like label for a descriptor table."""
    esc = html.escape
    parts = [
        '<TABLE CELLSPACING="0" BORDER="1">',
        f'<TR><TD BGCOLOR="{esc(style.header_color)}" COLSPAN="2">'
        f'<FONT COLOR="{esc(style.header_font_color)}">'
        f'<B>{esc(table.title)}</B><BR/>{esc(table.stereotype)}</FONT></TD></TR>',
    ]
    for row in table.rows:
        # Enum values span both columns like the header.
        colspan = ' COLSPAN="2"' if row.kind == RowKind.ENUM_VALUE else ""
        parts.append(f'<TR><TD ALIGN="left" BORDER="0"{colspan}>{esc(row.text)}</TD></TR>')
    parts.append("</TABLE>")
    return "<" + "".join(parts) + ">"
