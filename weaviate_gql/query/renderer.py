"""
Query renderer -- turns assembled builder state into GraphQL query text.

Layout is fixed and part of the contract (callers and tests compare exact
text):

    {
      Get {
        JeopardyQuestion
        (
          limit: 1
        )
        {
          question
        }
      }
    }

Explore queries have no entity line, so their clause and body blocks sit
one level shallower.  The clause block is only emitted when at least one
clause is present.  No trailing newline.
"""
from __future__ import annotations

_INDENT = "  "


def render_document(
    operation: str,
    entity: str | None,
    clauses: list[str],
    body: list[str],
) -> str:
    """Render the three-part query document.

    Parameters
    ----------
    operation : str
        ``Get``, ``Aggregate`` or ``Explore``.
    entity : str | None
        Class name; ``None`` for entity-less operations (Explore).
    clauses : list[str]
        Already formatted ``name: value`` lines, in render order.
    body : list[str]
        Body lines relative to the body block (nested blocks carry their
        own extra indentation).
    """
    lines: list[str] = ["{"]

    if entity is None:
        lines.append(f"{_INDENT}{operation}")
        pad = _INDENT
    else:
        lines.append(f"{_INDENT}{operation} {{")
        lines.append(f"{_INDENT * 2}{entity}")
        pad = _INDENT * 2

    if clauses:
        lines.append(f"{pad}(")
        lines.extend(f"{pad}{_INDENT}{clause}" for clause in clauses)
        lines.append(f"{pad})")

    lines.append(f"{pad}{{")
    lines.extend(f"{pad}{_INDENT}{line}" for line in body)
    lines.append(f"{pad}}}")

    if entity is not None:
        lines.append(f"{_INDENT}}}")
    lines.append("}")
    return "\n".join(lines)


def nested_block(name: str, items: list[str] | tuple[str, ...]) -> list[str]:
    """Body lines for a nested selection such as ``_additional { ... }``."""
    return [f"{name} {{", *(f"{_INDENT}{item}" for item in items), "}"]


def wrap_payload(text: str) -> dict[str, str]:
    """Wrap query text into the request envelope."""
    return {"query": text}
