"""Formatting of host documentation text into doc-comment bodies."""

from __future__ import annotations

from typing import Tuple

from .constants import DEFAULT_CODE_LANGUAGE


def markup_replacements(code_language: str = DEFAULT_CODE_LANGUAGE) -> Tuple[Tuple[str, str], ...]:
    """Return the ordered inline markup translations applied to doc text."""
    return (
        ("[code]", "`"),
        ("[/code]", "`"),
        ("[codeblock]", f"```{code_language}"),
        ("[/codeblock]", "```"),
    )


def format_doc_text(
    source: str,
    indent: str = "\t",
    *,
    code_language: str = DEFAULT_CODE_LANGUAGE,
) -> str:
    """Indent each non-blank line and translate the inline markup.

    Lines end with two spaces before the newline to force a markdown break.
    """
    lines = []
    for line in source.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        lines.append(f"{indent}{stripped}  \n")
    text = "".join(lines)
    for token, replacement in markup_replacements(code_language):
        text = text.replace(token, replacement)
    return text


__all__ = ["format_doc_text", "markup_replacements"]
