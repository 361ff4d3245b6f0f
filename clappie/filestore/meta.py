"""Plain-text files with a body followed by tagged metadata blocks.

The on-disk layout is::

    body text

    ---
    [chore-meta]
    key: value
"""

from __future__ import annotations

from dataclasses import dataclass, field

_SEPARATOR = "\n---\n"
_BARE_SEPARATOR = "---\n"


@dataclass
class MetaBlock:
    """A named group of ``key: value`` fields."""

    tag: str
    fields: dict[str, str] = field(default_factory=dict)


def parse_file(content: str) -> tuple[str, list[MetaBlock]]:
    """Split file content into its body and its metadata blocks."""
    before, sep, after = content.partition(_SEPARATOR)
    if sep:
        return before.strip(), _parse_meta_blocks(after)

    _, sep, after = content.partition(_BARE_SEPARATOR)
    if not sep:
        return content.strip(), []
    return "", _parse_meta_blocks(after)


def _split_field(line: str) -> tuple[str, str] | None:
    for delimiter in (": ", ":"):
        idx = line.find(delimiter)
        if idx > 0:
            return line[:idx].strip(), line[idx + len(delimiter):].strip()
    return None


def _parse_meta_blocks(section: str) -> list[MetaBlock]:
    blocks: list[MetaBlock] = []
    current: MetaBlock | None = None

    for raw in section.split("\n"):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("[") and line.endswith("]"):
            current = MetaBlock(tag=line[1:-1])
            blocks.append(current)
            continue
        if current is not None:
            pair = _split_field(line)
            if pair is not None:
                key, value = pair
                current.fields[key] = value

    return blocks


def format_file(body: str, blocks: list[MetaBlock]) -> str:
    """Render a body and metadata blocks back into file content."""
    parts: list[str] = []
    if body:
        parts.append(body)

    if blocks:
        if body:
            parts.append("\n\n")
        parts.append("---\n")
        for i, block in enumerate(blocks):
            if i > 0:
                parts.append("\n")
            parts.append(f"[{block.tag}]\n")
            parts.extend(f"{key}: {value}\n" for key, value in block.fields.items())

    return "".join(parts)


def get_meta(blocks: list[MetaBlock], tag: str) -> MetaBlock | None:
    """Return the first block with the given tag, or None."""
    return next((block for block in blocks if block.tag == tag), None)


def get_meta_field(blocks: list[MetaBlock], tag: str, field: str) -> str:
    """Return a field of the tagged block, or an empty string."""
    block = get_meta(blocks, tag)
    if block is None:
        return ""
    return block.fields.get(field, "")


def set_meta_field(blocks: list[MetaBlock], tag: str, field: str, value: str) -> None:
    """Set a field in the tagged block, appending the block if it is missing."""
    block = get_meta(blocks, tag)
    if block is not None:
        block.fields[field] = value
        return
    blocks.append(MetaBlock(tag=tag, fields={field: value}))