import pytest

from clappie.filestore.meta import (
    MetaBlock,
    format_file,
    get_meta,
    get_meta_field,
    parse_file,
    set_meta_field,
)


@pytest.mark.parametrize(
    "content, want_body, want_blocks",
    [
        ("Hello world", "Hello world", 0),
        (
            "This is the body\n\n---\n[chore-meta]\ntitle: My Chore\nstatus: pending\nicon: 📧",
            "This is the body",
            1,
        ),
        (
            "Body content\n\n---\n[meta]\nkey1: value1\n\n[chore-meta]\ntitle: Test\nstatus: approved",
            "Body content",
            2,
        ),
        (
            "---\n[heartbeat-meta]\ninterval: 5m\nlast_run: 2025-01-01 12:00:00",
            "",
            1,
        ),
    ],
    ids=["body only", "body with meta", "multiple meta blocks", "empty body with meta"],
)
def test_parse_file(content, want_body, want_blocks):
    body, blocks = parse_file(content)
    assert body == want_body
    assert len(blocks) == want_blocks


def test_parse_file_meta_fields():
    content = (
        "Body text\n\n---\n[chore-meta]\ntitle: Test Chore\nsummary: A test\n"
        "icon: 📧\nstatus: pending\ncreated: 2025-03-03 14:30"
    )
    body, blocks = parse_file(content)
    assert body == "Body text"
    assert len(blocks) == 1
    block = blocks[0]
    assert block.tag == "chore-meta"
    assert block.fields["title"] == "Test Chore"
    assert block.fields["status"] == "pending"
    assert block.fields["icon"] == "📧"
    assert block.fields["created"] == "2025-03-03 14:30"


def test_parse_file_multiple_blocks_keep_their_fields():
    content = "Body content\n\n---\n[meta]\nkey1: value1\n\n[chore-meta]\ntitle: Test\nstatus: approved"
    _, blocks = parse_file(content)
    assert [b.tag for b in blocks] == ["meta", "chore-meta"]
    assert blocks[0].fields == {"key1": "value1"}
    assert blocks[1].fields == {"title": "Test", "status": "approved"}


def test_parse_file_colon_without_space():
    _, blocks = parse_file("x\n---\n[meta]\nkey:value\n")
    assert blocks[0].fields == {"key": "value"}


def test_parse_file_ignores_fields_before_any_header():
    _, blocks = parse_file("x\n---\nstray: line\n[meta]\nkey: value\n")
    assert len(blocks) == 1
    assert blocks[0].fields == {"key": "value"}


def test_parse_file_bare_separator_drops_body():
    body, blocks = parse_file("leading---\n[meta]\nk: v")
    assert body == ""
    assert blocks[0].fields == {"k": "v"}


def test_format_file_roundtrip():
    blocks = [MetaBlock(tag="meta", fields={"key": "value"})]
    output = format_file("Hello", blocks)
    body, parsed = parse_file(output)
    assert body == "Hello"
    assert len(parsed) == 1
    assert parsed[0].fields["key"] == "value"


def test_format_file_layout():
    blocks = [MetaBlock(tag="meta", fields={"key": "value"})]
    assert format_file("Hello", blocks) == "Hello\n\n---\n[meta]\nkey: value\n"


def test_format_file_without_body_or_blocks():
    assert format_file("Hello", []) == "Hello"
    assert format_file("", [MetaBlock("meta", {"a": "1"})]) == "---\n[meta]\na: 1\n"


def test_format_file_roundtrip_two_blocks():
    blocks = [MetaBlock("meta", {"a": "1"}), MetaBlock("chore-meta", {"b": "2"})]
    body, parsed = parse_file(format_file("Body", blocks))
    assert body == "Body"
    assert parsed == blocks


def test_get_meta():
    blocks = [
        MetaBlock(tag="meta", fields={"a": "1"}),
        MetaBlock(tag="chore-meta", fields={"b": "2"}),
    ]
    m = get_meta(blocks, "chore-meta")
    assert m is blocks[1]
    assert m.fields["b"] == "2"
    assert get_meta(blocks, "nonexistent") is None


def test_get_meta_field():
    blocks = [MetaBlock(tag="meta", fields={"a": "1"})]
    assert get_meta_field(blocks, "meta", "a") == "1"
    assert get_meta_field(blocks, "meta", "missing") == ""
    assert get_meta_field(blocks, "other", "a") == ""


def test_set_meta_field():
    blocks: list[MetaBlock] = []
    set_meta_field(blocks, "meta", "key", "value")
    assert len(blocks) == 1
    assert blocks[0].fields["key"] == "value"

    set_meta_field(blocks, "meta", "key", "updated")
    assert len(blocks) == 1
    assert blocks[0].fields["key"] == "updated"


def test_set_meta_field_adds_second_block():
    blocks = [MetaBlock(tag="meta", fields={"a": "1"})]
    set_meta_field(blocks, "chore-meta", "status", "approved")
    assert [b.tag for b in blocks] == ["meta", "chore-meta"]
    assert get_meta_field(blocks, "chore-meta", "status") == "approved"