from aries_avalon.domain.query import escape_phrase, field_equals


def test_plain_identifier_is_quoted_verbatim() -> None:
    assert field_equals("id", "avalon:1234") == 'id:"avalon:1234"'


def test_quotes_and_backslashes_are_escaped() -> None:
    assert escape_phrase('say "hi"') == 'say \\"hi\\"'
    assert escape_phrase("a\\b") == "a\\\\b"
    assert field_equals("identifier_ssim", 'x"y') == 'identifier_ssim:"x\\"y"'


def test_lucene_operators_inside_phrase_are_left_alone() -> None:
    # Within a quoted phrase, only " and \ carry meaning.
    assert escape_phrase("a:b (c) OR *d*") == "a:b (c) OR *d*"
