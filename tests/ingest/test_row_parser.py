from pitch_analytics.ingest.row_parser import parse_rows, strip_bom


class TestStripBom:
    def test_removes_leading_bom(self) -> None:
        assert strip_bom("\ufeffpitch_type") == "pitch_type"

    def test_leaves_plain_text(self) -> None:
        assert strip_bom("pitch_type") == "pitch_type"


class TestParseRows:
    def test_basic(self) -> None:
        rows = parse_rows("pitch_type,release_speed\nFF,95.2\nSL,86.1\n")
        assert rows == [
            {"pitch_type": "FF", "release_speed": "95.2"},
            {"pitch_type": "SL", "release_speed": "86.1"},
        ]

    def test_quoted_field_with_comma(self) -> None:
        rows = parse_rows('des,pitch_type\n"Judge grounds out, shortstop",FF\n')
        assert rows == [{"des": "Judge grounds out, shortstop", "pitch_type": "FF"}]

    def test_bom_is_stripped_from_header(self) -> None:
        rows = parse_rows("\ufeffpitch_type,zone\nFF,5\n")
        assert rows[0]["pitch_type"] == "FF"

    def test_quoted_headers_are_unquoted_and_trimmed(self) -> None:
        rows = parse_rows('"pitch_type", "zone" \nFF,5\n')
        assert set(rows[0]) == {"pitch_type", "zone"}

    def test_values_trimmed(self) -> None:
        rows = parse_rows("a,b\n  FF ,  95.0\n")
        assert rows == [{"a": "FF", "b": "95.0"}]

    def test_short_line_padded(self) -> None:
        rows = parse_rows("a,b,c\n1\n")
        assert rows == [{"a": "1", "b": "", "c": ""}]

    def test_extra_fields_ignored(self) -> None:
        rows = parse_rows("a,b\n1,2,3\n")
        assert rows == [{"a": "1", "b": "2"}]

    def test_blank_lines_skipped(self) -> None:
        rows = parse_rows("a,b\n\n   \n1,2\n\n")
        assert rows == [{"a": "1", "b": "2"}]

    def test_header_only_returns_empty(self) -> None:
        assert parse_rows("a,b\n") == []

    def test_empty_text_returns_empty(self) -> None:
        assert parse_rows("") == []

    def test_crlf_line_endings(self) -> None:
        assert parse_rows("a,b\r\n1,2\r\n") == [{"a": "1", "b": "2"}]

    def test_semicolon_dialect(self) -> None:
        rows = parse_rows("a;b\n1;2\n", delimiter=";")
        assert rows == [{"a": "1", "b": "2"}]

    def test_malformed_quotes_do_not_raise(self) -> None:
        rows = parse_rows('a,b\n"unterminated,2\n')
        assert len(rows) == 1

    def test_doubled_quote_inside_quoted_field(self) -> None:
        rows = parse_rows('des,pitch_type\n"say ""hi""",FF\n')
        assert rows == [{"des": 'say "hi"', "pitch_type": "FF"}]

    def test_field_of_only_escaped_quotes_keeps_its_quotes(self) -> None:
        rows = parse_rows('des,pitch_type\n"""Quoted""",FF\n')
        assert rows == [{"des": '"Quoted"', "pitch_type": "FF"}]

    def test_space_before_opening_quote_still_groups_field(self) -> None:
        rows = parse_rows('des,pitch_type\n "out, 6-3",FF\n')
        assert rows == [{"des": "out, 6-3", "pitch_type": "FF"}]

    def test_space_before_quoted_header(self) -> None:
        rows = parse_rows('pitch_type, "des, long"\nFF,x\n')
        assert rows == [{"pitch_type": "FF", "des, long": "x"}]

    def test_quoted_line_break_stays_in_field(self) -> None:
        rows = parse_rows('des,pitch_type\n"line one\nline two",SL\n')
        assert rows == [{"des": "line one\nline two", "pitch_type": "SL"}]
