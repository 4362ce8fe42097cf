"""Tests for the JSON pretty-printer and minifier."""

import json

import pytest

from beautify.json_formatter import compact, pretty


SAMPLES = [
    '{"a":1,"b":[2,3]}',
    '{"name": "x", "nested": {"deep": [1, {"k": null}], "empty": {}}, "list": []}',
    '[true, false, null, -1.5e3, "s p a c e"]',
    '{"esc": "quote \\" and brace { and comma ,", "path": "c:\\\\tmp"}',
    '{"unicode": "caf\u00e9 \\u00e9", "arr": [[], [[]], {}]}',
]


class TestPretty:
    def test_basic_layout(self):
        assert pretty('{"a":1,"b":[2,3]}') == (
            '{\n'
            '  "a": 1,\n'
            '  "b": [\n'
            '    2,\n'
            '    3\n'
            '  ]\n'
            '}\n'
        )

    def test_indent_width(self):
        assert pretty('{"a":[1]}', 4) == '{\n    "a": [\n        1\n    ]\n}\n'

    def test_zero_indent(self):
        assert pretty("[1,2]", 0) == "[\n1,\n2\n]\n"

    def test_empty_object(self):
        assert pretty("{}") == "{}\n"

    def test_empty_array_with_inner_whitespace(self):
        assert pretty("[ \n ]") == "[]\n"

    def test_nested_empty_containers_stay_inline(self):
        assert pretty('{"a": { }, "b": []}') == '{\n  "a": {},\n  "b": []\n}\n'

    def test_structural_characters_inside_strings(self):
        assert pretty('{"k": "a, b: {c} [d]"}') == '{\n  "k": "a, b: {c} [d]"\n}\n'

    def test_escaped_quote_kept_verbatim(self):
        assert pretty('{"k":"say \\"hi\\", ok"}') == '{\n  "k": "say \\"hi\\", ok"\n}\n'

    def test_whitespace_outside_strings_discarded(self):
        assert pretty('{ "a" :\r\n\t1 }') == '{\n  "a": 1\n}\n'

    def test_whitespace_inside_strings_kept(self):
        assert pretty('["a  b\\tc"]') == '[\n  "a  b\\tc"\n]\n'

    def test_empty_input(self):
        assert pretty("") == "\n"

    def test_single_trailing_newline(self):
        out = pretty('{"a":1}\n\n\n')
        assert out.endswith("}\n")
        assert not out.endswith("\n\n")


class TestPrettyMalformed:
    def test_unbalanced_closer_does_not_raise(self):
        assert pretty("]") == "\n]\n"

    def test_depth_never_negative(self):
        out = pretty("}}[1]")
        assert out == "\n}\n}[\n  1\n]\n"

    def test_unclosed_opener(self):
        assert pretty('{"a":') == '{\n  "a": \n'

    def test_unterminated_string(self):
        assert pretty('["abc, def') == '[\n  "abc, def\n'


class TestProperties:
    @pytest.mark.parametrize("doc", SAMPLES)
    def test_idempotent(self, doc):
        once = pretty(doc)
        assert pretty(once) == once

    @pytest.mark.parametrize("doc", SAMPLES)
    def test_compact_of_pretty_preserves_content(self, doc):
        assert compact(pretty(doc)) == compact(doc)
        assert json.loads(compact(pretty(doc))) == json.loads(doc)

    @pytest.mark.parametrize("doc", SAMPLES)
    def test_pretty_output_is_valid_json(self, doc):
        assert json.loads(pretty(doc)) == json.loads(doc)


class TestCompact:
    def test_strips_whitespace(self):
        assert compact('{ "a" : [1, 2],\n "b": "x y" }') == '{"a":[1,2],"b":"x y"}'

    def test_no_newlines(self):
        assert "\n" not in compact('{\n  "a": 1\n}\n')

    def test_strings_untouched(self):
        assert compact('["a \\" b", "\\\\ "]') == '["a \\" b","\\\\ "]'

    def test_empty(self):
        assert compact("   ") == ""
