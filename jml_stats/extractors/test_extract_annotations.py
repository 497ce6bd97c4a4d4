"""
Tests for the annotation extraction scanner.

Run with: python -m pytest test_extract_annotations.py -v
Or:       python test_extract_annotations.py
"""

import sys

import pytest

from jml_stats.errors import MalformedInputError
from jml_stats.extractors.extract_annotations import (
    extract_annotations,
    extract_method_signature,
    find_block_end,
    find_line_end,
)
from jml_stats.models.annotation import AnnotationType


SORTER = """\
public final class Sorter {
    //@ requires values != null;
    public static void sort(int[] values) {
        /*@ assert values.length >= 0 \\by {
              auto;
            } */
        //@ assert values != null;
        sample_sort(values, 0, values.length);
    }

    /*@ public normal_behavior
      @ requires begin <= end;
      @*/
    private static void sample(int[] values,
                               int begin,
                               int end, Storage storage) {
        //@ loop_invariant begin <= i;
        for (int i = begin; i < end; i++) {
            //@ set count = count + 1;
        }
    }
}
"""


class TestSignature:
    """Tests for method signature lookup."""

    def test_simple_signature(self):
        text = 'static void sort(int[] values) {'
        assert extract_method_signature(text, text.index('{')) == 'sort(int[] values)'

    def test_parameter_whitespace_collapsed(self):
        text = 'void sample(int[] values,\n        int begin,\tint end)  {'
        signature = extract_method_signature(text, text.index('{'))
        assert signature == 'sample(int[] values, int begin, int end)'

    def test_throws_clause_is_part_of_signature(self):
        text = 'void f(int x) throws IOException {'
        assert extract_method_signature(text, text.index('{')) == 'f(int x) throws IOException'

    def test_no_parenthesis_raises(self):
        with pytest.raises(MalformedInputError):
            extract_method_signature('class A { {', 10)

    def test_no_space_before_name_raises(self):
        text = 'f(x){'
        with pytest.raises(MalformedInputError) as exc_info:
            extract_method_signature(text, text.index('{'))
        assert exc_info.value.offset == 4


class TestSpanEnds:
    """Tests for finding the end of annotation spans."""

    def test_block_end_includes_marker(self):
        text = 'x /*@ pure */ y'
        assert text[2:find_block_end(text, 2)] == '/*@ pure */'

    def test_block_end_first_marker_wins(self):
        text = '/*@ a */ b */'
        assert find_block_end(text, 0) == len('/*@ a */')

    def test_empty_block(self):
        assert find_block_end('/*@*/', 0) == 5

    def test_unterminated_block_raises(self):
        with pytest.raises(MalformedInputError):
            find_block_end('/*@ assert x;\n', 0)

    def test_line_end(self):
        text = '//@ set x = 1;\nnext'
        assert text[:find_line_end(text, 0)] == '//@ set x = 1;'

    def test_line_end_drops_carriage_return(self):
        text = '//@ set x = 1;\r\nnext'
        assert text[:find_line_end(text, 0)] == '//@ set x = 1;'

    def test_line_end_at_end_of_input(self):
        assert find_line_end('//@ pure', 0) == len('//@ pure')


class TestExtraction:
    """Tests for the full scan."""

    def test_extracts_all_annotations_in_order(self):
        annotations = extract_annotations(SORTER)
        assert [a.type for a in annotations] == [
            AnnotationType.CONTRACT,
            AnnotationType.ASSERT_SCRIPT,
            AnnotationType.ASSERT,
            AnnotationType.CONTRACT,
            AnnotationType.LOOP_INV,
            AnnotationType.SET_STATEMENT,
        ]
        offsets = [a.offset for a in annotations]
        assert offsets == sorted(offsets)
        assert len(set(offsets)) == len(offsets)

    def test_signatures_follow_method_bodies(self):
        signatures = [a.method_signature for a in extract_annotations(SORTER)]
        sample = 'sample(int[] values, int begin, int end, Storage storage)'
        assert signatures == [
            '',
            'sort(int[] values)',
            'sort(int[] values)',
            'sort(int[] values)',
            sample,
            sample,
        ]

    def test_block_content_spans_markers(self):
        script = extract_annotations(SORTER)[1]
        assert script.content.startswith('/*@ assert values.length')
        assert script.content.endswith('} */')
        assert SORTER[script.offset:].startswith(script.content)

    def test_line_content_stops_at_line_end(self):
        contract = extract_annotations(SORTER)[0]
        assert contract.content == '//@ requires values != null;'

    def test_single_script_assert(self):
        text = 'class A {\n  void f() {\n    /*@ assert p; \\by auto; */\n  }\n}\n'
        annotations = extract_annotations(text)
        assert len(annotations) == 1
        assert annotations[0].type == AnnotationType.ASSERT_SCRIPT
        assert annotations[0].method_signature == 'f()'

    def test_assert_without_script(self):
        text = 'class A {\n  void f() {\n    /*@ assert p; */\n  }\n}\n'
        annotations = extract_annotations(text)
        assert [a.type for a in annotations] == [AnnotationType.ASSERT]

    def test_model_method_body_sets_signature(self):
        """Braces inside annotations count like braces in code."""
        text = (
            'class A {\n'
            '  //@ model int m(int x) { return x; }\n'
            '  //@ ghost int g;\n'
            '  void f() {\n'
            '    //@ assert true;\n'
            '  }\n'
            '}\n'
        )
        annotations = extract_annotations(text)
        assert [a.method_signature for a in annotations] == ['', 'm(int x)', 'f()']

    def test_last_line_without_terminator(self):
        annotations = extract_annotations('class A { }\n//@ pure')
        assert annotations[0].content == '//@ pure'

    def test_no_annotations(self):
        assert extract_annotations('class A {\n  void f() { }\n}\n') == []

    def test_empty_input(self):
        assert extract_annotations('') == []

    def test_unterminated_block_raises(self):
        text = 'class A {\n  void f() {\n    /*@ assert p;\n  }\n}\n'
        with pytest.raises(MalformedInputError) as exc_info:
            extract_annotations(text)
        assert exc_info.value.offset == text.index('/*@')

    def test_method_without_signature_raises(self):
        with pytest.raises(MalformedInputError):
            extract_annotations('{{ //@ pure\n}}')


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
