"""
Tests for table formatting and file output.

Run with: python -m pytest test_reporting.py -v
Or:       python test_reporting.py
"""

import sys

import pytest

from jml_stats.constants import MethodGroups, ScriptCommands
from jml_stats.models.annotation import AnnotationType, FilteredAnnotation
from jml_stats.models.command_stat import CommandStat
from jml_stats.reporting.dumps import next_free_path, to_valid_file_name, write_annotation_dumps
from jml_stats.reporting.table import format_table, write_table

VOCABULARY = ScriptCommands.VOCABULARY
HEADER = 'method name;assert;auto;cheat;cut;expand;leave;let;macro;oss;rule;tryclose;witness\n'


def make_annotation(signature, raw_content):
    return FilteredAnnotation(
        method_signature=signature,
        content=raw_content.strip(),
        type=AnnotationType.ASSERT_SCRIPT,
        raw_content=raw_content,
    )


class TestFormatTable:
    """Tests for the statistics table."""

    def test_header_sorted(self):
        assert format_table({}, VOCABULARY) == HEADER

    def test_rows_in_group_order(self):
        grouped = {
            prefix: CommandStat.zero(VOCABULARY) for prefix in MethodGroups.PREFIXES
        }
        lines = format_table(grouped, VOCABULARY).splitlines()
        assert [line.split(';')[0] for line in lines[1:]] == list(MethodGroups.PREFIXES)

    def test_counts_and_missing_zero(self):
        grouped = {'sort(int[] values)': CommandStat(counts={'auto': 3, 'cut': 1})}
        table = format_table(grouped, VOCABULARY)
        assert table == HEADER + 'sort(int[] values);0;3;0;1;0;0;0;0;0;0;0;0\n'

    def test_custom_separator_and_terminator(self):
        grouped = {'g': CommandStat(counts={'a': 1})}
        assert format_table(grouped, ['b', 'a'], separator=',', line_terminator='\r\n') == (
            'method name,a,b\r\ng,1,0\r\n'
        )


class TestFileNames:
    """Tests for file name sanitization."""

    def test_signature(self):
        assert to_valid_file_name('sort(int[] values)') == 'sort(int() values)'

    def test_all_substitutions(self):
        assert to_valid_file_name('\\$?|<>:*"/[]') == "_______+'-()"

    def test_safe_name_unchanged(self):
        assert to_valid_file_name('fallback_sort(int a, int b)') == 'fallback_sort(int a, int b)'


class TestDumps:
    """Tests for writing annotation dumps."""

    def test_file_name_and_content(self, tmp_path):
        raw = '/*@ assert p \\by\n\n  // comment\n  auto; */'
        paths = write_annotation_dumps([make_annotation('sort(int[] values)', raw)], tmp_path)
        assert [p.name for p in paths] == ['Sorter_sort(int() values)_0.txt']
        assert paths[0].read_bytes().decode('utf-8') == raw + '\n'

    def test_same_method_gets_next_suffix(self, tmp_path):
        annotations = [
            make_annotation('f(int x)', '//@ assert a \\by auto;'),
            make_annotation('f(int x)', '//@ assert b \\by auto;'),
            make_annotation('g()', '//@ assert c \\by auto;'),
        ]
        paths = write_annotation_dumps(annotations, tmp_path, prefix='X_')
        assert [p.name for p in paths] == ['X_f(int x)_0.txt', 'X_f(int x)_1.txt', 'X_g()_0.txt']
        assert paths[1].read_text(encoding='utf-8') == '//@ assert b \\by auto;\n'

    def test_existing_files_not_overwritten(self, tmp_path):
        (tmp_path / 'Sorter_g()_0.txt').write_text('old')
        paths = write_annotation_dumps([make_annotation('g()', 'new')], tmp_path)
        assert paths[0].name == 'Sorter_g()_1.txt'
        assert (tmp_path / 'Sorter_g()_0.txt').read_text() == 'old'

    def test_output_dir_created(self, tmp_path):
        target = tmp_path / 'script' / 'jml'
        write_annotation_dumps([make_annotation('g()', 'x')], target)
        assert target.is_dir()

    def test_next_free_path(self, tmp_path):
        assert next_free_path(tmp_path, 'a').name == 'a_0.txt'
        (tmp_path / 'a_0.txt').touch()
        (tmp_path / 'a_1.txt').touch()
        assert next_free_path(tmp_path, 'a').name == 'a_2.txt'


class TestWriteTable:
    """Tests for writing the table file."""

    def test_replaces_existing(self, tmp_path):
        path = tmp_path / 'stats.csv'
        path.write_text('a much longer previous table\n' * 10)
        write_table(HEADER, path)
        assert path.read_text(encoding='utf-8') == HEADER

    def test_creates_parent(self, tmp_path):
        path = write_table(HEADER, tmp_path / 'src' / 'main' / 'script' / 'stats.csv')
        assert path.read_bytes() == HEADER.encode('utf-8')


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
