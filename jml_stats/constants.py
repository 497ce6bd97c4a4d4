"""
Centralized constants for the JML statistics pipeline.

Closed vocabularies shared by the extractor, counter, aggregator and
reporter. Organized by domain into namespace classes.
"""


class JmlMarkers:
    BLOCK_START = '/*@'
    BLOCK_END = '*/'
    LINE_START = '//@'
    CONTINUATION = '@'
    COMMENT = '//'
    # width of the opening marker stripped before classification
    MARKER_WIDTH = 3


class ScriptCommands:
    # Commands must start a line (after an optional leading @) to be counted.
    VOCABULARY = frozenset({
        'oss',
        'macro',
        'rule',
        'expand',
        'witness',
        'auto',
        'tryclose',
        'cut',
        'assert',
        'leave',
        'cheat',
        'let',
    })


class MethodGroups:
    # Tailored to Sorter.java of the ips4o case study.
    PREFIXES = (
        'sort(int[] values)',
        'sample(int[] values, int begin, int end, Storage storage)',
        'fallback_sort(',
        'sample_sort_recurse_on',
    )


class ExtractionDefaults:
    METHOD_BODY_DEPTH = 2
    SCRIPT_MARKER = '\\by'


class FileNameSubstitutions:
    TABLE = {
        '\\': '_',
        '$': '_',
        '?': '_',
        '|': '_',
        '<': '_',
        '>': '_',
        ':': '_',
        '*': '+',
        '"': "'",
        '/': '-',
        '[': '(',
        ']': ')',
    }


class TableDefaults:
    FIRST_COLUMN = 'method name'
    SEPARATOR = ';'
    LINE_TERMINATOR = '\n'
