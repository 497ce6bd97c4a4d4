"""
Pipeline Configuration

Read-only settings for a statistics run, read once from the environment.
Allows relocating input/output without modifying code.
"""

import os

from .constants import TableDefaults


class CounterConfig:
    """Configuration for the JML statistics pipeline."""

    # Debug mode - set JML_STATS_DEBUG=1 to enable verbose output
    DEBUG = os.environ.get('JML_STATS_DEBUG', '').lower() in ('1', 'true', 'yes')

    # Input, relative to the project directory
    INPUT_FILE = os.getenv('JML_STATS_INPUT_FILE', 'src/main/java/de/wiesler/Sorter.java')

    # Outputs, relative to the project directory
    OUTPUT_DIR = os.getenv('JML_STATS_OUTPUT_DIR', 'src/main/script')
    DUMP_SUBDIR = 'jml'
    TABLE_FILE = 'stats.csv'
    DUMP_PREFIX = 'Sorter_'

    # Table layout
    SEPARATOR = TableDefaults.SEPARATOR

    @classmethod
    def to_dict(cls) -> dict:
        """Export configuration as dictionary."""
        return {
            'input': {
                'file': cls.INPUT_FILE,
            },
            'output': {
                'directory': cls.OUTPUT_DIR,
                'dump_subdirectory': cls.DUMP_SUBDIR,
                'table_file': cls.TABLE_FILE,
                'dump_prefix': cls.DUMP_PREFIX,
            },
            'table': {
                'separator': cls.SEPARATOR,
            },
            'debug': cls.DEBUG,
        }

    @classmethod
    def print_config(cls):
        """Print current configuration."""
        import json
        print("=== JML Statistics Configuration ===")
        print(json.dumps(cls.to_dict(), indent=2))
        print("=" * 36)
