"""
JML proof-script statistics

Extracts JML annotations from a Java source file, classifies them, counts the
proof-script commands inside `assert ... \\by ...` annotations and sums the
counts per method group into a `;`-separated table.

Stages:
- extractors: annotation extraction state machine
- annotators: annotation classification
- counting: filtering, command counting, per-group aggregation
- reporting: table formatting and file output
"""

__version__ = '1.0.0'
