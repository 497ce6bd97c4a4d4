"""
Annotation dumps

Writes each annotation to its own text file, named after its method
signature. The signature is made file-name safe first; a numeric suffix
keeps annotations of the same method (or files from an earlier run) apart.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from ..constants import FileNameSubstitutions
from ..models.annotation import FilteredAnnotation


def to_valid_file_name(name: str) -> str:
    """Replace characters that are not allowed in file names."""
    for char, substitute in FileNameSubstitutions.TABLE.items():
        name = name.replace(char, substitute)
    return name


def next_free_path(output_dir: Path, stem: str) -> Path:
    """First '<stem>_<n>.txt' in output_dir that does not exist yet."""
    counter = 0
    path = output_dir / f"{stem}_{counter}.txt"
    while path.exists():
        counter += 1
        path = output_dir / f"{stem}_{counter}.txt"
    return path


def write_annotation_dumps(
    annotations: Iterable[FilteredAnnotation],
    output_dir: Path,
    prefix: str = 'Sorter_',
) -> List[Path]:
    """
    Write the unfiltered text of each annotation into a separate file

    Args:
        annotations: Annotations to dump
        output_dir: Target directory, created if missing
        prefix: Prepended to every file name

    Returns:
        Paths of the written files, in input order
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for annotation in annotations:
        stem = prefix + to_valid_file_name(annotation.method_signature)
        path = next_free_path(output_dir, stem)
        # existing dumps are never overwritten
        with open(path, 'x', encoding='utf-8', newline='') as f:
            f.write(annotation.raw_content + '\n')
        written.append(path)

    return written
