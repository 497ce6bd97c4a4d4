"""
Annotation Models - JML entities found in a source file

One model per stage of an annotation's life: RawAnnotation as cut out of
the source text by the extractor, FilteredAnnotation after blank and comment
lines have been removed.
"""

from enum import Enum
from pydantic import BaseModel, Field


class AnnotationType(str, Enum):
    """Kind of a JML entity"""
    ASSERT = "ASSERT"
    ASSERT_SCRIPT = "ASSERT_SCRIPT"     # assert ... \by <proof script>
    ANNOTATION = "ANNOTATION"           # pure, non_null, nullable
    CONTRACT = "CONTRACT"
    GHOST_DECL = "GHOST_DECL"
    LOOP_INV = "LOOP_INV"
    MODEL_METHOD = "MODEL_METHOD"
    SET_STATEMENT = "SET_STATEMENT"
    UNKNOWN = "UNKNOWN"


class RawAnnotation(BaseModel):
    """
    One JML entity, e.g. an invariant, a contract, an assert with or
    without script, exactly as it appears in the source text.
    """
    method_signature: str = Field(
        ...,
        description="Signature of the most recently entered method ('' before the first one)"
    )
    content: str = Field(..., description="Annotation text including its markers")
    type: AnnotationType = Field(..., description="Classification of the content")
    offset: int = Field(0, ge=0, description="Start index of the annotation in the source text")

    model_config = {
        'frozen': True,
    }

    @property
    def is_script(self) -> bool:
        return self.type == AnnotationType.ASSERT_SCRIPT


class FilteredAnnotation(BaseModel):
    """
    Annotation with blank lines, lone '@' lines and plain comments removed

    The unfiltered text is kept in raw_content so that dumps can reproduce
    the annotation as written.
    """
    method_signature: str = Field(..., description="Copied from the raw annotation")
    content: str = Field(..., description="Filtered annotation text")
    type: AnnotationType = Field(..., description="Copied from the raw annotation")
    raw_content: str = Field(..., description="Annotation text before filtering")

    model_config = {
        'frozen': True,
    }

    @property
    def is_script(self) -> bool:
        return self.type == AnnotationType.ASSERT_SCRIPT

    def lines(self) -> list[str]:
        """Filtered content split into lines."""
        return self.content.splitlines()
