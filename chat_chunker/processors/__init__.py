"""Split stages.

Each stage inspects the remaining text and either declines with ``None``
or returns a :class:`~chat_chunker.processors.base.SplitResult` carrying the
chunks to emit and the text still to process.
"""

from chat_chunker.processors.base import SplitResult, Stage, split
from chat_chunker.processors.breaks import process_section_breaks
from chat_chunker.processors.intro import (
    has_question_with_options_pattern,
    process_intro_with_list,
    process_intro_with_long_paragraphs,
    process_question_with_list,
)
from chat_chunker.processors.lists import process_list_section
from chat_chunker.processors.paragraphs import (
    process_long_paragraph_sequence,
    process_long_paragraphs_after_intro,
    process_markdown_section,
)
from chat_chunker.processors.periods import process_period_splits
from chat_chunker.processors.product_cards import process_product_card_lists
from chat_chunker.processors.questions import process_question_marks
from chat_chunker.processors.tables import process_markdown_table

__all__ = [
    "SplitResult",
    "Stage",
    "has_question_with_options_pattern",
    "process_intro_with_list",
    "process_intro_with_long_paragraphs",
    "process_list_section",
    "process_long_paragraph_sequence",
    "process_long_paragraphs_after_intro",
    "process_markdown_section",
    "process_markdown_table",
    "process_period_splits",
    "process_product_card_lists",
    "process_question_marks",
    "process_question_with_list",
    "process_section_breaks",
    "split",
]
