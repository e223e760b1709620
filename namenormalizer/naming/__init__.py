"""Pure name transforms used for rename targets and live previews."""

from .case import CaseStyle, SeparatorPolicy, convert_identifier, split_words
from .filtering import filter_parts
from .target import target_name

__all__ = [
    "CaseStyle",
    "SeparatorPolicy",
    "convert_identifier",
    "filter_parts",
    "split_words",
    "target_name",
]
