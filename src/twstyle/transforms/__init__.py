from twstyle.transforms.extract import extract, objectify
from twstyle.transforms.merge import canonicalize, classify, compare_entries, merge, merge_into

__all__ = [
    "canonicalize",
    "classify",
    "compare_entries",
    "extract",
    "merge",
    "merge_into",
    "objectify",
]
