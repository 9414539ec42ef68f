"""Classic algorithm and data-structure exercises as plain Python functions."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "dp_classic",
    "dp_sequences",
    "greedy",
    "hashing",
    "linked_list",
    "maths",
    "searching",
    "string_maps",
    "strings",
    "trees",
]