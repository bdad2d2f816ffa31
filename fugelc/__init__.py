"""Fuzzy sets, Coco memberships, the AND operator, defuzzification, and genome-encoded rules."""

__version__ = "0.1.0"
__all__ = [
    "fuzzyset",
    "operators",
    "memberships",
    "defuzz",
    "membership_genome",
    "rule_genome",
    "rule",
]