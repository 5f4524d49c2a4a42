"""
csvsortbench: extract a numeric CSV column, sort it five ways, report the fastest.

Pipeline:
    parse_csv -> resolve_by_name / resolve_by_index -> extract_strict / extract_lenient
    -> run_benchmark / run_single -> encode_*
"""

__version__ = "0.1.0"
