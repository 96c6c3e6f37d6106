from .validator import validate_codelist, pretty_summary
from .io import read_lines, write_lines, load_codes, write_codes

__all__ = ["validate_codelist", "pretty_summary", "read_lines", "write_lines",
           "load_codes", "write_codes"]
