"""
Error types
===========

Every failure CLIMA can report has its own class so the CLI can tell
"invalid input" apart from "no such data":

- RangeError:        a numeric argument is outside its domain (month 1..12)
- NotFound:          a filter stage produced an empty result
- IngestError:       the dataset could not be loaded; no query can run
- ContractViolation: the delta computer was handed mismatched records
"""

class ClimaError(Exception):
    """Base class for all CLIMA errors."""

class RangeError(ClimaError, ValueError):
    pass

class NotFound(ClimaError, LookupError):
    pass

class IngestError(ClimaError):
    pass

class ContractViolation(ClimaError, AssertionError):
    """Programming error: never caught by the CLI loop."""
