# topmark:header:start
#
#   project      : CStore
#   file         : exit_codes.py
#   file_relpath : src/cstore/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CStore CLI.

CStore aligns with the BSD `sysexits` convention so other tooling can
interpret failures consistently. Usage errors detected by Click itself
(unknown options, invalid ``--format`` choices) keep Click's exit code 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CStore CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        DATA_ERROR: Content could not be encoded or decoded. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Store file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Any other I/O error reading/writing a file. Mirrors BSD
            ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1

    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
