# errors.py
# Run-level failures. Anything that only affects a single memo is handled
# where it happens and never shows up here.


class Memo2TxtError(Exception):
    """Base class for errors that abort a conversion run."""
    exit_code = 1


class InputUnavailable(Memo2TxtError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Error reading file: {path}: {cause}")
        self.path = path
        self.cause = cause


class NoMemosFound(Memo2TxtError):
    exit_code = 2

    def __init__(self):
        super().__init__("No memos found.")


class OutputUnwritable(Memo2TxtError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Error writing output file: {path}: {cause}")
        self.path = path
        self.cause = cause
