"""
Exceptions raised while round-tripping dates
"""


class InvalidDateError(ValueError):
    """Raised when a value is not a valid datetime"""


class RecordNotFoundError(LookupError):
    """Raised when a TestData row cannot be found by id"""

    def __init__(self, table: str, record_id):
        self.table = table
        self.record_id = record_id
        super().__init__(f"No record found in {table} with id {record_id}")
