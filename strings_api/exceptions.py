class StringServiceError(Exception):
    pass


class ValueTooLong(StringServiceError):
    def __init__(self, length, max_length):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Value is {length} characters long, the maximum is {max_length}"
        )


class InvalidType(StringServiceError, TypeError):
    def __init__(self, value):
        self.received_type = type(value).__name__
        super().__init__(f"Value must be a string, got {self.received_type}")


class FilterParseError(StringServiceError):
    def __init__(self, message, filters=None):
        self.filters = filters
        super().__init__(message)


class Unparsable(FilterParseError):
    pass


class ConflictingFilters(FilterParseError):
    pass


class DuplicateString(StringServiceError):
    pass


class StringNotFound(StringServiceError):
    pass


class RecordStoreError(StringServiceError):
    pass

