from enum import Enum
from typing import Generic, TypeVar

ErrorCodeT = TypeVar("ErrorCodeT", bound=str)


class PricingDBError(Generic[ErrorCodeT], Exception):
    """
    Base class for all pricingdb internal exceptions. Each layer inherits it with its own error code enum
    and raises the sub error class to the layers above.
    """

    error_code: ErrorCodeT

    def __init__(self, error_code: ErrorCodeT, error_message: str, retryable: bool):
        """
        Base exception class.

        :param error_code: predefined error code.
        :param error_message: friendly error message for client reference.
        :param retryable: identify if the error is retryable or not.
        """
        super().__init__(error_message)
        self.error_code = error_code
        self.error_message = error_message
        self.retryable = retryable


###########################################
# DataBaseError
#   - DBConnectionError
#   - DBOperationError
#   - DBIntegrityError
#   - DBProgrammingError
#   - DBDataError
#   - DBInternalError
#   - DBNotSupportedError
###########################################
class DatabaseErrorCode(str, Enum):
    DB_CONNECTION_ERROR = "db_connection_error"
    DB_OPERATION_ERROR = "db_operation_error"
    DB_INTEGRITY_ERROR = "db_integrity_error"
    DB_PROGRAMMING_ERROR = "db_programming_error"
    DB_DATA_ERROR = "db_data_error"
    DB_INTERNAL_ERROR = "db_internal_error"
    DB_NOT_SUPPORTED_ERROR = "db_not_supported_error"


class DatabaseError(PricingDBError[DatabaseErrorCode]):
    def __init__(
        self, error_code: DatabaseErrorCode, error_message: str, retryable: bool
    ):
        super().__init__(error_code, error_message, retryable)


class DBConnectionError(DatabaseError):
    """DB Connection Error.

    Exception raised for errors that are related to the database interface rather than the database itself, e.g., failed
    to connect to db.
    """

    def __init__(self, error_message):
        super().__init__(
            error_code=DatabaseErrorCode.DB_CONNECTION_ERROR,
            error_message=error_message,
            retryable=False,
        )


class DBOperationError(DatabaseError):
    """DB Operation Error.

    Exception raised for errors that are related to the database's operation and not necessarily under the control
    of the programmer.
    """

    def __init__(self, error_message):
        super().__init__(
            error_code=DatabaseErrorCode.DB_OPERATION_ERROR,
            error_message=error_message,
            retryable=True,
        )


class DBIntegrityError(DatabaseError):
    """DB Integrity Error.

    Exception raised when the relational integrity of the database is affected, e.g. a NOT NULL check fails.
    """

    def __init__(self, error_message):
        super().__init__(
            error_code=DatabaseErrorCode.DB_INTEGRITY_ERROR,
            error_message=error_message,
            retryable=False,
        )


class DBProgrammingError(DatabaseError):
    """DB Programming Error.

    Exception raised for programming errors, e.g. table not found or already exists, syntax error in the SQL statement,
    wrong number of parameters specified, etc.
    """

    def __init__(self, error_message):
        super().__init__(
            error_code=DatabaseErrorCode.DB_PROGRAMMING_ERROR,
            error_message=error_message,
            retryable=False,
        )


class DBDataError(DatabaseError):
    """DB Data Error.

    Exception raised for errors that are due to problems with the processed data like division by zero, numeric
    value out of range, etc.
    """

    def __init__(self, error_message):
        super().__init__(
            error_code=DatabaseErrorCode.DB_DATA_ERROR,
            error_message=error_message,
            retryable=False,
        )


class DBInternalError(DatabaseError):
    """DB Internal Error.

    Exception raised when the database encounters an internal error, e.g. the cursor is not valid anymore.
    """

    def __init__(self, error_message):
        super().__init__(
            error_code=DatabaseErrorCode.DB_INTERNAL_ERROR,
            error_message=error_message,
            retryable=False,
        )


class DBNotSupportedError(DatabaseError):
    """DB Not Supported Error.

    Exception raised in case a method or database API was used which is not supported by the database.
    """

    def __init__(self, error_message):
        super().__init__(
            error_code=DatabaseErrorCode.DB_NOT_SUPPORTED_ERROR,
            error_message=error_message,
            retryable=False,
        )
