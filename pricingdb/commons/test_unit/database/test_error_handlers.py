import pytest
from sqlalchemy import exc

from pricingdb.commons.core.errors import (
    DatabaseErrorCode,
    DBConnectionError,
    DBDataError,
    DBIntegrityError,
    DBInternalError,
    DBNotSupportedError,
    DBOperationError,
    DBProgrammingError,
)
from pricingdb.commons.database.error_handlers import translate_db_error


@pytest.mark.parametrize(
    "sa_error, expected_error, expected_code, retryable",
    [
        (exc.InterfaceError, DBConnectionError, DatabaseErrorCode.DB_CONNECTION_ERROR, False),
        (exc.OperationalError, DBOperationError, DatabaseErrorCode.DB_OPERATION_ERROR, True),
        (exc.IntegrityError, DBIntegrityError, DatabaseErrorCode.DB_INTEGRITY_ERROR, False),
        (exc.ProgrammingError, DBProgrammingError, DatabaseErrorCode.DB_PROGRAMMING_ERROR, False),
        (exc.DataError, DBDataError, DatabaseErrorCode.DB_DATA_ERROR, False),
        (exc.InternalError, DBInternalError, DatabaseErrorCode.DB_INTERNAL_ERROR, False),
        (exc.NotSupportedError, DBNotSupportedError, DatabaseErrorCode.DB_NOT_SUPPORTED_ERROR, False),
    ],
)
def test_translate_db_error(sa_error, expected_error, expected_code, retryable):
    @translate_db_error
    def insert_payment_method():
        raise sa_error("INSERT INTO payment_method", {}, Exception("driver says no"))

    with pytest.raises(expected_error) as e:
        insert_payment_method()

    assert e.value.error_code == expected_code
    assert e.value.error_message == "driver says no"
    assert e.value.retryable is retryable
    assert isinstance(e.value.__cause__, sa_error)


def test_translate_db_error_passes_through_result_and_other_errors():
    @translate_db_error
    def describe(charge):
        if charge < 0:
            raise ValueError("negative charge")
        return f"charge={charge}"

    assert describe(1.5) == "charge=1.5"
    with pytest.raises(ValueError):
        describe(-1)
