from functools import wraps

from sqlalchemy import exc

from pricingdb.commons.core.errors import (
    DBConnectionError,
    DBDataError,
    DBIntegrityError,
    DBInternalError,
    DBNotSupportedError,
    DBOperationError,
    DBProgrammingError,
)


def translate_db_error(func):
    """Translate DB Errors into pricingdb errors.

    SQLAlchemy wraps every DB API 2.0 (https://www.python.org/dev/peps/pep-0249/) driver error into the
    exception of the same name under sqlalchemy.exc, whatever the driver:
        StandardError
            - Warning
            - Error
                - InterfaceError
                - DatabaseError
                    - DataError
                    - OperationalError
                    - IntegrityError
                    - InternalError
                    - ProgrammingError
                    - NotSupportedError

    The mapping keeps driver errors hidden from the layers above.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except exc.InterfaceError as e:
            raise DBConnectionError(str(e.orig)) from e
        except exc.OperationalError as e:
            raise DBOperationError(str(e.orig)) from e
        except exc.IntegrityError as e:
            raise DBIntegrityError(str(e.orig)) from e
        except exc.ProgrammingError as e:
            raise DBProgrammingError(str(e.orig)) from e
        except exc.DataError as e:
            raise DBDataError(str(e.orig)) from e
        except exc.InternalError as e:
            raise DBInternalError(str(e.orig)) from e
        except exc.NotSupportedError as e:
            raise DBNotSupportedError(str(e.orig)) from e

    return wrapper
