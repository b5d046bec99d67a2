from sqlalchemy import BigInteger, DateTime, Integer, Unicode
from sqlalchemy.dialects import mssql
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement

# BIGINT IDENTITY on SQL Server; SQLite only auto-increments INTEGER PRIMARY KEY
SurrogateKey = BigInteger().with_variant(Integer(), "sqlite")

DateTime2 = DateTime().with_variant(mssql.DATETIME2(), "mssql")


def NVarchar(length: int) -> Unicode:
    """NVARCHAR(length) on SQL Server, VARCHAR elsewhere"""
    return Unicode(length)


class current_time(FunctionElement):
    """Server-side current timestamp at the column's full precision"""
    type = DateTime()
    inherit_cache = True


@compiles(current_time)
def _current_time_default(element, compiler, **kw):
    return "CURRENT_TIMESTAMP"


@compiles(current_time, "mssql")
def _current_time_mssql(element, compiler, **kw):
    return "SYSDATETIME()"
