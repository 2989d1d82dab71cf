"""Constants and formats shared across modules."""

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
MONTH_PATTERN = r"^\d{4}-\d{2}$"
EMAIL_PATTERN = r"^\S+@\S+\.\S+$"

API_PREFIX = "/api"

# MySQL error code for duplicate entry on a UNIQUE/PRIMARY key.
MYSQL_DUPLICATE_ENTRY = 1062

# Fixed path segments under /api/attendance that shadow an employee id.
RESERVED_EMPLOYEE_IDS = frozenset({"summary", "overview"})
