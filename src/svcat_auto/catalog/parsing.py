"""Parsing of ``svcat get instances`` output.

The listing is a plain-text table: a banner line, a column header line and
one whitespace-separated row per instance::

      NAME     NAMESPACE     CLASS       PLAN     STATUS
  +--------+-----------+------------+-------+--------+
    mydb     default     azure-mysql   basic   Ready
"""

from svcat_auto.models import ServiceInstance

# Banner and column header precede the rows
_HEADER_LINES = 2
_COLUMNS = 5


def parse_instance_row(line: str) -> ServiceInstance:
    """Map one whitespace-separated row onto a ServiceInstance.

    Rows are not validated: missing trailing columns become None and extra
    columns are ignored.

    Args:
        line: A single table row.

    Returns:
        The parsed instance.

    """
    tokens: list[str | None] = list(line.split()[:_COLUMNS])
    tokens.extend([None] * (_COLUMNS - len(tokens)))
    name, namespace, class_name, plan, status = tokens
    return ServiceInstance(
        name=name,
        namespace=namespace,
        class_name=class_name,
        plan=plan,
        status=status,
    )


def parse_instance_table(text: str) -> list[ServiceInstance]:
    """Parse the full instance listing.

    Args:
        text: Raw stdout of ``svcat get instances``.

    Returns:
        Instances in listing order.

    """
    rows = text.splitlines()[_HEADER_LINES:]
    return [parse_instance_row(row) for row in rows if row.strip()]
