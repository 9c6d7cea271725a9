"""
CLI formatting functions for demo output.

- json: indented JSON
- yaml: block-style YAML
- table: Rich tables for lists of records, JSON for everything else
"""
import io
import json
from typing import Any, Dict, List


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        import yaml

        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def _record_lists(data: Any) -> Dict[str, List[Dict[str, Any]]]:
    """Top-level entries that are non-empty lists of flat dictionaries."""
    if not isinstance(data, dict):
        return {}
    return {
        key: value for key, value in data.items()
        if isinstance(value, list) and value and all(isinstance(item, dict) for item in value)
    }


def format_table_output(data: Any) -> str:
    """Render each list of records as a table and the remaining keys as JSON."""
    tables = _record_lists(data)
    if not tables:
        return json.dumps(data, indent=2, default=str)

    from rich.console import Console
    from rich.table import Table

    buffer = io.StringIO()
    console = Console(file=buffer, width=120, no_color=True)
    for title, records in tables.items():
        columns: List[str] = []
        for record in records:
            columns.extend(key for key in record if key not in columns)
        table = Table(title=title, show_header=True, header_style="bold magenta")
        for column in columns:
            table.add_column(column)
        for record in records:
            table.add_row(*[_cell(record.get(column)) for column in columns])
        console.print(table)

    rest = {key: value for key, value in data.items() if key not in tables}
    if rest:
        console.print(json.dumps(rest, indent=2, default=str), markup=False, highlight=False)
    return buffer.getvalue().rstrip("\n")


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)
