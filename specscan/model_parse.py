from __future__ import annotations

import re
from typing import List

from .errors import NoTableDeclared
from .model import TableField, TableSchema


TABLE_RE = re.compile(r"CREATE\s+TABLE\s+`?(\w+)`?", re.IGNORECASE)
FIELD_RE = re.compile(r"`(\w+)`\s+(\w+(?:\(\d+\))?)\s*([^,\n]*)")


def parse_table_schema(ddl: str) -> TableSchema:
	"""Extract table name, columns and primary key from a CREATE TABLE statement.

	Columns are backtick-quoted ``name type[(n)] clause`` entries. A column
	whose clause mentions PRIMARY KEY becomes the primary key.
	"""
	table = TABLE_RE.search(ddl)
	if table is None:
		raise NoTableDeclared()

	fields: List[TableField] = []
	primary_key = ""
	for m in FIELD_RE.finditer(ddl, table.end()):
		name, col_type, clause = m.group(1), m.group(2), m.group(3).strip()
		fields.append(TableField(name=name, type=col_type, clause=clause))
		if not primary_key and "PRIMARY KEY" in clause.upper():
			primary_key = name

	return TableSchema(table_name=table.group(1), fields=fields, primary_key=primary_key)
