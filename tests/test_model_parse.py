from textwrap import dedent

import pytest

from specscan.errors import NoTableDeclared
from specscan.model_parse import parse_table_schema


def test_parse_create_table():
	ddl = dedent(
		"""
		CREATE TABLE `user` (
		  `id` bigint(20) NOT NULL AUTO_INCREMENT PRIMARY KEY,
		  `name` varchar(255) NOT NULL DEFAULT '' COMMENT 'display name',
		  `created_at` timestamp NULL,
		  UNIQUE KEY `uk_name` (`name`)
		) ENGINE=InnoDB;
		"""
	)
	schema = parse_table_schema(ddl)
	assert schema.table_name == "user"
	assert schema.field_names == ["id", "name", "created_at"]
	assert schema.fields[0].type == "bigint(20)"
	assert schema.fields[1].clause == "NOT NULL DEFAULT '' COMMENT 'display name'"
	assert schema.primary_key == "id"


def test_unquoted_table_name():
	schema = parse_table_schema("create table orders (\n `sku` varchar(64)\n)")
	assert schema.table_name == "orders"
	assert schema.primary_key == ""


def test_missing_table_raises():
	with pytest.raises(NoTableDeclared):
		parse_table_schema("SELECT 1;")
