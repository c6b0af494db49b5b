from textwrap import dedent

import pytest

from specscan.errors import ManifestUnreadable
from specscan.manifest_parse import parse_manifest, parse_manifest_file
from specscan.model import DependencyType


def test_block_with_indirect_marker():
	m = parse_manifest("require (\n a v1.0.0\n b v2.0.0 // indirect\n)\n")
	assert [(d.name, d.version, d.type) for d in m.dependencies] == [
		("a", "1.0.0", DependencyType.DIRECT),
		("b", "2.0.0", DependencyType.INDIRECT),
	]


def test_block_opener_sharing_a_line():
	m = parse_manifest("require ( a v1.0.0\n b v2.0.0 // indirect\n )")
	assert [(d.name, d.type) for d in m.dependencies] == [
		("a", DependencyType.DIRECT),
		("b", DependencyType.INDIRECT),
	]


def test_full_manifest():
	text = dedent(
		"""
		module github.com/acme/shop

		go 1.21

		require github.com/zeromicro/go-zero v1.6.0

		require (
			github.com/zeromicro/go-zero v1.7.0
			google.golang.org/grpc v1.60.1
			github.com/zeromicro/go-zero-contrib v0.1.0 // indirect
		)

		replace (
			example.com/old v1.0.0 => example.com/new v1.1.0
		)
		"""
	)
	m = parse_manifest(text)
	assert m.module == "github.com/acme/shop"
	assert m.go_version == "1.21"
	assert [d.name for d in m.dependencies] == [
		"github.com/zeromicro/go-zero",
		"github.com/zeromicro/go-zero",
		"google.golang.org/grpc",
		"github.com/zeromicro/go-zero-contrib",
	]
	assert m.framework_version == "1.6.0"
	assert m.dependencies[-1].type is DependencyType.INDIRECT


def test_custom_framework_package():
	m = parse_manifest("require (\n github.com/gin-gonic/gin v1.9.1\n)\n", framework_package="gin")
	assert m.framework_version == "1.9.1"


def test_no_framework_dependency():
	m = parse_manifest("module x\n\nrequire golang.org/x/net v0.17.0\n")
	assert m.framework_version == ""
	assert len(m.dependencies) == 1


def test_lines_without_version_are_ignored():
	m = parse_manifest("require (\n not-a-requirement\n a v1\n)\n")
	assert [d.name for d in m.dependencies] == ["a"]


def test_empty_manifest():
	m = parse_manifest("")
	assert m.dependencies == []
	assert m.module == ""


def test_parse_file_missing_raises(tmp_path):
	with pytest.raises(ManifestUnreadable) as exc:
		parse_manifest_file(str(tmp_path / "go.mod"))
	assert str(tmp_path / "go.mod") in str(exc.value)


def test_parse_file(tmp_path):
	p = tmp_path / "go.mod"
	p.write_text("module m\n\nrequire github.com/zeromicro/go-zero v1.5.0\n")
	assert parse_manifest_file(str(p)).framework_version == "1.5.0"
