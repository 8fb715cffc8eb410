"""Tests for license_preamble.catalog — bundled licenses and lookup."""

from __future__ import annotations

import pytest

from license_preamble.catalog import (
    LicenseRecord,
    get_catalog,
    load,
    parse_document,
    resolve,
)
from license_preamble.exceptions import CatalogError, InvalidLicense, PreambleError

DOC = """---
title: Example License
spdx-id: EX-1.0
featured: true

description: An example.

how: Copy it.

using:
  Thing: https://example.com/thing

permissions:
  - commercial-use

conditions: []

limitations:
  - warranty

---

Example License body
line two
"""


def _record(title, identifier):
    return LicenseRecord(title=title, identifier=identifier, body=f"{title} text")


# ─── Parsing ─────────────────────────────────────────────────────────


class TestParseDocument:
    def test_fields(self):
        record = parse_document(DOC)
        assert record.title == "Example License"
        assert record.identifier == "EX-1.0"
        assert record.featured is True
        assert record.using == {"Thing": "https://example.com/thing"}
        assert record.permissions == ("commercial-use",)
        assert record.conditions == ()
        assert record.limitations == ("warranty",)
        assert record.nickname is None

    def test_body_follows_front_matter(self):
        record = parse_document(DOC)
        assert record.body.strip() == "Example License body\nline two"

    def test_featured_defaults_false(self):
        record = parse_document(DOC.replace("featured: true\n", ""))
        assert record.featured is False

    def test_missing_front_matter(self):
        with pytest.raises(CatalogError, match="missing front matter"):
            parse_document("Just a body\n", source="bad.txt")

    def test_missing_required_field(self):
        with pytest.raises(CatalogError, match="spdx-id"):
            parse_document(DOC.replace("spdx-id: EX-1.0\n", ""), source="bad.txt")

    def test_invalid_yaml(self):
        with pytest.raises(CatalogError, match="invalid front matter"):
            parse_document("---\ntitle: [unclosed\n---\nbody\n")

    def test_front_matter_not_mapping(self):
        with pytest.raises(CatalogError, match="not a mapping"):
            parse_document("---\n- a\n- b\n---\nbody\n")


# ─── Loading ─────────────────────────────────────────────────────────


class TestLoad:
    def test_bundled_catalog_loads(self):
        catalog = get_catalog()
        assert len(catalog) >= 10
        assert all(isinstance(r, LicenseRecord) for r in catalog)

    def test_identifiers_unique(self):
        ids = [r.identifier for r in get_catalog()]
        assert len(ids) == len(set(ids))

    def test_bodies_not_empty(self):
        for record in get_catalog():
            assert record.body.strip(), record.identifier

    @pytest.mark.parametrize(
        "identifier, marker",
        [
            ("Artistic-2.0", "The Artistic License 2.0"),
            ("BlueOak-1.0.0", "Blue Oak Model License"),
            ("CC-BY-4.0", "Attribution 4.0 International"),
            ("MS-PL", "Microsoft Public License (Ms-PL)"),
            ("NCSA", "University of Illinois/NCSA Open Source License"),
            ("OFL-1.1", "SIL OPEN FONT LICENSE Version 1.1"),
            ("PostgreSQL", "PostgreSQL License"),
            ("UPL-1.0", "The Universal Permissive License (UPL), Version 1.0"),
            ("WTFPL", "DO WHAT THE FUCK YOU WANT TO PUBLIC LICENSE"),
        ],
    )
    def test_wider_catalog(self, identifier, marker):
        ids = {r.identifier: r for r in get_catalog()}
        assert identifier in ids
        assert marker in ids[identifier].body

    def test_catalog_is_cached(self):
        assert get_catalog() is get_catalog()

    def test_sorted_by_file_name(self, tmp_path):
        (tmp_path / "b.txt").write_text(DOC.replace("EX-1.0", "B"))
        (tmp_path / "a.txt").write_text(DOC.replace("EX-1.0", "A"))
        assert [r.identifier for r in load(tmp_path)] == ["A", "B"]

    def test_broken_document_is_fatal(self, tmp_path):
        (tmp_path / "ok.txt").write_text(DOC)
        (tmp_path / "broken.txt").write_text("no front matter")
        with pytest.raises(CatalogError, match="broken.txt"):
            load(tmp_path)

    def test_empty_directory(self, tmp_path):
        with pytest.raises(CatalogError, match="No license documents"):
            load(tmp_path)


# ─── Resolution ──────────────────────────────────────────────────────


class TestResolve:
    def test_every_identifier_resolves(self):
        for record in get_catalog():
            found = resolve(record.identifier)
            assert record.identifier == found.identifier

    def test_every_title_resolves(self):
        for record in get_catalog():
            assert resolve(record.title).title == record.title

    def test_mit(self):
        record = resolve("MIT")
        assert record.title == "MIT License"
        assert "Permission is hereby granted" in record.body

    def test_case_sensitive(self):
        with pytest.raises(InvalidLicense):
            resolve("mit")

    def test_no_trimming(self):
        with pytest.raises(InvalidLicense):
            resolve(" MIT ")

    def test_unknown_mentions_list(self):
        with pytest.raises(InvalidLicense, match="list") as exc:
            resolve("Not A License")
        assert isinstance(exc.value, PreambleError)
        assert exc.value.name == "Not A License"

    def test_first_match_wins(self):
        catalog = [_record("Same", "A"), _record("Same", "B")]
        assert resolve("Same", catalog).identifier == "A"

    def test_title_or_identifier(self):
        catalog = [_record("Alpha License", "ALPHA")]
        assert resolve("ALPHA", catalog) is resolve("Alpha License", catalog)
