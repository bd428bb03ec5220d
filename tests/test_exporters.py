# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for CSV and JSON position export.

Verifies port compliance, output format, and adapter behavior.
"""
import ast
import csv
import json
import logging

import pytest

from sphera.adapters.csv_exporter import CsvPositionExporter
from sphera.adapters.json_exporter import JsonPositionExporter
from sphera.domain.positions import BodyPosition, compute_positions
from sphera.ports.export import PositionExporter

_DJD = 30921.5  # 1984-08-29 00:00 UT


def _positions():
    return compute_positions(_DJD, bodies=["Sun", "Moon", "Mars"])


class TestPortCompliance:
    """Exporters implement the PositionExporter port."""

    def test_csv_exporter_is_position_exporter(self):
        assert issubclass(CsvPositionExporter, PositionExporter)
        assert isinstance(CsvPositionExporter(), PositionExporter)

    def test_json_exporter_is_position_exporter(self):
        assert issubclass(JsonPositionExporter, PositionExporter)
        assert isinstance(JsonPositionExporter(), PositionExporter)


class TestCsvExporter:

    def test_header_row(self, tmp_path):
        path = tmp_path / "pos.csv"
        CsvPositionExporter().export(_positions(), str(path), _DJD)
        with open(path, newline='') as f:
            header = next(csv.reader(f))
        assert header == ['body', 'longitude_deg', 'latitude_deg', 'distance_au', 'djd', 'epoch']

    def test_row_count(self, tmp_path):
        path = tmp_path / "pos.csv"
        count = CsvPositionExporter().export(_positions(), str(path), _DJD)
        assert count == 3
        with open(path) as f:
            lines = f.readlines()
        assert len(lines) == 4  # header + 3 rows

    def test_values(self, tmp_path):
        path = tmp_path / "pos.csv"
        positions = [BodyPosition("Mars", 214.982, 1.67762, 1.414)]
        CsvPositionExporter().export(positions, str(path), _DJD)
        with open(path, newline='') as f:
            rows = list(csv.DictReader(f))
        assert rows[0]['body'] == 'Mars'
        assert float(rows[0]['longitude_deg']) == pytest.approx(214.982)
        assert float(rows[0]['latitude_deg']) == pytest.approx(1.67762)
        assert float(rows[0]['distance_au']) == pytest.approx(1.414)
        assert float(rows[0]['djd']) == pytest.approx(_DJD)
        assert rows[0]['epoch'].startswith('1984-08-29T00:00:00')

    def test_empty(self, tmp_path):
        path = tmp_path / "pos.csv"
        assert CsvPositionExporter().export([], str(path), _DJD) == 0
        with open(path) as f:
            assert len(f.readlines()) == 1

    def test_logs_row_count(self, tmp_path, caplog):
        with caplog.at_level(logging.INFO, logger="sphera.adapters.csv_exporter"):
            CsvPositionExporter().export(_positions(), str(tmp_path / "pos.csv"), _DJD)
        assert any("Wrote 3 positions" in r.getMessage() for r in caplog.records)


class TestJsonExporter:

    def test_document(self, tmp_path):
        path = tmp_path / "pos.json"
        count = JsonPositionExporter().export(_positions(), str(path), _DJD)
        assert count == 3
        with open(path) as f:
            data = json.load(f)
        assert data['djd'] == pytest.approx(_DJD)
        assert data['jd'] == pytest.approx(_DJD + 2415020.0)
        assert [p['body'] for p in data['positions']] == ['Sun', 'Moon', 'Mars']

    def test_position_fields(self, tmp_path):
        path = tmp_path / "pos.json"
        JsonPositionExporter().export([BodyPosition("Sun", 156.0, 0.0, 1.0097)], str(path), _DJD)
        with open(path) as f:
            entry = json.load(f)['positions'][0]
        assert entry == {
            'body': 'Sun',
            'longitude_deg': 156.0,
            'latitude_deg': 0.0,
            'distance_au': 1.0097,
        }

    def test_empty(self, tmp_path):
        path = tmp_path / "pos.json"
        assert JsonPositionExporter().export([], str(path), _DJD) == 0
        with open(path) as f:
            assert json.load(f)['positions'] == []

    def test_logs_row_count(self, tmp_path, caplog):
        with caplog.at_level(logging.INFO, logger="sphera.adapters.json_exporter"):
            JsonPositionExporter().export(_positions(), str(tmp_path / "pos.json"), _DJD)
        assert any("Wrote 3 positions" in r.getMessage() for r in caplog.records)


class TestExportPurity:
    """Adapter purity: exporters may use stdlib csv/json but no other external deps."""

    def _check_imports(self, module_path, allowed_stdlib):
        with open(module_path) as f:
            tree = ast.parse(f.read())

        allowed_internal = {'sphera'}

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    top = alias.name.split('.')[0]
                    assert top in allowed_stdlib or top in allowed_internal, \
                        f"Forbidden import: {alias.name}"
            elif isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    top = node.module.split('.')[0]
                    assert top in allowed_stdlib or top in allowed_internal, \
                        f"Forbidden import from: {node.module}"

    def test_csv_exporter_no_external_deps(self):
        import sphera.adapters.csv_exporter as mod
        self._check_imports(mod.__file__, {'csv', 'logging'})

    def test_json_exporter_no_external_deps(self):
        import sphera.adapters.json_exporter as mod
        self._check_imports(mod.__file__, {'json', 'logging'})
