"""Tests for the recommend entrypoint."""

import importlib.util
import json
from pathlib import Path

import pandas as pd
import pytest

from hotel_pricing.data.catalog import catalog_frame, default_competitors, default_target_hotel

ENTRYPOINT = Path(__file__).parent.parent / 'entrypoint' / 'recommend.py'


@pytest.fixture(scope='module')
def cli():
    loader = importlib.util.spec_from_file_location('recommend_cli', ENTRYPOINT)
    module = importlib.util.module_from_spec(loader)
    loader.loader.exec_module(module)
    return module


class TestRecommendCli:

    def test_default_report(self, cli, capsys):
        assert cli.main([]) == 0

        out = capsys.readouterr().out
        assert "RECOMMENDATION: Hôtel Croix Baragnon" in out
        assert "Market index" in out
        assert "Direct competition (7)" in out

    def test_json_output(self, cli, capsys):
        assert cli.main(['--json', '--demand', 'peak', '--include-upscale']) == 0

        data = json.loads(capsys.readouterr().out)
        assert data['scenario']['demand_index'] == pytest.approx(1.12)
        assert len(data['reference_hotels']) == 9
        assert 90.0 <= data['recommended_price'] <= 160.0

    def test_invalid_band_exits_2(self, cli, capsys):
        assert cli.main(['--floor', '150', '--ceiling', '120']) == 2

    def test_projection_and_breakdown(self, cli, capsys):
        assert cli.main(['--projection', '--breakdown']) == 0

        out = capsys.readouterr().out
        assert "Projection by occupancy target" in out
        assert "Rate mix by segment" in out

    def test_plots_written(self, cli, tmp_path, capsys):
        assert cli.main(['--plot', str(tmp_path)]) == 0

        assert (tmp_path / 'occupancy_projection.png').exists()
        assert (tmp_path / 'category_mix.png').exists()

    def test_custom_catalog(self, cli, tmp_path, capsys):
        df = catalog_frame([default_target_hotel()] + default_competitors()[:3])
        path = tmp_path / 'hotels.csv'
        df.to_csv(path, index=False)

        assert cli.main(['--catalog', str(path), '--json']) == 0

        data = json.loads(capsys.readouterr().out)
        assert [h['id'] for h in data['reference_hotels']] == ['saint-etienne', 'clos-des-carmes', 'capitole-eco']

    def test_invalid_catalog_exits_2(self, cli, tmp_path, capsys):
        df = catalog_frame([default_target_hotel()] + default_competitors()[:2])
        df.loc[1, 'occupancy_rate'] = 1.5
        path = tmp_path / 'hotels.csv'
        df.to_csv(path, index=False)

        assert cli.main(['--catalog', str(path)]) == 2
