"""
Tests for the rollband CLI: exit codes and outputs.
"""

import json

import polars as pl
import pytest

from rollband.cli import main


class TestCLI:

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert 'bands' in capsys.readouterr().out

    def test_bands_summary(self, capsys):
        assert main(['bands', '--step', '0.1', '--width', '6']) == 0
        out = capsys.readouterr().out
        assert 'WindowConfig(width=6.0' in out
        assert 'mean_band_width' in out

    def test_bands_output(self, tmp_path, capsys):
        path = tmp_path / "bands.parquet"
        assert main(['bands', '--step', '0.1', '--seed', '1', '-o', str(path)]) == 0

        df = pl.read_parquet(path)
        assert df.height == 2 * 63
        assert set(df['group'].unique().to_list()) == {'A', 'B'}
        assert (df['rolling_lower'] <= df['rolling_upper']).all()

    def test_bands_time_frame_no_groupby(self, tmp_path):
        path = tmp_path / "bands.csv"
        code = main(['bands', '--step', '0.1', '--frame', 'time', '--width', '0.5',
                     '--no-groupby', '-o', str(path)])
        assert code == 0
        assert pl.read_csv(path).height == 126

    @pytest.mark.parametrize("width", ['0', '-5'])
    def test_bands_invalid_width(self, width, capsys):
        assert main(['bands', '--step', '0.1', '--width', width]) == 1
        assert 'ERROR' in capsys.readouterr().err

    def test_bands_unwritable_output(self, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        path = blocker / "bands.parquet"

        assert main(['bands', '--step', '0.1', '-o', str(path)]) == 1
        assert 'ERROR: Could not write' in capsys.readouterr().err
        assert not path.exists()

    def test_bands_unsupported_format(self, tmp_path, capsys):
        assert main(['bands', '--step', '0.1', '-o', str(tmp_path / "bands.json")]) == 1
        assert 'Unsupported table format' in capsys.readouterr().err

    def test_transform(self, capsys):
        assert main(['transform', '--width', '20', '--groupby', 'group']) == 0
        transform = json.loads(capsys.readouterr().out)
        assert transform['frame'] == [-10.0, 10.0]
        assert transform['groupby'] == ['group']

    def test_transform_invalid(self, capsys):
        assert main(['transform', '--width', '2', '--groupby', 'colour']) == 1

    def test_transform_time_frame_rejected(self, capsys):
        assert main(['transform', '--frame', 'time', '--width', '2']) == 1
        assert "frame='rows'" in capsys.readouterr().err

    def test_transform_column_names(self, capsys):
        assert main(['transform', '--value-col', 'amplitude', '--group-col', 'class']) == 0
        transform = json.loads(capsys.readouterr().out)
        assert transform['groupby'] == ['class']
        assert {w['field'] for w in transform['window']} == {'amplitude'}
        assert transform['frame'] == [-10.0, 10.0]

    def test_defaults(self, capsys):
        assert main(['defaults']) == 0
        assert json.loads(capsys.readouterr().out)['width']['default'] == 20


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
