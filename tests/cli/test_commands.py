"""Tests for the osmdoc command line."""
import json
import logging

import pytest
from osm_doc import __version__
from osm_doc.cli.main import create_parser, main


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the root logger setup done by main()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGlobalOptions:
    """Tests for top-level CLI behavior."""

    def test_no_command_shows_help(self, capsys):
        """Test running without a command prints help."""
        assert main([]) == 0
        assert 'osmdoc' in capsys.readouterr().out

    def test_version(self, capsys):
        """Test --version."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--version'])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_subcommands_registered(self):
        """Test parser knows both subcommands."""
        parser = create_parser()
        args = parser.parse_args(['summary', 'map.osm'])
        assert args.command == 'summary'
        args = parser.parse_args(['refs', '--limit', '3', 'map.osm'])
        assert args.limit == 3

    def test_verbose_logs_to_stderr(self, tmp_path, capsys):
        """Test -vv shows debug records from the parser."""
        osm_file = tmp_path / "extra.osm"
        osm_file.write_text('<osm><foo/></osm>')

        assert main(['-vv', 'summary', str(osm_file)]) == 0
        err = capsys.readouterr().err
        assert 'osm_doc.parsing.builder: DEBUG: Skipping unknown element <foo>' in err

    def test_default_level_hides_debug(self, tmp_path, capsys):
        """Test debug records are hidden without -v."""
        osm_file = tmp_path / "extra.osm"
        osm_file.write_text('<osm><foo/></osm>')

        assert main(['summary', str(osm_file)]) == 0
        assert 'Skipping' not in capsys.readouterr().err


class TestSummaryCommand:
    """Tests for `osmdoc summary`."""

    def test_text_output(self, small_osm_file, capsys):
        """Test human readable summary."""
        assert main(['summary', str(small_osm_file)]) == 0
        out = capsys.readouterr().out

        assert '3 nodes, 2 ways, 1 relations (6 total)' in out
        assert 'Bounds: 51.5, -0.13 -> 51.53, -0.1' in out
        assert 'Closed ways: 1 (areas: 1)' in out
        assert 'Dangling references: 2' in out

    def test_json_output(self, small_osm_file, capsys):
        """Test JSON summary."""
        assert main(['summary', '--json', str(small_osm_file)]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data['elements'] == {'nodes': 3, 'ways': 2, 'relations': 1, 'total': 6}
        assert data['bounds']['max_lat'] == 51.53
        assert data['ways'] == {'closed': 1, 'areas': 1}
        assert data['duplicate_ids'] == {'node': [], 'way': [], 'relation': []}

    def test_empty_file(self, empty_osm_file, capsys):
        """Test summary of a file without elements or bounds."""
        assert main(['summary', str(empty_osm_file)]) == 0
        out = capsys.readouterr().out
        assert '0 nodes, 0 ways, 0 relations' in out
        assert 'Bounds: not declared' in out

    def test_duplicates_reported(self, tmp_path, capsys):
        """Test duplicate ids are listed."""
        osm_file = tmp_path / "dupes.osm"
        osm_file.write_text('''<osm>
  <node id="7" lat="0" lon="0"/>
  <node id="7" lat="1" lon="1"/>
</osm>''')
        assert main(['summary', str(osm_file)]) == 0
        assert 'Duplicate node ids (first occurrence wins): 7' in capsys.readouterr().out

    def test_quiet(self, small_osm_file, capsys):
        """Test -q suppresses the text summary."""
        assert main(['-q', 'summary', str(small_osm_file)]) == 0
        assert capsys.readouterr().out == ''


class TestRefsCommand:
    """Tests for `osmdoc refs`."""

    def test_text_output(self, small_osm_file, capsys):
        """Test dangling references listing."""
        assert main(['refs', str(small_osm_file)]) == 0
        lines = capsys.readouterr().out.splitlines()

        assert lines == [
            'way 100 -> node 4',
            'relation 1000 -> way 999 (inner)',
            '2 dangling reference(s)',
        ]

    def test_limit(self, small_osm_file, capsys):
        """Test --limit truncates the listing but not the total."""
        assert main(['refs', '--limit', '1', str(small_osm_file)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == ['way 100 -> node 4', '2 dangling reference(s)']

    def test_negative_limit(self, small_osm_file, capsys):
        """Test negative --limit is rejected."""
        assert main(['refs', '--limit', '-1', str(small_osm_file)]) == 2
        assert 'must not be negative' in capsys.readouterr().err

    def test_json_output(self, small_osm_file, capsys):
        """Test JSON listing."""
        assert main(['refs', '--json', str(small_osm_file)]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data['total'] == 2
        assert data['references'][1] == {
            'owner_type': 'relation',
            'owner_id': 1000,
            'target_type': 'way',
            'target_id': 999,
            'role': 'inner',
        }


class TestErrors:
    """Tests for CLI error handling."""

    def test_file_not_found(self, tmp_path, capsys):
        """Test missing input exits with code 3."""
        assert main(['summary', str(tmp_path / 'missing.osm')]) == 3
        assert 'File not found' in capsys.readouterr().err

    def test_parse_error(self, tmp_path, capsys):
        """Test parse failures exit with code 1 and name the error."""
        osm_file = tmp_path / "broken.osm"
        osm_file.write_text('<osm><node lat="0" lon="0"/></osm>')

        assert main(['refs', str(osm_file)]) == 1
        err = capsys.readouterr().err
        assert 'MissingAttributeError' in err
        assert "'id'" in err

    def test_truncated_file(self, tmp_path, capsys):
        """Test truncated input exits with code 1."""
        osm_file = tmp_path / "cut.osm"
        osm_file.write_text('<osm><way id="1"><nd ref="1"/>')

        assert main(['summary', str(osm_file)]) == 1
        assert 'TruncatedDocumentError' in capsys.readouterr().err
