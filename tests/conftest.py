"""Pytest fixtures for OSMDoc tests."""
import io

import pytest


EXAMPLE_OSM = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="test">
  <bounds minlat="0" minlon="0" maxlat="1" maxlon="1"/>
  <node id="1" lat="0.5" lon="0.5">
    <tag k="name" v="A"/>
  </node>
  <way id="10">
    <nd ref="1"/>
    <nd ref="1"/>
  </way>
  <relation id="100">
    <member type="way" ref="10" role="outer"/>
  </relation>
</osm>'''


@pytest.fixture
def parse_text():
    """Parse an OSM XML string through the full byte-stream path."""
    from osm_doc.parsing.builder import parse

    def _parse(text, **kwargs):
        return parse(io.BytesIO(text.encode('utf-8')), **kwargs)
    return _parse


@pytest.fixture
def example_osm_text():
    """OSM XML with bounds, one node, one closed way and one relation."""
    return EXAMPLE_OSM


@pytest.fixture
def example_document(parse_text, example_osm_text):
    """Parsed example document."""
    return parse_text(example_osm_text)


@pytest.fixture
def small_osm_file(tmp_path):
    """Create small OSM file with dangling references."""
    content = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <bounds minlat="51.5" minlon="-0.13" maxlat="51.53" maxlon="-0.1"/>
  <node id="1" lat="51.5" lon="-0.1">
    <tag k="amenity" v="restaurant"/>
    <tag k="name" v="Test Cafe"/>
  </node>
  <node id="2" lat="51.51" lon="-0.11"/>
  <node id="3" lat="51.52" lon="-0.12"/>
  <way id="100">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="3"/>
    <nd ref="4"/>
    <tag k="highway" v="primary"/>
    <tag k="name" v="Main Street"/>
  </way>
  <way id="101">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="3"/>
    <nd ref="1"/>
    <tag k="building" v="residential"/>
  </way>
  <relation id="1000">
    <member type="way" ref="101" role="outer"/>
    <member type="way" ref="999" role="inner"/>
    <tag k="type" v="multipolygon"/>
  </relation>
</osm>'''
    file = tmp_path / "small.osm"
    file.write_text(content, encoding='utf-8')
    return file


@pytest.fixture
def empty_osm_file(tmp_path):
    """Create empty OSM file."""
    content = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
</osm>'''
    file = tmp_path / "empty.osm"
    file.write_text(content, encoding='utf-8')
    return file


@pytest.fixture
def sample_way():
    """Create sample closed Way."""
    from osm_doc.models.elements import Tag, Way
    return Way(
        id=67890,
        tags=[Tag("building", "residential"), Tag("name", "Test Building")],
        nodes=[1, 2, 3, 1]
    )
