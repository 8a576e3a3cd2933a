"""
Tests for subscene.models data classes.
"""
import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import dataclasses

import pytest

from subscene.models import (
    PartialSubtitle,
    SearchResult,
    Subtitle,
    SubtitleResultSet,
)


class TestSearchResult:
    def test_creation(self):
        r = SearchResult(id='136037', name='The.Show.S01E01', url='/subtitles/show/english/136037')
        assert r.id == '136037'
        assert r.language is None

    def test_immutable(self):
        r = SearchResult(id='1', name='n', url='/u/1')
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.name = 'other'

    def test_to_dict(self):
        r = SearchResult(id='1', name='n', url='/x/1', language='English')
        assert r.to_dict() == {'id': '1', 'name': 'n', 'url': '/x/1', 'language': 'English'}


class TestSubtitleResultSet:
    def _results(self):
        return (
            SearchResult(id='1', name='a', url='/x/1'),
            SearchResult(id='2', name='b', url='/x/2'),
        )

    def test_sequence_behaviour(self):
        rs = SubtitleResultSet(results=self._results())
        assert len(rs) == 2
        assert rs[1].id == '2'
        assert [r.id for r in rs] == ['1', '2']

    def test_instances_is_a_copy(self):
        rs = SubtitleResultSet(results=self._results())
        instances = rs.instances
        instances.clear()
        assert len(rs) == 2

    def test_empty(self):
        rs = SubtitleResultSet()
        assert len(rs) == 0
        assert rs.instances == []

    def test_to_dict(self):
        d = SubtitleResultSet(results=self._results(), page_title='t').to_dict()
        assert d['page_title'] == 't'
        assert [r['id'] for r in d['results']] == ['1', '2']


class TestPartialSubtitle:
    def test_defaults(self):
        p = PartialSubtitle(title='Show', download_url='/dl')
        assert p.rating is None
        assert p.releases == ()

    def test_with_id_builds_full_record(self):
        p = PartialSubtitle(title='Show', download_url='/dl', release='Show.S01E01', rating='8')
        s = p.with_id(42)
        assert isinstance(s, Subtitle)
        assert s.id == '42'
        assert s.title == 'Show'
        assert s.release == 'Show.S01E01'
        assert s.rating == '8'

    def test_with_id_does_not_modify_partial(self):
        p = PartialSubtitle(title='Show', download_url='/dl')
        p.with_id(1)
        assert not hasattr(p, 'id')

    def test_subtitle_immutable(self):
        s = PartialSubtitle(title='Show', download_url='/dl').with_id(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.id = '2'

    def test_subtitle_to_dict_includes_id(self):
        d = PartialSubtitle(title='Show', download_url='/dl').with_id('9').to_dict()
        assert d['id'] == '9'
        assert d['title'] == 'Show'
        assert d['download_url'] == '/dl'

    def test_subtitle_requires_id(self):
        with pytest.raises(TypeError):
            Subtitle(title='Show', download_url='/dl')

    def test_subtitle_id_is_keyword_only(self):
        s = Subtitle('Show', '/dl', id='3')
        assert s.id == '3'
        assert s.title == 'Show'
