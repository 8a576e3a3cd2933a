"""
Tests for the command line interface in subscene/cli.py
"""
import os
import sys
import json
from unittest.mock import patch

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import pytest

from subscene import cli
from subscene.client import ClientConfig, SubsceneClient


@pytest.fixture
def patched_client(fake_session):
    client = SubsceneClient(config=ClientConfig(language_filter=None), session=fake_session)
    with patch.object(cli, 'create_client_from_config', return_value=client), \
            patch.object(cli, 'setup_logging'):
        yield client


class TestParseArguments:
    def test_search_without_query(self):
        args = cli.parse_arguments(['search'])
        assert args.command == 'search'
        assert args.query is None

    def test_find_with_url(self):
        args = cli.parse_arguments(['--language', 'English', 'find', '42', '--url', '/x/42'])
        assert args.command == 'find'
        assert args.id == '42'
        assert args.url == '/x/42'
        assert args.language == 'English'

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.parse_arguments([])


class TestMain:
    def test_search_prints_json(self, patched_client, fake_session, make_response, sample_search_html, capsys):
        fake_session.get.return_value = make_response(sample_search_html)
        assert cli.main(['--language', 'English,Spanish', 'search', 'The Big Bang Theory s01e01']) == 0
        output = json.loads(capsys.readouterr().out)
        assert [r['id'] for r in output] == ['136037', '136040', '99']
        assert patched_client.get_language_filter() == '13,38'

    def test_find_by_id(self, patched_client, fake_session, make_response, sample_detail_html, capsys):
        fake_session.get.return_value = make_response(sample_detail_html)
        assert cli.main(['find', '42']) == 0
        output = json.loads(capsys.readouterr().out)
        assert output['id'] == '42'

    def test_language_ids_take_precedence(self, patched_client, fake_session, make_response,
                                          sample_search_html):
        fake_session.get.return_value = make_response(sample_search_html)
        cli.main(['--language', 'English', '--language-ids', '38', 'search'])
        assert patched_client.get_language_filter() == '38'

    def test_error_exit_code(self, patched_client, fake_session, make_response, sample_no_results_html, capsys):
        fake_session.get.return_value = make_response(sample_no_results_html)
        assert cli.main(['search', 'nothing']) == 1
        assert capsys.readouterr().out == ''

    def test_invalid_configured_filter_exit_code(self, capsys):
        with patch.object(cli, 'create_client_from_config',
                          side_effect=ValueError('Subscene accepts at most 3 languages')), \
                patch.object(cli, 'setup_logging'):
            assert cli.main(['search', 'x']) == 1
        assert capsys.readouterr().out == ''
