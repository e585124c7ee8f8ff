"""
Tests for the console entry point.
"""

import pytest
from unittest.mock import patch

from headlines import main as main_module


class TestMain:

    @patch('headlines.main.load_dotenv')
    @patch('headlines.main.run_tests')
    def test_runs_scenarios(self, mock_run, mock_dotenv, monkeypatch):
        monkeypatch.setenv('NEWSAPI_KEY', 'k')

        main_module.main()

        mock_dotenv.assert_called_once()
        mock_run.assert_called_once()
        config = mock_run.call_args.args[0]
        assert config.api_key == 'k'

    @patch('headlines.main.load_dotenv')
    @patch('headlines.main.run_tests')
    def test_missing_key_exits(self, mock_run, mock_dotenv):
        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == 1
        mock_run.assert_not_called()

    @patch('headlines.main.load_dotenv')
    @patch('headlines.main.run_tests')
    def test_scenario_failures_do_not_change_exit(self, mock_run, mock_dotenv, monkeypatch):
        from headlines.scenarios import ScenarioResult
        monkeypatch.setenv('NEWSAPI_KEY', 'k')
        mock_run.return_value = [ScenarioResult("WBT_API_001", "Connection Test", False, "- down")]

        # Returns normally: no SystemExit
        main_module.main()

    @patch('headlines.main.load_dotenv')
    @patch('headlines.main.run_tests')
    def test_user_agent_from_environment(self, mock_run, mock_dotenv, monkeypatch):
        monkeypatch.setenv('NEWSAPI_KEY', 'k')
        monkeypatch.setenv('NEWSAPI_USER_AGENT', 'Probe/2.0')

        main_module.main()

        assert mock_run.call_args.args[0].user_agent == 'Probe/2.0'
        assert 'NEWSAPI_USER_AGENT' in main_module.main.__doc__
