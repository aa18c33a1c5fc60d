"""
Tests for pre-flight system checks
"""

import pytest
from unittest.mock import MagicMock, patch

from scripts import check_system

PRIVATE_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv('ALCHEMY_HTTPS_URL', 'https://eth-sepolia.g.alchemy.com/v2/test-key')
    monkeypatch.setenv('BOT_PRIVATE_KEY', PRIVATE_KEY)
    monkeypatch.delenv('FLASHLOAN_CONTRACT_ADDRESS', raising=False)
    monkeypatch.delenv('DEPLOY_TIMEOUT_SECONDS', raising=False)
    return monkeypatch


@pytest.fixture
def w3():
    w3 = MagicMock()
    w3.is_connected.return_value = True
    w3.eth.block_number = 6500000
    w3.eth.get_balance.return_value = 10 ** 17
    return w3


class TestChecks:

    def test_environment_variables(self, env):
        assert check_system.check_environment_variables()

    def test_missing_environment_variable(self, env):
        env.delenv('BOT_PRIVATE_KEY')
        assert not check_system.check_environment_variables()

    def test_rpc_connection(self, env, w3):
        with patch.object(check_system, 'Web3', return_value=w3):
            assert check_system.check_rpc_connection()

            w3.is_connected.return_value = False
            assert not check_system.check_rpc_connection()

    def test_empty_deployer_balance(self, env, w3):
        w3.eth.get_balance.return_value = 0

        with patch.object(check_system, 'Web3', return_value=w3):
            assert not check_system.check_deployer_balance()

    def test_no_deployed_contract_yet(self, env):
        assert check_system.check_contract_deployment()

    def test_missing_artifact(self, env, tmp_path):
        env.setenv('ARTIFACTS_DIR', str(tmp_path))

        with pytest.raises(FileNotFoundError):
            check_system.check_artifact()

    def test_main_fails_without_config(self, env):
        env.delenv('ALCHEMY_HTTPS_URL')

        assert check_system.main() == 1
