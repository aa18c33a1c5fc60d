"""
Unit Tests for Utilities
"""

from utils.env_file import update_env_file

ADDRESS = '0x5FbDB2315678afecb367f032d93F642f64180aa3'


class TestUpdateEnvFile:
    """Test .env persistence"""

    def test_creates_missing_file(self, tmp_path):
        env_path = tmp_path / '.env'

        assert update_env_file('FLASHLOAN_CONTRACT_ADDRESS', ADDRESS, str(env_path))
        assert env_path.read_text() == f'FLASHLOAN_CONTRACT_ADDRESS={ADDRESS}\n'

    def test_replaces_existing_entry(self, tmp_path):
        env_path = tmp_path / '.env'
        env_path.write_text(
            'ALCHEMY_HTTPS_URL=https://example\n'
            'FLASHLOAN_CONTRACT_ADDRESS=0xold\n'
            'BOT_PRIVATE_KEY=abc\n'
        )

        update_env_file('FLASHLOAN_CONTRACT_ADDRESS', ADDRESS, str(env_path))

        assert env_path.read_text() == (
            'ALCHEMY_HTTPS_URL=https://example\n'
            f'FLASHLOAN_CONTRACT_ADDRESS={ADDRESS}\n'
            'BOT_PRIVATE_KEY=abc\n'
        )

    def test_appends_after_unterminated_line(self, tmp_path):
        env_path = tmp_path / '.env'
        env_path.write_text('BOT_PRIVATE_KEY=abc')

        update_env_file('FLASHLOAN_CONTRACT_ADDRESS', ADDRESS, str(env_path))

        assert env_path.read_text() == f'BOT_PRIVATE_KEY=abc\nFLASHLOAN_CONTRACT_ADDRESS={ADDRESS}\n'

    def test_unwritable_path(self, tmp_path):
        env_path = tmp_path / 'missing-dir' / '.env'

        assert not update_env_file('FLASHLOAN_CONTRACT_ADDRESS', ADDRESS, str(env_path))
