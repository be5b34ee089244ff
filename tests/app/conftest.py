import pytest
from unittest.mock import MagicMock

from alte_deploy.config import DeploySettings

TEAM_WALLET = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
RESERVE_WALLET = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
DEPLOYED_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"

ENV_VARS = [
    "TEAM_WALLET_ADDRESS",
    "RESERVE_WALLET_ADDRESS",
    "NODE_URL",
    "ETH_OPERATOR_PRIVATE_KEY",
    "DEPLOY_NETWORK",
    "ARTIFACTS_DIR",
    "DEPLOYMENT_OUTPUT_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, mocker):
    """Isolate tests from the developer's environment and .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    mocker.patch("alte_deploy.config.load_dotenv")


@pytest.fixture
def settings():
    return DeploySettings(team_wallet=TEAM_WALLET, reserve_wallet=RESERVE_WALLET)


@pytest.fixture
def receipt():
    return {
        "status": 1,
        "blockNumber": 4242,
        "gasUsed": 1234567,
        "contractAddress": DEPLOYED_ADDRESS,
        "transactionHash": b"\x12\x34" * 16,
    }


@pytest.fixture
def mock_factory(receipt):
    factory = MagicMock()
    factory.account.address = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
    handle = factory.deploy.return_value
    handle.get_address.return_value = DEPLOYED_ADDRESS
    handle.deployment_transaction.return_value.wait.return_value = receipt
    return factory
