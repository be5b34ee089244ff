import os
from dataclasses import dataclass
from dotenv import load_dotenv

CONTRACT_NAME = "AlteToken"
TOKEN_URI = "https://alte.token/metadata"
PLACEHOLDER_ADDRESS = "0x..."
CONFIRMATIONS = 5


@dataclass(frozen=True)
class DeploySettings:
    team_wallet: str
    reserve_wallet: str
    token_uri: str = TOKEN_URI
    node_url: str = "http://localhost:8545"
    private_key: str | None = None
    network: str = "sepolia"
    artifacts_dir: str = "artifacts"
    output_file: str = "deployment_details.json"


def load_settings() -> DeploySettings:
    """Read deployment settings from the environment (and a .env file if present)."""
    load_dotenv()

    return DeploySettings(
        team_wallet=os.getenv("TEAM_WALLET_ADDRESS") or PLACEHOLDER_ADDRESS,
        reserve_wallet=os.getenv("RESERVE_WALLET_ADDRESS") or PLACEHOLDER_ADDRESS,
        node_url=os.getenv("NODE_URL", "http://localhost:8545"),
        private_key=os.getenv("ETH_OPERATOR_PRIVATE_KEY"),
        network=os.getenv("DEPLOY_NETWORK", "sepolia"),
        artifacts_dir=os.getenv("ARTIFACTS_DIR", "artifacts"),
        output_file=os.getenv("DEPLOYMENT_OUTPUT_FILE", "deployment_details.json"),
    )
