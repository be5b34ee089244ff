import json
import sys
from dataclasses import dataclass
from pathlib import Path
from web3 import Web3

from alte_deploy.backend import get_contract_factory
from alte_deploy.config import CONTRACT_NAME, CONFIRMATIONS, DeploySettings, load_settings


@dataclass
class DeploymentResult:
    address: str
    receipt: dict


def verification_command(address: str, team_wallet: str, reserve_wallet: str, token_uri: str, network: str = "sepolia") -> str:
    return f'npx hardhat verify --network {network} {address} "{team_wallet}" "{reserve_wallet}" "{token_uri}"'


def _warn_if_not_address(label: str, value: str) -> None:
    if not Web3.is_address(value):
        print(f"Warning: {label} '{value}' is not a valid address. Set it in your .env file.")


def deploy_token(factory, settings: DeploySettings) -> DeploymentResult:
    """Deploy AlteToken through `factory` and report the confirmed receipt.
    Args:
        factory: Contract factory exposing deploy(team_wallet, reserve_wallet, token_uri).
        settings (DeploySettings): Constructor arguments and network name.
    Returns:
        DeploymentResult: Deployed address and the confirmed receipt.
    """
    print(f"Deploying {CONTRACT_NAME} with the following parameters:")
    print(f"Team Wallet: {settings.team_wallet}")
    print(f"Reserve Wallet: {settings.reserve_wallet}")
    print(f"Token URI: {settings.token_uri}")
    _warn_if_not_address("Team Wallet", settings.team_wallet)
    _warn_if_not_address("Reserve Wallet", settings.reserve_wallet)

    token = factory.deploy(settings.team_wallet, settings.reserve_wallet, settings.token_uri)
    token.wait_for_deployment()
    address = token.get_address()
    print(f"{CONTRACT_NAME} deployed to: {address}")

    print("Waiting for confirmations...")
    receipt = token.deployment_transaction().wait(CONFIRMATIONS)

    print(f"Deployment confirmed in block: {receipt['blockNumber']}")
    print(f"Gas used: {receipt['gasUsed']}")

    return DeploymentResult(address=address, receipt=receipt)


def save_deployment_details(result: DeploymentResult, settings: DeploySettings, deployer: str) -> Path | None:
    if not settings.output_file:
        return None

    tx_hash = result.receipt["transactionHash"]
    tx_hash = tx_hash.hex() if isinstance(tx_hash, bytes) else str(tx_hash)

    data_dir = Path.cwd() / "data"
    data_dir.mkdir(exist_ok=True)
    output_path = data_dir / settings.output_file

    deployment_data = {
        "contract": CONTRACT_NAME,
        "address": result.address,
        "network": settings.network,
        "deployer": deployer,
        "transaction_hash": tx_hash,
        "block_number": result.receipt["blockNumber"],
        "gas_used": str(result.receipt["gasUsed"]),
        "constructor_args": [settings.team_wallet, settings.reserve_wallet, settings.token_uri],
    }

    with open(output_path, "w") as f:
        json.dump(deployment_data, f, indent=4)

    print(f"Deployment details saved to {output_path}")
    return output_path


def main() -> None:
    settings = load_settings()
    factory = get_contract_factory(CONTRACT_NAME, settings)
    result = deploy_token(factory, settings)
    save_deployment_details(result, settings, factory.account.address)

    print("\nVerify with:")
    print(verification_command(result.address, settings.team_wallet, settings.reserve_wallet, settings.token_uri, settings.network))


def run() -> None:
    """Run the deployment and exit with 0 on success, 1 on any error."""
    try:
        main()
    except Exception as e:
        print(f"Deployment failed: {e!r}", file=sys.stderr)
        sys.exit(1)
    sys.exit(0)
