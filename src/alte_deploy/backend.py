import time
from web3 import Web3
from eth_account import Account

from alte_deploy.artifacts import load_artifact, ContractArtifact
from alte_deploy.config import DeploySettings
from alte_deploy.errors import DeploymentFailure, InsufficientFunds

POLL_INTERVAL = 2.0
GAS_MULTIPLIER = 1.1


class DeploymentTransaction:
    """A sent contract-creation transaction."""

    def __init__(self, web3: Web3, tx_hash, poll_interval: float = POLL_INTERVAL):
        self.web3 = web3
        self.hash = tx_hash
        self.poll_interval = poll_interval

    def wait(self, confirmations: int = 1):
        """Block until the transaction has the given number of confirmations.
        Args:
            confirmations (int): Blocks required, counting the block that includes the transaction.
        Returns:
            TxReceipt: The receipt of the mined transaction.
        """
        try:
            receipt = self.web3.eth.wait_for_transaction_receipt(self.hash)
        except Exception as e:
            raise DeploymentFailure(f"Failed to get receipt for {self._hash_hex()}: {str(e)}")

        if receipt["status"] != 1:
            raise DeploymentFailure(f"Deployment transaction {self._hash_hex()} reverted.")

        try:
            while self.web3.eth.block_number - receipt["blockNumber"] + 1 < confirmations:
                time.sleep(self.poll_interval)
        except Exception as e:
            raise DeploymentFailure(f"Failed to wait for {confirmations} confirmations of {self._hash_hex()}: {str(e)}")

        return receipt

    def _hash_hex(self) -> str:
        return self.hash.hex() if hasattr(self.hash, "hex") else str(self.hash)


class DeployedContract:
    """Handle to a contract whose deployment transaction has been sent."""

    def __init__(self, web3: Web3, transaction: DeploymentTransaction):
        self.web3 = web3
        self._transaction = transaction
        self._address = None

    def wait_for_deployment(self) -> None:
        if self._address is not None:
            return

        receipt = self._transaction.wait(1)
        if not receipt.get("contractAddress"):
            raise DeploymentFailure("Deployment receipt carries no contract address.")
        self._address = self.web3.to_checksum_address(receipt["contractAddress"])

    def get_address(self) -> str:
        if self._address is None:
            raise DeploymentFailure("Contract address is unknown until the deployment is mined.")
        return self._address

    def deployment_transaction(self) -> DeploymentTransaction:
        return self._transaction


class ContractFactory:
    def __init__(self, web3: Web3, artifact: ContractArtifact, account, poll_interval: float = POLL_INTERVAL):
        self.web3 = web3
        self.artifact = artifact
        self.account = account
        self.poll_interval = poll_interval

    def deploy(self, *args) -> DeployedContract:
        """Build, sign and send the contract-creation transaction.
        Args:
            *args: Constructor arguments, in declaration order.
        Returns:
            DeployedContract: Handle to the pending deployment.
        """
        deployer_address = self.account.address
        try:
            balance = self.web3.eth.get_balance(deployer_address)
        except Exception as e:
            raise DeploymentFailure(f"Failed to read balance of {deployer_address}: {str(e)}")

        if balance == 0:
            raise InsufficientFunds(f"Deployer account {deployer_address} has zero balance.")

        try:
            contract = self.web3.eth.contract(abi=self.artifact.abi, bytecode=self.artifact.bytecode)
            constructor = contract.constructor(*args)
            gas_estimate = constructor.estimate_gas({"from": deployer_address})
            construct_txn = constructor.build_transaction({
                "from": deployer_address,
                "nonce": self.web3.eth.get_transaction_count(deployer_address),
                "gas": int(gas_estimate * GAS_MULTIPLIER),
                "gasPrice": self.web3.eth.gas_price,
            })
            signed_txn = self.account.sign_transaction(construct_txn)
            tx_hash = self.web3.eth.send_raw_transaction(signed_txn.raw_transaction)
        except Exception as e:
            raise DeploymentFailure(f"Failed to deploy {self.artifact.contract_name}: {str(e)}")

        transaction = DeploymentTransaction(self.web3, tx_hash, poll_interval=self.poll_interval)
        return DeployedContract(self.web3, transaction)


def connect(node_url: str) -> Web3:
    web3 = Web3(Web3.HTTPProvider(node_url))
    if not web3.is_connected():
        raise ConnectionError(f"Unable to connect to Ethereum node at {node_url}")
    return web3


def get_contract_factory(contract_name: str, settings: DeploySettings) -> ContractFactory:
    """Create a factory that deploys `contract_name` from the configured deployer account."""
    if not settings.private_key:
        raise EnvironmentError("Missing ETH_OPERATOR_PRIVATE_KEY environment variable in .env file.")

    private_key = settings.private_key if settings.private_key.startswith("0x") else "0x" + settings.private_key
    account = Account.from_key(private_key)

    artifact = load_artifact(contract_name, settings.artifacts_dir)
    web3 = connect(settings.node_url)
    return ContractFactory(web3, artifact, account)
