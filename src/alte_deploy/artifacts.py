import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict

from alte_deploy.errors import ContractFactoryNotFound


@dataclass
class ContractArtifact:
    contract_name: str
    abi: List[Dict]
    bytecode: str
    source_path: Path


def find_artifact_path(contract_name: str, artifacts_dir: str) -> Path:
    """Locate the compiled artifact of a contract.
    Args:
        contract_name (str): Name of the contract, e.g. "AlteToken".
        artifacts_dir (str): Root of the compilation output (Hardhat layout).
    Returns:
        Path: Path to the "<contract_name>.json" artifact.
    """
    root = Path(artifacts_dir)
    if not root.is_dir():
        raise ContractFactoryNotFound(f"Artifacts directory {root} not found. Please compile the contracts first.")

    # Hardhat writes debug files next to the artifact as "<Name>.dbg.json"
    matches = sorted(p for p in root.rglob(f"{contract_name}.json") if p.is_file())
    if not matches:
        raise ContractFactoryNotFound(f"No artifact for contract {contract_name} found in {root}.")
    return matches[0]


def load_artifact(contract_name: str, artifacts_dir: str) -> ContractArtifact:
    """Load ABI and deployment bytecode of a compiled contract.
    Args:
        contract_name (str): Name of the contract.
        artifacts_dir (str): Root of the compilation output.
    Returns:
        ContractArtifact: The ABI and the 0x-prefixed bytecode.
    """
    path = find_artifact_path(contract_name, artifacts_dir)

    with open(path, "r") as f:
        data = json.load(f)

    abi = data.get("abi")
    bytecode = data.get("bytecode") or ""
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object", "")

    if not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode

    if abi is None or bytecode == "0x":
        raise ContractFactoryNotFound(f"Artifact {path} has no deployable bytecode for {contract_name}.")

    return ContractArtifact(contract_name=contract_name, abi=abi, bytecode=bytecode, source_path=path)
