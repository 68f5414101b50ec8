"""
Artifact Loader
Reads compiled contracts from the Hardhat artifacts directory
"""

import json
from pathlib import Path
from typing import Dict, Union
from loguru import logger

from .exceptions import ResolutionError


def find_artifact(contract_name: str, artifacts_dir: Union[str, Path] = "artifacts") -> Path:
    """
    Locate the artifact file for a contract

    Accepts a bare name ("SixElements") or a fully qualified one
    ("contracts/SixElements.sol:SixElements").

    Args:
        contract_name: Contract name
        artifacts_dir: Hardhat artifacts root

    Returns:
        Path to the artifact JSON
    """
    root = Path(artifacts_dir)

    if ':' in contract_name:
        source, name = contract_name.rsplit(':', 1)
        path = root / source / f"{name}.json"
        if not path.is_file():
            raise ResolutionError(
                f"Artifact for contract \"{contract_name}\" not found at {path}. "
                "Run 'npx hardhat compile' first"
            )
        return path

    matches = sorted(
        path for path in root.rglob(f"{contract_name}.json")
        if path.relative_to(root).parts[0] != 'build-info'
    )

    if not matches:
        raise ResolutionError(
            f"Artifact for contract \"{contract_name}\" not found in {root}. "
            "Run 'npx hardhat compile' first"
        )

    if len(matches) > 1:
        candidates = ', '.join(
            f"{path.parent.relative_to(root).as_posix()}:{contract_name}" for path in matches
        )
        raise ResolutionError(
            f"Multiple artifacts for contract \"{contract_name}\", "
            f"use a fully qualified name: {candidates}"
        )

    return matches[0]


def load_artifact(contract_name: str, artifacts_dir: Union[str, Path] = "artifacts") -> Dict:
    """
    Load ABI and creation bytecode for a contract

    Raises:
        ResolutionError: artifact missing, unreadable, or not deployable
    """
    path = find_artifact(contract_name, artifacts_dir)

    try:
        with open(path, 'r') as f:
            artifact = json.load(f)
    except (OSError, ValueError) as e:
        raise ResolutionError(f"Could not read artifact {path}: {e}") from e

    abi = artifact.get('abi')
    bytecode = artifact.get('bytecode') or ''

    if not isinstance(abi, list):
        raise ResolutionError(f"Artifact {path} has no ABI")

    if bytecode in ('', '0x'):
        # Interfaces and abstract contracts compile to empty bytecode
        raise ResolutionError(
            f"Contract \"{contract_name}\" is abstract or an interface and can't be deployed"
        )

    logger.debug(f"Loaded artifact for {contract_name} from {path}")
    return artifact
