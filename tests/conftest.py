"""Shared pytest fixtures for deployment tests."""

import json
from pathlib import Path

import pytest
from loguru import logger


SIX_ELEMENTS_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "_signer", "type": "address"}],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "name",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function"
    }
]


def write_artifact(artifacts_dir: Path, source: str, name: str, bytecode: str = "0x6080604052348015600f57600080fd5b50") -> Path:
    """Write a Hardhat-style artifact and its debug file"""
    contract_dir = artifacts_dir / "contracts" / source
    contract_dir.mkdir(parents=True, exist_ok=True)

    path = contract_dir / f"{name}.json"
    path.write_text(json.dumps({
        "_format": "hh-sol-artifact-1",
        "contractName": name,
        "sourceName": f"contracts/{source}",
        "abi": SIX_ELEMENTS_ABI,
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
    }))
    (contract_dir / f"{name}.dbg.json").write_text(json.dumps({
        "_format": "hh-sol-dbg-1",
        "buildInfo": "../../build-info/abc.json"
    }))
    return path


@pytest.fixture
def artifacts_dir(tmp_path: Path) -> Path:
    """Artifacts root holding a compiled SixElements contract"""
    root = tmp_path / "artifacts"
    write_artifact(root, "SixElements.sol", "SixElements")
    return root


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks bound to captured streams after each test"""
    yield
    logger.remove()
