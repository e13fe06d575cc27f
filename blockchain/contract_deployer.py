"""
Contract Deployer
Submits contract deployment transactions and waits for confirmation
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger
from dotenv import load_dotenv

from toolchain.compiler import SolidityCompiler
from toolchain.compiler_settings import load_compiler_settings
from toolchain.errors import DeploymentError
from .network import connect

load_dotenv()


@dataclass(frozen=True)
class PendingDeployment:
    """Deployment transaction that has been sent but not yet mined"""
    contract_name: str
    tx_hash: bytes
    abi: list


@dataclass(frozen=True)
class DeployedContract:
    """Deployment confirmed on-chain"""
    contract_name: str
    address: str
    tx_hash: bytes
    receipt: Dict


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of a successful deployment run"""
    contract_address: str
    deployment_transaction: bytes


class ContractDeployer:
    """
    Deploys compiled contracts to a single network

    Transactions are signed with DEPLOYER_PRIVATE_KEY when it is set,
    otherwise sent from the node's first unlocked account.
    """

    def __init__(self, w3: Web3, compiler: SolidityCompiler, private_key: Optional[str] = None):
        """
        Initialize Contract Deployer

        Args:
            w3: Connected Web3 instance
            compiler: Compiler used to resolve contract artifacts
            private_key: Deployer key (None = use node account)
        """
        self.w3 = w3
        self.compiler = compiler
        self.account = Account.from_key(private_key) if private_key else None

    @classmethod
    def from_environment(cls, network_name: Optional[str] = None) -> "ContractDeployer":
        """Build a deployer from config files and environment variables"""
        compiler = SolidityCompiler(load_compiler_settings())
        w3 = connect(network_name)
        return cls(w3, compiler, os.getenv('DEPLOYER_PRIVATE_KEY'))

    def _sender(self) -> str:
        """Address deployment transactions are sent from"""
        if self.account is not None:
            return self.account.address

        accounts = self.w3.eth.accounts
        if not accounts:
            raise DeploymentError("No unlocked node account; set DEPLOYER_PRIVATE_KEY")

        return accounts[0]

    def deploy(self, contract_name: str) -> PendingDeployment:
        """
        Send the deployment transaction for a contract

        Args:
            contract_name: Name of the compiled contract

        Returns:
            Pending deployment handle
        """
        artifact = self.compiler.get_artifact(contract_name)
        contract = self.w3.eth.contract(abi=artifact['abi'], bytecode=artifact['bytecode'])
        sender = self._sender()

        logger.debug(f"Deploying {contract_name} from {sender}")

        if self.account is not None:
            transaction = contract.constructor().build_transaction({
                'from': sender,
                'nonce': self.w3.eth.get_transaction_count(sender),
                'chainId': self.w3.eth.chain_id
            })
            signed_tx = self.account.sign_transaction(transaction)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            tx_hash = contract.constructor().transact({'from': sender})

        logger.debug(f"Deployment transaction sent: {tx_hash.hex()}")
        return PendingDeployment(contract_name, tx_hash, artifact['abi'])

    def wait_for_deployment(self, pending: PendingDeployment) -> DeployedContract:
        """
        Block until the deployment transaction is mined

        Uses the client's default receipt timeout.
        """
        receipt = self.w3.eth.wait_for_transaction_receipt(pending.tx_hash)

        if receipt['status'] != 1:
            raise DeploymentError(
                f"Deployment of {pending.contract_name} reverted (tx {pending.tx_hash.hex()})"
            )

        address = receipt['contractAddress']
        if not address:
            raise DeploymentError(f"No contract address in receipt for {pending.tx_hash.hex()}")

        logger.debug(f"{pending.contract_name} mined in block {receipt['blockNumber']}")
        return DeployedContract(pending.contract_name, address, pending.tx_hash, receipt)

    def get_address(self, deployed: DeployedContract) -> str:
        """Checksummed address of a confirmed deployment"""
        return Web3.to_checksum_address(deployed.address)
