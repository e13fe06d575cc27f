"""
Blockchain Interaction Package
Handles network connection and contract deployment
"""

from .network import connect
from .contract_deployer import (
    ContractDeployer,
    PendingDeployment,
    DeployedContract,
    DeploymentResult
)

__all__ = [
    'connect',
    'ContractDeployer',
    'PendingDeployment',
    'DeployedContract',
    'DeploymentResult'
]
