"""
Toolchain Errors
Every failure raised while building or deploying a contract
"""


class DeploymentFailed(Exception):
    """Base class: any error that aborts a deployment run"""


class CompilationError(DeploymentFailed):
    """Solidity sources could not be compiled or an artifact is missing"""


class NetworkError(DeploymentFailed):
    """Target network is unknown, misconfigured or unreachable"""


class DeploymentError(DeploymentFailed):
    """Deployment transaction was rejected or reverted on-chain"""
